from rest_framework import serializers

from .models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Création idempotente: `create()` passe par get_or_create.

    Le UniqueValidator généré pour `name` est retiré, sinon un doublon serait
    rejeté (400) avant d'arriver à get_or_create.
    Après save(), `self.created` indique si la catégorie vient d'être insérée.
    """

    created = False

    class Meta:
        model = Category
        fields = ["id", "name", "slug", "description", "created_at"]
        read_only_fields = ["id", "slug", "created_at"]
        extra_kwargs = {"name": {"validators": []}}

    def create(self, validated_data):
        name = validated_data.pop("name")
        category, self.created = Category.objects.get_or_create_by_name(name, **validated_data)
        return category
