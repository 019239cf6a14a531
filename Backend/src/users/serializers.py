import logging

from django.contrib.auth import get_user_model
from django.contrib.auth.password_validation import validate_password
from rest_framework import serializers

logger = logging.getLogger(__name__)

User = get_user_model()


class UserSerializer(serializers.ModelSerializer):
    """
    Profil utilisateur (lecture + PATCH partiel).

    - `password` n'est pas un champ: il n'apparaît jamais en sortie.
    - Les champs read_only envoyés dans un PATCH sont ignorés sans erreur
      (ex: {"is_staff": true} ne donne aucun droit).
    """

    class Meta:
        model = User
        fields = ["id", "username", "email", "first_name", "last_name", "is_staff", "date_joined"]
        read_only_fields = ["id", "username", "is_staff", "date_joined"]


class RegisterSerializer(serializers.ModelSerializer):
    """Serializer d'inscription: username + password requis, password en écriture seule."""

    password = serializers.CharField(
        write_only=True,
        required=True,
        trim_whitespace=False,
        style={"input_type": "password"},
    )

    class Meta:
        model = User
        fields = ["id", "username", "email", "password", "first_name", "last_name"]
        read_only_fields = ["id"]

    def validate_username(self, value: str) -> str:
        if User.objects.filter(username__iexact=value).exists():
            raise serializers.ValidationError("Ce nom d'utilisateur est déjà pris.")
        return value

    def validate(self, attrs):
        # Les validateurs Django ont besoin de l'utilisateur (similarité username/email)
        candidate = User(**{k: v for k, v in attrs.items() if k != "password"})
        validate_password(attrs["password"], candidate)
        return attrs

    def create(self, validated_data):
        password = validated_data.pop("password")
        user = User(**validated_data)
        user.set_password(password)
        user.save()
        logger.info(f"[users] Nouvel utilisateur id={user.pk} username={user.username}")
        return user


class ChangePasswordSerializer(serializers.Serializer):
    """Serializer pour changer le mot de passe de l'utilisateur connecté."""

    old_password = serializers.CharField(write_only=True, required=True, trim_whitespace=False)
    new_password = serializers.CharField(write_only=True, required=True, trim_whitespace=False)

    def validate(self, attrs):
        user = self.context["request"].user
        if not user.check_password(attrs["old_password"]):
            raise serializers.ValidationError({"old_password": "Ancien mot de passe incorrect."})
        if attrs["old_password"] == attrs["new_password"]:
            raise serializers.ValidationError({"new_password": "Le nouveau mot de passe doit être différent."})
        validate_password(attrs["new_password"], user)
        return attrs

    def save(self, **kwargs):
        user = self.context["request"].user
        user.set_password(self.validated_data["new_password"])
        user.save(update_fields=["password"])
        logger.info(f"[users] Mot de passe modifié pour id={user.pk}")
        return user
