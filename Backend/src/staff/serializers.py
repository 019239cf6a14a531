import copy
import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import serializers

from .models import Department, Employee, minimum_age

logger = logging.getLogger(__name__)


class DepartmentSerializer(serializers.ModelSerializer):
    employee_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Department
        fields = ["id", "name", "employee_count", "created_at"]
        read_only_fields = ["id", "name", "created_at"]


class EmployeeSerializer(serializers.ModelSerializer):
    """
    Couche serializer de la création d'un employé.

    - validate_age / validate_email : contrôles champ par champ
    - validate : rejoue Employee.clean() pour renvoyer un 400 propre
    - department_name (write_only) est résolu par get_or_create;
      department et created_by sont en lecture seule.
    """

    department = serializers.StringRelatedField(read_only=True)
    department_name = serializers.CharField(write_only=True, required=False, max_length=100)
    created_by = serializers.StringRelatedField(read_only=True)

    class Meta:
        model = Employee
        fields = [
            "id",
            "first_name",
            "last_name",
            "email",
            "age",
            "hire_date",
            "department",
            "department_name",
            "created_by",
            "created_at",
            "updated_at",
        ]
        read_only_fields = ["id", "created_at", "updated_at"]

    def validate_age(self, value: int) -> int:
        minimum = minimum_age()
        if value < minimum:
            raise serializers.ValidationError(f"L'âge minimum est de {minimum} ans.")
        return value

    def validate_email(self, value: str) -> str:
        value = value.strip().lower()
        qs = Employee.objects.filter(email__iexact=value)
        if self.instance is not None:
            qs = qs.exclude(pk=self.instance.pk)
        if qs.exists():
            raise serializers.ValidationError("Un employé utilise déjà cette adresse.")
        return value

    def validate(self, attrs):
        model_attrs = {k: v for k, v in attrs.items() if k != "department_name"}
        if self.instance is not None:
            candidate = copy.copy(self.instance)
            for key, value in model_attrs.items():
                setattr(candidate, key, value)
        else:
            candidate = Employee(**model_attrs)

        try:
            candidate.clean()
        except DjangoValidationError as e:
            raise serializers.ValidationError(e.message_dict) from e
        return attrs

    def _resolve_department(self, validated_data) -> None:
        name = validated_data.pop("department_name", None)
        if name:
            validated_data["department"], _ = Department.objects.get_or_create_by_name(name)

    def create(self, validated_data):
        self._resolve_department(validated_data)
        return super().create(validated_data)

    def update(self, instance, validated_data):
        self._resolve_department(validated_data)
        return super().update(instance, validated_data)
