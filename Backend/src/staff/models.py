"""
Modèles du personnel.

Employee porte ses propres règles (clean) et les applique à chaque save():
une création par l'admin, le shell ou une commande passe par les mêmes
contrôles qu'une création par l'API.
"""

import logging
from typing import Tuple

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import models
from django.utils import timezone

from common.utils import name_key

logger = logging.getLogger(__name__)


def minimum_age() -> int:
    """Âge minimal d'un employé (settings.EMPLOYEE_MIN_AGE, 18 par défaut)."""
    return int(getattr(settings, "EMPLOYEE_MIN_AGE", 18))


class DepartmentManager(models.Manager):
    def get_or_create_by_name(self, name: str) -> Tuple["Department", bool]:
        name = (name or "").strip()
        department, created = self.get_or_create(name_key=name_key(name), defaults={"name": name})
        if created:
            logger.info(f"[staff] Département créé: {department.name!r} (id={department.pk})")
        return department, created


class Department(models.Model):
    name = models.CharField(max_length=100, unique=True)
    name_key = models.CharField(max_length=200, unique=True, editable=False)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = DepartmentManager()

    class Meta:
        verbose_name = "Département"
        verbose_name_plural = "Départements"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    def save(self, *args, **kwargs):
        self.name = (self.name or "").strip()
        self.name_key = name_key(self.name)
        super().save(*args, **kwargs)


class Employee(models.Model):
    first_name = models.CharField(max_length=150)
    last_name = models.CharField(max_length=150)
    email = models.EmailField(unique=True)
    age = models.PositiveSmallIntegerField()
    hire_date = models.DateField(default=timezone.localdate)
    department = models.ForeignKey(
        Department,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="employees",
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        null=True,
        blank=True,
        on_delete=models.SET_NULL,
        related_name="+",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = "Employé"
        verbose_name_plural = "Employés"
        ordering = ["last_name", "first_name", "id"]

    def __str__(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def clean(self):
        errors = {}
        if self.email:
            self.email = self.email.strip().lower()

        minimum = minimum_age()
        if self.age is not None and self.age < minimum:
            errors["age"] = f"L'âge minimum est de {minimum} ans."

        if self.hire_date and self.hire_date > timezone.localdate():
            errors["hire_date"] = "La date d'embauche ne peut pas être dans le futur."

        if errors:
            raise ValidationError(errors)

    def save(self, *args, **kwargs):
        # Dernière ligne de défense, quel que soit le point d'entrée
        self.full_clean()
        super().save(*args, **kwargs)
