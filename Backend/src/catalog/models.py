import logging
from typing import Tuple

from django.core.exceptions import ValidationError
from django.db import models
from django.utils.text import slugify

from common.utils import name_key

logger = logging.getLogger(__name__)


class CategoryManager(models.Manager):
    def get_or_create_by_name(self, name: str, **defaults) -> Tuple["Category", bool]:
        """
        Retourne (categorie, created) pour `name`, sans tenir compte de la casse.

        - "Livres", "livres" et "  LIVRES " désignent la même catégorie (accents compris:
          "Électronique" == "électronique").
        - `defaults` ne sert qu'à la création; une catégorie existante n'est pas modifiée.
        """
        name = (name or "").strip()
        category, created = self.get_or_create(name_key=name_key(name), defaults={**defaults, "name": name})
        if created:
            logger.info(f"[catalog] Catégorie créée: {category.name!r} (id={category.pk})")
        return category, created


class Category(models.Model):
    name = models.CharField(max_length=100, unique=True)
    # name.strip().casefold(), unique: doublons refusés par la base quelle que soit la casse
    name_key = models.CharField(max_length=200, unique=True, editable=False)
    slug = models.SlugField(max_length=120, unique=True, blank=True)
    description = models.TextField(blank=True, default="")
    created_at = models.DateTimeField(auto_now_add=True)

    objects = CategoryManager()

    class Meta:
        verbose_name = "Catégorie"
        verbose_name_plural = "Catégories"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    def clean(self):
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError({"name": "Le nom de la catégorie est obligatoire."})
        self.name_key = name_key(self.name)

    def save(self, *args, **kwargs):
        # Unicité laissée à la base: get_or_create rattrape l'IntegrityError d'une création concurrente
        self.full_clean(exclude=["slug", "name_key"], validate_unique=False)
        if not self.slug:
            self.slug = self._unique_slug()
        super().save(*args, **kwargs)

    def _unique_slug(self) -> str:
        # "Livres" et "Livres !" donnent le même slug -> suffixe numérique
        base = slugify(self.name) or "categorie"
        slug, n = base, 2
        while Category.objects.filter(slug=slug).exclude(pk=self.pk).exists():
            slug = f"{base}-{n}"
            n += 1
        return slug
