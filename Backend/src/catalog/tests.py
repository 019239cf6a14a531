from io import StringIO

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.core.management import call_command
from django.db.models.query import QuerySet
from django.urls import reverse
from rest_framework.test import APIClient

from catalog.management.commands.seed_categories import DEFAULT_CATEGORIES
from catalog.models import Category

User = get_user_model()


@pytest.fixture
def auth_client():
    c = APIClient()
    c.force_authenticate(User.objects.create_user(username="bob", password="x"))
    return c


@pytest.mark.django_db
def test_get_or_create_by_name_is_case_insensitive():
    first, created = Category.objects.get_or_create_by_name("Livres", description="Romans")
    assert created is True
    assert first.slug == "livres"

    again, created = Category.objects.get_or_create_by_name("  LIVRES ", description="autre")
    assert created is False
    assert again.pk == first.pk
    # defaults ignorés pour un objet existant
    assert again.description == "Romans"
    assert Category.objects.count() == 1


@pytest.mark.django_db
def test_post_returns_201_then_200(auth_client):
    url = reverse("catalog_categories")

    r = auth_client.post(url, {"name": "Livres", "description": "Romans"}, format="json")
    assert r.status_code == 201, r.content
    first_id = r.data["id"]

    r = auth_client.post(url, {"name": "livres"}, format="json")
    assert r.status_code == 200, r.content
    assert r.data["id"] == first_id
    assert r.data["name"] == "Livres"
    assert Category.objects.count() == 1


@pytest.mark.django_db
def test_post_ignores_read_only_slug(auth_client):
    r = auth_client.post(reverse("catalog_categories"), {"name": "Maison", "slug": "pirate"}, format="json")
    assert r.status_code == 201
    assert r.data["slug"] == "maison"


@pytest.mark.django_db
def test_post_rejects_blank_name(auth_client):
    r = auth_client.post(reverse("catalog_categories"), {"name": "   "}, format="json")
    assert r.status_code == 400
    assert "name" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_anonymous_can_read_but_not_write():
    Category.objects.create(name="Sport")
    anon = APIClient()

    r = anon.get(reverse("catalog_categories"))
    assert r.status_code == 200
    assert [c["name"] for c in r.data] == ["Sport"]

    r = anon.get(reverse("catalog_category_detail", kwargs={"slug": "sport"}))
    assert r.status_code == 200

    r = anon.post(reverse("catalog_categories"), {"name": "Jouets"}, format="json")
    assert r.status_code == 401


@pytest.mark.django_db
def test_colliding_slugs_get_a_suffix():
    a = Category.objects.create(name="Livres")
    b = Category.objects.create(name="Livres !")
    assert (a.slug, b.slug) == ("livres", "livres-2")


@pytest.mark.django_db
def test_model_rejects_blank_name():
    with pytest.raises(ValidationError):
        Category.objects.create(name="   ")


@pytest.mark.django_db
def test_seed_categories_is_idempotent():
    out = StringIO()
    call_command("seed_categories", stdout=out)
    assert Category.objects.count() == len(DEFAULT_CATEGORIES)
    assert f"{len(DEFAULT_CATEGORIES)} créée(s), 0 déjà présente(s)" in out.getvalue()

    out = StringIO()
    call_command("seed_categories", stdout=out)
    assert Category.objects.count() == len(DEFAULT_CATEGORIES)
    assert f"0 créée(s), {len(DEFAULT_CATEGORIES)} déjà présente(s)" in out.getvalue()


@pytest.mark.django_db
def test_seed_categories_with_names():
    Category.objects.create(name="Livres")
    call_command("seed_categories", names="livres, Jardin", stdout=StringIO())
    assert sorted(Category.objects.values_list("name", flat=True)) == ["Jardin", "Livres"]


@pytest.mark.django_db
def test_accented_names_match_any_case(auth_client):
    first, created = Category.objects.get_or_create_by_name("Électronique")
    assert created is True
    assert first.slug == "electronique"

    again, created = Category.objects.get_or_create_by_name("électronique")
    assert created is False
    assert again.pk == first.pk

    r = auth_client.post(reverse("catalog_categories"), {"name": "ÉLECTRONIQUE"}, format="json")
    assert r.status_code == 200
    assert r.data["id"] == first.pk
    assert Category.objects.count() == 1


@pytest.mark.django_db
def test_concurrent_insert_falls_back_to_existing_row(monkeypatch):
    existing = Category.objects.create(name="Livres")

    # Simule une autre requête qui a créé "Livres" entre la lecture et l'insertion
    real_get = QuerySet.get
    calls = []

    def get_missing_first(self, *args, **kwargs):
        calls.append(kwargs)
        if len(calls) == 1:
            raise self.model.DoesNotExist
        return real_get(self, *args, **kwargs)

    monkeypatch.setattr(QuerySet, "get", get_missing_first)

    category, created = Category.objects.get_or_create_by_name("Livres")
    assert created is False
    assert category.pk == existing.pk
    assert len(calls) == 2
    assert Category.objects.count() == 1
