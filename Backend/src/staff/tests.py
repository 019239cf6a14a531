from datetime import timedelta

import pytest
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.urls import reverse
from django.utils import timezone
from rest_framework.test import APIClient

from staff.models import Department, Employee

User = get_user_model()

EMPLOYEE = {
    "first_name": "Marie",
    "last_name": "Curie",
    "email": "marie@example.com",
    "age": 30,
    "department_name": "R&D",
}


@pytest.fixture
def user():
    return User.objects.create_user(username="bob", password="x")


@pytest.fixture
def api(user):
    c = APIClient()
    c.force_authenticate(user)
    return c


@pytest.mark.django_db
def test_create_employee_full_flow(api, user):
    r = api.post(reverse("staff_employees"), EMPLOYEE, format="json")
    assert r.status_code == 201, r.content

    # department_name en écriture seule, department / created_by en lecture seule
    assert "department_name" not in r.data
    assert r.data["department"] == "R&D"
    assert r.data["created_by"] == "bob"

    employee = Employee.objects.get(pk=r.data["id"])
    assert employee.created_by == user
    assert employee.hire_date == timezone.localdate()


@pytest.mark.django_db
def test_client_cannot_set_created_by(api, user):
    other = User.objects.create_user(username="eve", password="x")
    r = api.post(reverse("staff_employees"), {**EMPLOYEE, "created_by": other.pk}, format="json")
    assert r.status_code == 201
    assert Employee.objects.get(pk=r.data["id"]).created_by == user


@pytest.mark.django_db
def test_serializer_rejects_underage(api):
    r = api.post(reverse("staff_employees"), {**EMPLOYEE, "age": 15}, format="json")
    assert r.status_code == 400
    assert "age" in r.data["error"]["detail"]
    assert not Employee.objects.exists()
    # le département n'est résolu qu'après validation
    assert not Department.objects.exists()


@pytest.mark.django_db
def test_minimum_age_is_accepted(api):
    r = api.post(reverse("staff_employees"), {**EMPLOYEE, "age": 18}, format="json")
    assert r.status_code == 201, r.content


@pytest.mark.django_db
def test_min_age_follows_settings(api, settings):
    settings.EMPLOYEE_MIN_AGE = 21
    r = api.post(reverse("staff_employees"), {**EMPLOYEE, "age": 19}, format="json")
    assert r.status_code == 400
    assert "21" in r.data["error"]["detail"]["age"][0]

    with pytest.raises(ValidationError):
        Employee.objects.create(first_name="A", last_name="B", email="ab@example.com", age=19)


@pytest.mark.django_db
def test_future_hire_date_rejected_through_model_clean(api):
    future = (timezone.localdate() + timedelta(days=30)).isoformat()
    r = api.post(reverse("staff_employees"), {**EMPLOYEE, "hire_date": future}, format="json")
    assert r.status_code == 400
    assert "hire_date" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_model_save_enforces_rules_outside_api():
    with pytest.raises(ValidationError) as exc:
        Employee(first_name="Jo", last_name="Kid", email="jo@example.com", age=15).save()
    assert "age" in exc.value.message_dict
    assert not Employee.objects.exists()


@pytest.mark.django_db
def test_model_save_rejects_future_hire_date_outside_api():
    tomorrow = timezone.localdate() + timedelta(days=1)
    with pytest.raises(ValidationError) as exc:
        Employee(first_name="Jo", last_name="Doe", email="jo@example.com", age=30, hire_date=tomorrow).save()
    assert "hire_date" in exc.value.message_dict
    assert not Employee.objects.exists()


@pytest.mark.django_db
def test_model_lowercases_email():
    employee = Employee.objects.create(first_name="A", last_name="B", email="A.B@Example.COM", age=40)
    assert employee.email == "a.b@example.com"


@pytest.mark.django_db
def test_duplicate_email_any_case_rejected(api):
    assert api.post(reverse("staff_employees"), EMPLOYEE, format="json").status_code == 201
    r = api.post(
        reverse("staff_employees"),
        {**EMPLOYEE, "email": "MARIE@example.com", "first_name": "Autre"},
        format="json",
    )
    assert r.status_code == 400
    assert "email" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_department_resolved_with_get_or_create(api):
    api.post(reverse("staff_employees"), EMPLOYEE, format="json")
    api.post(
        reverse("staff_employees"),
        {**EMPLOYEE, "email": "pierre@example.com", "first_name": "Pierre", "department_name": " r&d "},
        format="json",
    )
    assert Department.objects.count() == 1
    assert Department.objects.get().employees.count() == 2

    r = api.get(reverse("staff_departments"))
    assert r.status_code == 200
    assert r.data[0]["name"] == "R&D"
    assert r.data[0]["employee_count"] == 2


@pytest.mark.django_db
def test_patch_validates_and_moves_department(api):
    r = api.post(reverse("staff_employees"), EMPLOYEE, format="json")
    url = reverse("staff_employee_detail", kwargs={"pk": r.data["id"]})

    r = api.patch(url, {"age": 12}, format="json")
    assert r.status_code == 400
    assert Employee.objects.get().age == 30

    r = api.patch(url, {"department_name": "Ventes", "email": "marie@example.com"}, format="json")
    assert r.status_code == 200, r.content
    assert r.data["department"] == "Ventes"


@pytest.mark.django_db
def test_list_filters_by_department(api):
    api.post(reverse("staff_employees"), EMPLOYEE, format="json")
    api.post(
        reverse("staff_employees"),
        {**EMPLOYEE, "email": "paul@example.com", "first_name": "Paul", "department_name": "Ventes"},
        format="json",
    )

    r = api.get(reverse("staff_employees"), {"department": "ventes"})
    assert r.status_code == 200
    assert [e["first_name"] for e in r.data] == ["Paul"]


@pytest.mark.django_db
def test_delete_employee(api):
    r = api.post(reverse("staff_employees"), EMPLOYEE, format="json")
    r = api.delete(reverse("staff_employee_detail", kwargs={"pk": r.data["id"]}))
    assert r.status_code == 204
    assert not Employee.objects.exists()


@pytest.mark.django_db
def test_requires_authentication():
    r = APIClient().post(reverse("staff_employees"), EMPLOYEE, format="json")
    assert r.status_code == 401
    assert r.data["error"]["code"] == "not_authenticated"


@pytest.mark.django_db
def test_note_error_example_matches_api(api, note_examples):
    (example,) = note_examples("validation_layers.md")

    r = api.post(reverse("staff_employees"), {**EMPLOYEE, "age": 15}, format="json")
    assert r.json() == example


@pytest.mark.django_db
def test_accented_department_names_are_not_duplicated(api):
    first, created = Department.objects.get_or_create_by_name("Ingénierie")
    assert created is True

    again, created = Department.objects.get_or_create_by_name("  INGÉNIERIE ")
    assert created is False
    assert again.pk == first.pk

    api.post(reverse("staff_employees"), {**EMPLOYEE, "department_name": "ingénierie"}, format="json")
    assert Department.objects.count() == 1

    r = api.get(reverse("staff_employees"), {"department": "INGÉNIERIE"})
    assert [e["first_name"] for e in r.data] == ["Marie"]
