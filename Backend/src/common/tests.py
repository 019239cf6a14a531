import pytest
from django.core.exceptions import ValidationError as DjangoValidationError
from django.urls import reverse
from rest_framework.test import APIClient

from common.exceptions import UserFacingAPIException, custom_exception_handler
from common.utils import env_bool, env_int, env_list


@pytest.mark.django_db
def test_health_and_ping():
    client = APIClient()

    r = client.get(reverse("health"))
    assert r.status_code == 200
    assert r.json()["status"] == "ok"
    assert r.json()["database"] == "ok"

    r = client.get(reverse("ping"))
    assert r.status_code == 200
    assert r.json()["pong"] is True


@pytest.mark.django_db
def test_info_exposes_min_age():
    r = APIClient().get(reverse("info"))
    assert r.status_code == 200
    assert r.json()["employee_min_age"] == 18
    assert "staff" in r.json()["apps"]


@pytest.mark.django_db
def test_request_id_generated_and_echoed():
    client = APIClient()

    r = client.get(reverse("ping"))
    assert r.headers["X-Request-ID"]

    r = client.get(reverse("ping"), HTTP_X_REQUEST_ID="abc-123")
    assert r.headers["X-Request-ID"] == "abc-123"
    assert r.json()["request_id"] == "abc-123"


def test_handler_wraps_drf_errors():
    r = custom_exception_handler(UserFacingAPIException("Oups"), {"view": None})
    assert r.status_code == 400
    assert r.data["error"]["code"] == "error"
    assert r.data["error"]["status"] == 400


def test_handler_turns_django_validation_error_into_400():
    r = custom_exception_handler(DjangoValidationError({"age": ["trop jeune"]}), {"view": None})
    assert r.status_code == 400
    assert r.data["error"]["detail"] == {"age": ["trop jeune"]}

    r = custom_exception_handler(DjangoValidationError("invalide"), {"view": None})
    assert r.data["error"]["detail"] == {"non_field_errors": ["invalide"]}


def test_handler_hides_unexpected_errors():
    r = custom_exception_handler(RuntimeError("boom"), {"view": None})
    assert r.status_code == 500
    assert r.data["error"]["code"] == "server_error"
    assert "boom" not in str(r.data)


def test_env_helpers(monkeypatch):
    monkeypatch.setenv("X_FLAG", "yes")
    monkeypatch.setenv("X_INT", "21")
    monkeypatch.setenv("X_BAD_INT", "vingt")
    monkeypatch.setenv("X_LIST", "a, b,,c")

    assert env_bool("X_FLAG") is True
    assert env_bool("X_MISSING", default=True) is True
    assert env_int("X_INT", 18) == 21
    assert env_int("X_BAD_INT", 18) == 18
    assert env_list("X_LIST") == ["a", "b", "c"]
    assert env_list("X_MISSING", ["d"]) == ["d"]
