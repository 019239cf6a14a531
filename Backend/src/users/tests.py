import pytest
from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework.test import APIClient

User = get_user_model()

PAYLOAD = {
    "username": "alice",
    "email": "alice@example.com",
    "password": "StrongPassw0rd!",
    "first_name": "Alice",
    "last_name": "Doe",
}


def _login(client, username="alice", password="StrongPassw0rd!"):
    r = client.post(
        reverse("token_obtain_pair"),
        {"username": username, "password": password},
        format="json",
    )
    assert r.status_code == 200, r.content
    client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['access']}")
    return client


@pytest.mark.django_db
def test_register_and_login_and_me():
    client = APIClient()

    # 1) Register
    r = client.post(reverse("register"), PAYLOAD, format="json")
    assert r.status_code == 201, r.content
    assert "password" not in r.data
    assert r.data["username"] == "alice"

    # mot de passe stocké haché
    user = User.objects.get(username="alice")
    assert user.password != PAYLOAD["password"]
    assert user.check_password(PAYLOAD["password"])

    # 2) Login (JWT) + /me
    _login(client)
    r = client.get(reverse("me"))
    assert r.status_code == 200
    assert r.data["username"] == "alice"
    assert "password" not in r.data

    # 3) Change password
    r = client.post(
        reverse("change_password"),
        {"old_password": "StrongPassw0rd!", "new_password": "An0therStrongPass!"},
        format="json",
    )
    assert r.status_code == 200
    user.refresh_from_db()
    assert user.check_password("An0therStrongPass!")


@pytest.mark.django_db
@pytest.mark.parametrize("missing", ["username", "password"])
def test_register_requires_username_and_password(missing):
    data = {k: v for k, v in PAYLOAD.items() if k != missing}
    r = APIClient().post(reverse("register"), data, format="json")
    assert r.status_code == 400
    assert missing in r.data["error"]["detail"]
    assert not User.objects.exists()


@pytest.mark.django_db
def test_register_rejects_weak_password():
    r = APIClient().post(reverse("register"), {**PAYLOAD, "password": "123"}, format="json")
    assert r.status_code == 400
    assert not User.objects.exists()


@pytest.mark.django_db
def test_register_rejects_duplicate_username_any_case():
    client = APIClient()
    assert client.post(reverse("register"), PAYLOAD, format="json").status_code == 201
    r = client.post(reverse("register"), {**PAYLOAD, "username": "ALICE"}, format="json")
    assert r.status_code == 400
    assert "username" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_patch_me_ignores_read_only_fields():
    client = APIClient()
    client.post(reverse("register"), PAYLOAD, format="json")
    _login(client)

    r = client.patch(
        reverse("me"),
        {"first_name": "Alicia", "is_staff": True, "username": "mallory", "password": "x"},
        format="json",
    )
    assert r.status_code == 200, r.content
    assert r.data["first_name"] == "Alicia"
    assert r.data["is_staff"] is False
    assert r.data["username"] == "alice"

    user = User.objects.get(pk=r.data["id"])
    assert user.is_staff is False
    assert user.check_password("StrongPassw0rd!")


@pytest.mark.django_db
def test_change_password_rejects_wrong_old_password():
    client = APIClient()
    client.post(reverse("register"), PAYLOAD, format="json")
    _login(client)

    r = client.post(
        reverse("change_password"),
        {"old_password": "nope", "new_password": "An0therStrongPass!"},
        format="json",
    )
    assert r.status_code == 400
    assert "old_password" in r.data["error"]["detail"]


@pytest.mark.django_db
def test_refresh_token_issues_new_access_token():
    client = APIClient()
    client.post(reverse("register"), PAYLOAD, format="json")
    r = client.post(
        reverse("token_obtain_pair"),
        {"username": "alice", "password": "StrongPassw0rd!"},
        format="json",
    )
    refresh = r.data["refresh"]

    r = client.post(reverse("token_refresh"), {"refresh": refresh}, format="json")
    assert r.status_code == 200, r.content
    assert "access" in r.data

    client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['access']}")
    assert client.get(reverse("me")).data["username"] == "alice"

    r = client.post(reverse("token_refresh"), {"refresh": "pas-un-jeton"}, format="json")
    assert r.status_code == 401


@pytest.mark.django_db
def test_me_requires_authentication():
    r = APIClient().get(reverse("me"))
    assert r.status_code == 401
    assert r.data["error"]["status"] == 401


@pytest.mark.django_db
def test_note_examples_match_api(note_examples):
    request_example, response_example = note_examples("read_only_write_only.md")

    # La requête d'exemple contient toujours username + password
    assert {"username", "password"} <= set(request_example)
    # La réponse d'exemple ne contient jamais password
    assert "password" not in response_example

    client = APIClient()
    r = client.post(reverse("register"), request_example, format="json")
    assert r.status_code == 201, r.content

    _login(client, request_example["username"], request_example["password"])
    r = client.get(reverse("me"))
    assert set(r.data) == set(response_example)
