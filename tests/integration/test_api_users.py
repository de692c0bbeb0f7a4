"""
Integration tests for /api/users endpoints.
Uses TestClient with the real use cases wired to an in-memory repository (no real DB).
"""
from unittest.mock import patch

import pytest

pytestmark = pytest.mark.integration
from fastapi.testclient import TestClient

from shop_api.core.security import read_token_subject, hash_password
from shop_api.di.base_container import BaseContainer
from shop_api.di.providers import AuthProvider, UserAdminProvider
from shop_api.domain.models.user import User
from shop_api.domain.repositories.user_repository import UserRepository


@pytest.fixture
def container(user_repo):
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repo)
    AuthProvider.register(container)
    UserAdminProvider.register(container)
    return container


@pytest.fixture
def client(container, mock_settings):
    """Create test client with the container patched at every use site."""
    from shop_api.main import app

    with patch("shop_api.api.v1.users_controller.get_container", return_value=container), patch(
        "shop_api.api.v1.dependencies.get_container", return_value=container
    ):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def admin_token(client, user_repo):
    admin = User(
        id="65a000000000000000000001",
        name="Admin",
        email="admin@example.com",
        hashed_password=hash_password("adminpass"),
        is_admin=True,
    )
    user_repo.users[admin.id] = admin
    response = client.post("/api/users/login", json={"email": "admin@example.com", "password": "adminpass"})
    assert response.status_code == 200
    return response.json()["token"]


def _auth(token):
    return {"Authorization": f"Bearer {token}"}


def _register(client, name="A", email="a@x.com", password="p1", **extra):
    return client.post("/api/users", json={"name": name, "email": email, "password": password, **extra})


class TestPublicEndpoints:

    def test_register_then_login_scenario(self, client):
        registered = _register(client)
        assert registered.status_code == 201
        body = registered.json()
        assert set(body) == {"_id", "name", "email", "isAdmin", "token"}
        assert body["isAdmin"] is False

        login = client.post("/api/users/login", json={"email": "a@x.com", "password": "p1"})
        assert login.status_code == 200
        assert read_token_subject(login.json()["token"]) == read_token_subject(body["token"])
        assert login.json()["_id"] == body["_id"]

        wrong = client.post("/api/users/login", json={"email": "a@x.com", "password": "wrong"})
        unknown = client.post("/api/users/login", json={"email": "nobody@x.com", "password": "p1"})
        assert wrong.status_code == unknown.status_code == 401
        assert wrong.json() == unknown.json() == {"detail": "Invalid email or password"}

    def test_duplicate_registration_returns_400(self, client):
        _register(client)
        response = _register(client, name="Again")
        assert response.status_code == 400
        assert response.json()["detail"] == "User already exists"

    def test_public_registration_cannot_grant_admin(self, client):
        response = _register(client, isAdmin=True)
        assert response.status_code == 201
        assert response.json()["isAdmin"] is False

    def test_blank_name_returns_400(self, client):
        response = _register(client, name="  ")
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid user data"

    @pytest.mark.parametrize("body", [
        {"email": "a@x.com", "password": "p"},
        {"name": "A", "password": "p"},
        {"name": "A", "email": "not-an-email", "password": "p"},
    ])
    def test_malformed_registration_returns_400(self, client, user_repo, body):
        response = client.post("/api/users", json=body)
        assert response.status_code == 400
        assert response.json() == {"detail": "Invalid user data"}
        assert user_repo.users == {}

    @pytest.mark.parametrize("body", [
        {"email": "nobody", "password": "p1"},
        {"email": "a@x.com"},
        {},
    ])
    def test_malformed_login_looks_like_bad_credentials(self, client, body):
        _register(client)
        response = client.post("/api/users/login", json=body)
        assert response.status_code == 401
        assert response.json() == {"detail": "Invalid email or password"}


class TestProfileEndpoints:

    def test_profile_requires_token(self, client):
        response = client.get("/api/users/profile")
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authorized, no token"

    def test_invalid_token_rejected(self, client):
        response = client.get("/api/users/profile", headers=_auth("garbage"))
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authorized, token failed"

    def test_get_profile_has_no_token(self, client):
        token = _register(client).json()["token"]
        response = client.get("/api/users/profile", headers=_auth(token))
        assert response.status_code == 200
        assert set(response.json()) == {"id", "name", "email", "isAdmin"}

    def test_update_profile_issues_new_token(self, client, user_repo):
        registered = _register(client).json()
        before = user_repo.users[registered["_id"]]

        response = client.put("/api/users/profile", json={}, headers=_auth(registered["token"]))
        assert response.status_code == 200
        assert response.json()["token"]
        assert user_repo.users[registered["_id"]] == before

        response = client.put(
            "/api/users/profile", json={"name": "Renamed"}, headers=_auth(registered["token"])
        )
        assert response.json()["name"] == "Renamed"
        assert response.json()["email"] == "a@x.com"

    def test_invalid_email_on_update_returns_400(self, client, user_repo):
        registered = _register(client).json()
        response = client.put(
            "/api/users/profile", json={"email": "broken"}, headers=_auth(registered["token"])
        )
        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid user data"
        assert user_repo.users[registered["_id"]].email == "a@x.com"

    def test_token_of_deleted_user_rejected(self, client, user_repo):
        registered = _register(client).json()
        del user_repo.users[registered["_id"]]
        response = client.get("/api/users/profile", headers=_auth(registered["token"]))
        assert response.status_code == 401


class TestAdminEndpoints:

    def test_non_admin_is_rejected(self, client):
        token = _register(client).json()["token"]
        response = client.get("/api/users", headers=_auth(token))
        assert response.status_code == 401
        assert response.json()["detail"] == "Not authorized as an admin"

    def test_list_users_hides_passwords(self, client, admin_token):
        _register(client)
        response = client.get("/api/users", headers=_auth(admin_token))
        assert response.status_code == 200
        users = response.json()
        assert {user["email"] for user in users} == {"admin@example.com", "a@x.com"}
        assert all("password" not in user for user in users)

    def test_promote_user_scenario(self, client, admin_token, user_repo):
        registered = _register(client).json()
        password_hash = user_repo.users[registered["_id"]].hashed_password

        response = client.put(
            f"/api/users/{registered['_id']}", json={"isAdmin": True}, headers=_auth(admin_token)
        )
        assert response.status_code == 200
        assert response.json() == {"_id": registered["_id"], "name": "A", "email": "a@x.com", "isAdmin": True}

        fetched = client.get(f"/api/users/{registered['_id']}", headers=_auth(admin_token))
        assert fetched.json()["isAdmin"] is True
        assert "password" not in fetched.json()
        assert user_repo.users[registered["_id"]].hashed_password == password_hash

        # The promoted user now passes admin-gated routes with their original token
        assert client.get("/api/users", headers=_auth(registered["token"])).status_code == 200

    def test_update_without_flag_demotes(self, client, admin_token):
        registered = _register(client).json()
        client.put(f"/api/users/{registered['_id']}", json={"isAdmin": True}, headers=_auth(admin_token))

        response = client.put(
            f"/api/users/{registered['_id']}", json={"name": "B"}, headers=_auth(admin_token)
        )
        assert response.json()["isAdmin"] is False
        assert response.json()["name"] == "B"

    def test_null_flag_demotes(self, client, admin_token):
        registered = _register(client).json()
        client.put(f"/api/users/{registered['_id']}", json={"isAdmin": True}, headers=_auth(admin_token))

        response = client.put(
            f"/api/users/{registered['_id']}", json={"isAdmin": None}, headers=_auth(admin_token)
        )
        assert response.status_code == 200
        assert response.json()["isAdmin"] is False

    def test_delete_then_get_is_404(self, client, admin_token):
        registered = _register(client).json()

        deleted = client.delete(f"/api/users/{registered['_id']}", headers=_auth(admin_token))
        assert deleted.status_code == 200
        assert deleted.json() == {"message": "User removed"}

        again = client.delete(f"/api/users/{registered['_id']}", headers=_auth(admin_token))
        assert again.status_code == 404
        fetched = client.get(f"/api/users/{registered['_id']}", headers=_auth(admin_token))
        assert fetched.status_code == 404

    def test_update_unknown_user_is_404(self, client, admin_token):
        response = client.put(
            "/api/users/65a0000000000000000000ff", json={"isAdmin": True}, headers=_auth(admin_token)
        )
        assert response.status_code == 404
