from datetime import timedelta

from jose import jwt

from taskboss import models
from taskboss.core import security
from taskboss.core.config import settings


class TestRegister:
    def test_register_returns_user_and_token(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "new@example.com", "password": "pw123456", "full_name": "New User"},
        )
        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "new@example.com"
        assert body["user"]["full_name"] == "New User"
        assert "password" not in body["user"]
        assert body["token"]
        assert body["message"]

    def test_register_accepts_camel_case_name(self, client):
        response = client.post(
            "/api/auth/register",
            json={"email": "camel@example.com", "password": "pw", "fullName": "Camel Case"},
        )
        assert response.status_code == 201
        assert response.json()["user"]["full_name"] == "Camel Case"

    def test_register_creates_zeroed_stats(self, client, db):
        body = client.post(
            "/api/auth/register",
            json={"email": "stats@example.com", "password": "pw", "full_name": "Stats"},
        ).json()
        stats = (
            db.query(models.UserStats)
            .filter(models.UserStats.user_id == body["user"]["id"])
            .one()
        )
        assert stats.total_points == 0
        assert stats.current_level == 1
        assert stats.achievements_unlocked == []

    def test_password_is_stored_hashed(self, client, db, registered_user):
        user = db.get(models.User, registered_user["user"]["id"])
        assert user.password != "secret123"
        assert security.verify_password("secret123", user.password)

    def test_duplicate_email_is_rejected(self, client, db, registered_user):
        response = client.post(
            "/api/auth/register",
            json={"email": "test@example.com", "password": "other", "full_name": "Dup"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "resource_already_exists"
        assert (
            db.query(models.User).filter(models.User.email == "test@example.com").count()
            == 1
        )

    def test_missing_fields_are_rejected(self, client):
        response = client.post("/api/auth/register", json={"email": "x@example.com"})
        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "validation_error"
        assert "password" in body["details"]


class TestLogin:
    def test_login_returns_verifiable_token(self, client, registered_user):
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "secret123"},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["user"]["id"] == registered_user["user"]["id"]

        claims = jwt.decode(body["token"], "test-jwt-secret", algorithms=["HS256"])
        assert claims["sub"] == str(registered_user["user"]["id"])
        assert claims["id"] == registered_user["user"]["id"]
        assert claims["email"] == "test@example.com"
        assert claims["exp"] - claims["iat"] == 24 * 60 * 60

    def test_wrong_password(self, client, registered_user):
        response = client.post(
            "/api/auth/login",
            json={"email": "test@example.com", "password": "wrong"},
        )
        assert response.status_code == 401
        assert response.json()["message"] == "Invalid credentials"

    def test_login_with_mixed_case_domain(self, client, register_user):
        register_user(email="Bob@Example.COM", password="pw123456")
        response = client.post(
            "/api/auth/login",
            json={"email": "Bob@Example.COM", "password": "pw123456"},
        )
        assert response.status_code == 200
        assert response.json()["user"]["email"] == "Bob@example.com"

    def test_unknown_email(self, client):
        response = client.post(
            "/api/auth/login",
            json={"email": "nobody@example.com", "password": "whatever"},
        )
        assert response.status_code == 401


class TestTokenChecks:
    def test_missing_token_is_401(self, client):
        response = client.get("/api/tasks")
        assert response.status_code == 401
        assert response.json()["error"] == "authentication_error"

    def test_garbage_token_is_403(self, client):
        response = client.get(
            "/api/tasks", headers={"Authorization": "Bearer not-a-jwt"}
        )
        assert response.status_code == 403
        assert response.json()["error"] == "authorization_error"

    def test_expired_token_is_403(self, client, registered_user):
        token = security.create_access_token(
            registered_user["user"]["id"],
            "test@example.com",
            expires_delta=timedelta(seconds=-10),
        )
        response = client.get(
            "/api/tasks", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 403

    def test_token_signed_with_other_secret_is_403(self, client, registered_user):
        token = jwt.encode(
            {"sub": str(registered_user["user"]["id"])},
            "some-other-secret",
            algorithm=settings.JWT_ALGORITHM,
        )
        response = client.get(
            "/api/tasks", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 403

    def test_token_for_deleted_user_is_404(self, client):
        token = security.create_access_token(9999, "ghost@example.com")
        response = client.get(
            "/api/users/me", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 404
