"""
Shared fixtures and configuration for all tests.
"""
import os
from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

# Override environment settings for testing, before the app reads them
os.environ["ENVIRONMENT"] = "testing"
os.environ["JWT_SECRET"] = "test-jwt-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["BACKEND_CORS_ORIGINS"] = '["http://localhost:3000"]'
os.environ["OPENAI_API_KEY"] = "sk-test-key"
os.environ["SQLALCHEMY_DATABASE_URI"] = os.getenv(
    "TEST_DATABASE_URI", "sqlite:///./test_taskboss.db"
)

from taskboss.main import app  # noqa: E402
from taskboss.db.base import Base, SessionLocal, engine  # noqa: E402
from taskboss.db.session import get_db  # noqa: E402
from taskboss.integrations.chat_completion.llm import ChatCompletionService  # noqa: E402
from taskboss.schemas.llm import ChatCompletionResult  # noqa: E402
from taskboss import models  # noqa: E402,F401


# Test fixtures for the database
@pytest.fixture
def db():
    """
    Create a fresh database for each test.
    """
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

    # Drop tables after the test
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    """Return a TestClient bound to the test database."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    # Reset overrides after test
    app.dependency_overrides = {}


def auth_headers_for(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def register_user(client):
    """Register through the API and return the response body."""

    def _register(email="test@example.com", password="secret123", full_name="Test User"):
        response = client.post(
            "/api/auth/register",
            json={"email": email, "password": password, "full_name": full_name},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def registered_user(register_user):
    return register_user()


@pytest.fixture
def auth_headers(registered_user):
    return auth_headers_for(registered_user["token"])


@pytest.fixture
def other_auth_headers(register_user):
    body = register_user(email="other@example.com", full_name="Other User")
    return auth_headers_for(body["token"])


@pytest.fixture
def mock_completion():
    """
    Patch the provider call. Tests set `return_value` or `side_effect`
    on the returned AsyncMock.
    """
    with patch.object(ChatCompletionService, "complete", new_callable=AsyncMock) as mock:
        mock.return_value = ChatCompletionResult(
            content="Hello from the model", model="gpt-4o", finish_reason="stop"
        )
        yield mock
