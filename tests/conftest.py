import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

TEST_PASSWORD = "correct-horse"
TEST_JWT_SECRET = "test-signing-secret-0123456789abcdef"

_environment = pytest.MonkeyPatch()


def pytest_configure(config):
    # catalog_api loads its config at import time, so the secret must be set
    # before any test module is collected
    _environment.setenv("JWT_SECRET", TEST_JWT_SECRET)


def pytest_unconfigure(config):
    _environment.undo()


@pytest.fixture
def client(monkeypatch):
    """TestClient running the app lifespan against a fresh in-memory MongoDB."""
    from catalog_api.main import app
    from catalog_api.shared import db

    monkeypatch.setattr(db, "create_client", AsyncMongoMockClient)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def user_payload():
    return {
        "name": "Alice",
        "age": 30,
        "nickname": "alice",
        "password": TEST_PASSWORD,
    }


@pytest.fixture
def created_user(client, user_payload):
    response = client.post("/users", json=user_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def auth_token(client, created_user, user_payload):
    response = client.post(
        "/login",
        json={"nickname": user_payload["nickname"], "password": TEST_PASSWORD},
    )
    assert response.status_code == 200
    return response.json()["token"]
