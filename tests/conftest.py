import pytest
from fastapi.testclient import TestClient

from course_catalog.config import Settings
from course_catalog.main import create_app

TEST_SECRET = "test-secret"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        APP_ENV="test",
        JWT_SECRET_KEY=TEST_SECRET,
        DATABASE_URL="sqlite:///:memory:",
        ACCESS_TOKEN_EXPIRE_MINUTES=30,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db(app, client):
    session = app.state.session_factory()
    try:
        yield session
    finally:
        session.close()


def signup_payload(**overrides) -> dict:
    payload = {
        "name": "Ada Admin",
        "email": "ada@example.com",
        "password": "s3cret-pass",
        "confirmPassword": "s3cret-pass",
        "role": "admin",
    }
    payload.update(overrides)
    return payload


def course_payload(**overrides) -> dict:
    payload = {
        "title": "Intro to Python",
        "description": "Basics of the language",
        "price": 49.0,
        "image": "https://cdn.example.com/python.png",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def admin_client(client):
    response = client.post("/api/user/signup", json=signup_payload())
    assert response.status_code == 201
    return client
