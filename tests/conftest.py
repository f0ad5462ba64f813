import os

# Settings are read at import time, so configure before any app import
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["JWT_SECRET"] = "test-secret-key"
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from shared.core.database import Base, SessionLocal, engine
from shared.models import Users


@pytest.fixture(autouse=True)
def reset_db():
    """Fresh schema for every test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_user(db):
    """Insert a user directly, bypassing the HTTP layer."""

    def _make_user(email, name="Test User", password="secret123"):
        user = Users(name=name, email=email)
        user.set_password(password)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make_user


@pytest.fixture()
def auth_client():
    from auth_service.app.main import app

    return TestClient(app)


@pytest.fixture()
def client():
    from testimonial_service.app.main import app

    return TestClient(app)


@pytest.fixture()
def register(auth_client):
    """Sign up and log in through the auth service, returning bearer headers."""

    def _register(email, name="Test User", password="secret123"):
        response = auth_client.post(
            "/api/auth/signup",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201
        response = auth_client.post(
            "/api/auth/login", json={"email": email, "password": password}
        )
        assert response.status_code == 200
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _register
