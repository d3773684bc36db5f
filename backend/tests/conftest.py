"""
Shared pytest fixtures: in-memory database, services and an API client.
"""

import os

# Settings are read at import time, so the environment is prepared first.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["JWT_SECRET_KEY"] = "test-signing-secret-0123456789"
os.environ["BCRYPT_ROUNDS"] = "10"

import pytest
from fastapi.testclient import TestClient

from inventory_tracker.core.database import SessionLocal, engine
from inventory_tracker.core.security import PasswordHasher, TokenService
from inventory_tracker.main import app
from inventory_tracker.models import Base, Organization

TEST_SECRET = os.environ["JWT_SECRET_KEY"]


@pytest.fixture(autouse=True)
def db_schema():
    """Fresh tables for every test."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session(db_schema):
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=10)


@pytest.fixture
def tokens() -> TokenService:
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def make_organization(db_session):
    """Factory persisting a bare organization."""

    def _make(name: str = "Acme") -> Organization:
        organization = Organization(name=name)
        db_session.add(organization)
        db_session.commit()
        return organization

    return _make


@pytest.fixture
def client(db_schema) -> TestClient:
    return TestClient(app)


@pytest.fixture
def signup(client):
    """Factory signing up through the API and returning auth headers."""

    def _signup(email: str, password: str = "s3cret-pass", organization: str = "Acme"):
        response = client.post(
            "/signup",
            json={"email": email, "password": password, "organizationName": organization},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _signup
