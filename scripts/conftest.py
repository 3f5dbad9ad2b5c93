"""
Shared pytest fixtures.

The app runs against a throwaway SQLite file; DATABASE_URL and the bcrypt
cost are set before anything from futureflow is imported, because the
settings and the engine are built at import time.
"""
import os
import sys
import tempfile

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

_DB_FILE = os.path.join(tempfile.mkdtemp(prefix="futureflow-tests-"), "test.db")
os.environ["DATABASE_URL"] = f"sqlite:///{_DB_FILE}"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from futureflow.main import app
from futureflow.db.schema import init_db, drop_db
from futureflow.schemas.schemas import UserRole
from futureflow.services.user_service import get_user_service

ADMIN_EMAIL = "admin@futureflow.com"
ADMIN_PASSWORD = "admin123"


@pytest.fixture(autouse=True)
def fresh_db():
    drop_db()
    init_db()
    yield


def make_client() -> TestClient:
    return TestClient(app)


def register_student(client: TestClient, email: str, name: str = "Test Student", password: str = "secret123", **extra):
    payload = {"email": email, "password": password, "name": name, **extra}
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.fixture
def client():
    return make_client()


@pytest.fixture
def student_client():
    """Client logged in as a freshly registered student."""
    client = make_client()
    client.user = register_student(client, "student@futureflow.com")
    return client


@pytest.fixture
def admin_client():
    """Client logged in as a seeded admin."""
    get_user_service().create_user(
        email=ADMIN_EMAIL, password=ADMIN_PASSWORD, name="Admin User", role=UserRole.admin
    )
    client = make_client()
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    client.user = response.json()
    return client
