"""
Authentication tests

1. Registration always creates a student and starts a session
2. Duplicate emails are rejected without creating a second row
3. Login, logout and /me session handling
4. Request validation errors come back as 400 {"error": ...}
5. Session cookie attributes and server-side session expiry
"""
from datetime import datetime, timedelta

from fastapi import Response
from sqlalchemy import text

from conftest import make_client, register_student
from futureflow.core import auth
from futureflow.core.config import Settings
from futureflow.db.database import get_db_session


def count_users(email):
    with get_db_session() as db:
        return db.execute(text("SELECT COUNT(*) FROM users WHERE email = :email"), {"email": email}).scalar()


def test_register_creates_student_and_logs_in(client):
    user = register_student(client, "maria@futureflow.com", name="Maria Santos", yearLevel=2)

    assert user["role"] == "student"
    assert user["yearLevel"] == 2
    assert user["course"] == "Computer Engineering"
    assert "password" not in user

    me = client.get("/api/auth/me")
    assert me.status_code == 200
    assert me.json()["email"] == "maria@futureflow.com"


def test_register_ignores_role_in_body(client):
    response = client.post("/api/auth/register", json={
        "email": "sneaky@futureflow.com", "password": "secret123", "name": "Sneaky", "role": "admin",
    })
    assert response.status_code == 201
    assert response.json()["role"] == "student"


def test_register_creates_empty_profile(client):
    register_student(client, "maria@futureflow.com")

    profile = client.get("/api/profile")
    assert profile.status_code == 200
    assert profile.json()["skills"] == []
    assert profile.json()["gpa"] is None


def test_duplicate_email_conflicts(client):
    register_student(client, "dup@futureflow.com")

    response = make_client().post("/api/auth/register", json={
        "email": "dup@futureflow.com", "password": "another123", "name": "Someone Else",
    })
    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}
    assert count_users("dup@futureflow.com") == 1


def test_password_is_stored_hashed(client):
    register_student(client, "hash@futureflow.com", password="plaintext1")

    with get_db_session() as db:
        stored = db.execute(text("SELECT password FROM users WHERE email = 'hash@futureflow.com'")).scalar()
    assert stored != "plaintext1"
    assert stored.startswith("$2")


def test_login_with_valid_credentials(client):
    register_student(client, "login@futureflow.com", password="secret123")

    fresh = make_client()
    response = fresh.post("/api/auth/login", json={"email": "login@futureflow.com", "password": "secret123"})
    assert response.status_code == 200
    assert response.json()["email"] == "login@futureflow.com"
    assert fresh.get("/api/auth/me").status_code == 200


def test_login_with_wrong_password(client):
    register_student(client, "login@futureflow.com", password="secret123")

    response = make_client().post("/api/auth/login", json={"email": "login@futureflow.com", "password": "wrong"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_login_unknown_email(client):
    response = client.post("/api/auth/login", json={"email": "ghost@futureflow.com", "password": "whatever"})
    assert response.status_code == 401
    assert response.json() == {"error": "Invalid email or password"}


def test_me_without_session(client):
    response = client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


def test_tampered_cookie_is_rejected(client):
    client.cookies.set("futureflow_session", "not-a-real-token")
    assert client.get("/api/auth/me").status_code == 401


def test_logout_ends_session(student_client):
    assert student_client.get("/api/auth/me").status_code == 200

    response = student_client.post("/api/auth/logout")
    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert student_client.get("/api/auth/me").status_code == 401


def test_logout_without_session_succeeds(client):
    response = client.post("/api/auth/logout")
    assert response.status_code == 200


def test_register_validation_errors(client):
    short_password = client.post("/api/auth/register", json={
        "email": "short@futureflow.com", "password": "123", "name": "Short Password",
    })
    assert short_password.status_code == 400
    assert "password" in short_password.json()["error"]

    bad_email = client.post("/api/auth/register", json={
        "email": "not-an-email", "password": "secret123", "name": "Bad Email",
    })
    assert bad_email.status_code == 400
    assert "email" in bad_email.json()["error"]

    assert count_users("short@futureflow.com") == 0


def count_sessions():
    with get_db_session() as db:
        return db.execute(text("SELECT COUNT(*) FROM sessions")).scalar()


def expire_all_sessions():
    with get_db_session() as db:
        db.execute(text("UPDATE sessions SET expires_at = :past"),
                   {"past": datetime.utcnow() - timedelta(seconds=5)})


def test_session_cookie_attributes(client):
    response = client.post("/api/auth/register", json={
        "email": "cookie@futureflow.com", "password": "secret123", "name": "Cookie Monster",
    })
    assert response.status_code == 201

    cookie = response.headers["set-cookie"]
    attributes = [part.strip().lower() for part in cookie.split(";")]
    assert cookie.startswith("futureflow_session=")
    assert "httponly" in attributes
    assert "max-age=604800" in attributes
    assert "samesite=lax" in attributes
    assert "secure" not in attributes


def test_session_cookie_secure_in_production(monkeypatch):
    monkeypatch.setenv("ENVIRONMENT", "production")
    monkeypatch.setattr(auth, "settings", Settings())

    response = Response()
    auth.set_session_cookie(response, "signed-token")

    attributes = [part.strip().lower() for part in response.headers["set-cookie"].split(";")]
    assert "secure" in attributes
    assert "httponly" in attributes


def test_expired_session_row_is_rejected(student_client):
    assert student_client.get("/api/auth/me").status_code == 200

    expire_all_sessions()

    response = student_client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


def test_login_prunes_expired_sessions(student_client):
    expire_all_sessions()
    assert count_sessions() == 1

    fresh = make_client()
    response = fresh.post("/api/auth/login", json={"email": "student@futureflow.com", "password": "secret123"})
    assert response.status_code == 200

    # Only the session just created remains
    assert count_sessions() == 1
    assert fresh.get("/api/auth/me").status_code == 200
    assert student_client.get("/api/auth/me").status_code == 401
