"""
Authentication Utility - Passwords, session cookies and route guards.

Provides:
- Password hashing with bcrypt
- Server-side sessions (sessions table) referenced by a signed cookie
- FastAPI dependencies for protected routes (requireAuth / requireAdmin)
"""

import logging
import secrets
from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request, Response

from futureflow.core.config import get_settings
from futureflow.core.errors import AuthError, ForbiddenError
from futureflow.db.database import get_db_session, fetch_one
from futureflow.schemas.schemas import UserRole
from sqlalchemy import text

settings = get_settings()
logger = logging.getLogger("futureflow.auth")

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash (constant-time compare inside bcrypt)."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # Stored value is not a recognised hash
        return False


# ============================================================
# SESSIONS
# ============================================================

def create_session_token(sid: str, expires_at: datetime) -> str:
    """Sign the session id for the cookie."""
    return jwt.encode({"sid": sid, "exp": expires_at}, settings.session_secret_key,
                      algorithm=settings.session_algorithm)


def decode_session_token(token: str) -> Optional[str]:
    """Return the session id from a cookie value, or None if tampered/expired."""
    try:
        payload = jwt.decode(token, settings.session_secret_key, algorithms=[settings.session_algorithm])
    except JWTError:
        return None
    return payload.get("sid")


def create_session(user_id: str) -> str:
    """
    Persist a new session for the user and return the cookie value.
    Expired sessions are pruned on the way in.
    """
    sid = secrets.token_urlsafe(32)
    now = datetime.utcnow()
    expires_at = now + timedelta(days=settings.session_expire_days)

    with get_db_session() as db:
        pruned = db.execute(text("DELETE FROM sessions WHERE expires_at <= :now"), {"now": now}).rowcount
        if pruned:
            logger.info("Pruned %d expired sessions", pruned)
        db.execute(
            text("""
                INSERT INTO sessions (sid, user_id, created_at, expires_at)
                VALUES (:sid, :user_id, :created_at, :expires_at)
            """),
            {"sid": sid, "user_id": user_id, "created_at": now, "expires_at": expires_at}
        )

    return create_session_token(sid, expires_at)


def destroy_session(token: Optional[str]) -> None:
    """Delete the session behind a cookie value. No-op without a valid cookie."""
    if not token:
        return
    sid = decode_session_token(token)
    if not sid:
        return
    with get_db_session() as db:
        db.execute(text("DELETE FROM sessions WHERE sid = :sid"), {"sid": sid})


def set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_expire_days * 24 * 60 * 60,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
    )


def resolve_session_user(token: Optional[str]) -> Optional[dict]:
    """Look up the user bound to a cookie value. None if there is no live session."""
    if not token:
        return None
    sid = decode_session_token(token)
    if not sid:
        return None

    with get_db_session() as db:
        user = fetch_one(
            db,
            """
                SELECT u.id, u.email, u.name, u.role
                FROM sessions s JOIN users u ON s.user_id = u.id
                WHERE s.sid = :sid AND s.expires_at > :now
            """,
            {"sid": sid, "now": datetime.utcnow()}
        )

    if not user:
        return None

    user["role"] = UserRole(user["role"])
    return user


# ============================================================
# ROUTE GUARDS
# ============================================================

async def get_optional_user(request: Request) -> Optional[dict]:
    """Dependency - the session user, or None for anonymous callers."""
    return resolve_session_user(request.cookies.get(settings.session_cookie_name))


async def get_current_user(user: Optional[dict] = Depends(get_optional_user)) -> dict:
    """
    FastAPI dependency - requireAuth.

    Usage:
        @router.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user
    """
    if not user:
        raise AuthError("Not authenticated")
    return user


async def require_admin(user: Optional[dict] = Depends(get_optional_user)) -> dict:
    """Dependency - requireAdmin: 401 without a session, 403 for non-admins."""
    if not user:
        raise AuthError("Not authenticated")
    if user["role"] != UserRole.admin:
        raise ForbiddenError("Admin access required")
    return user


def is_admin(user: Optional[dict]) -> bool:
    return bool(user) and user["role"] == UserRole.admin
