"""
Authentication Routes

POST /auth/register - Register a student and start a session
POST /auth/login - Login and start a session
POST /auth/logout - End the session
GET /auth/me - Get current user info
"""

import logging
from fastapi import APIRouter, Depends, Request, Response

from futureflow.core.auth import (
    create_session, destroy_session, set_session_cookie, clear_session_cookie,
    get_current_user, settings
)
from futureflow.core.errors import AuthError
from futureflow.services.user_service import get_user_service
from futureflow.schemas.schemas import RegisterRequest, LoginRequest, UserResponse

router = APIRouter(prefix="/auth", tags=["Authentication"])
logger = logging.getLogger("futureflow.auth")


@router.post("/register", response_model=UserResponse, status_code=201)
async def register(request: RegisterRequest, response: Response):
    """
    Register a new student account and log it in.

    The role is always `student`, whatever the body says.
    """
    user = get_user_service().register_student(
        email=request.email,
        password=request.password,
        name=request.name,
        year_level=request.year_level,
        course=request.course,
    )
    set_session_cookie(response, create_session(user["id"]))
    return user


@router.post("/login", response_model=UserResponse)
async def login(request: LoginRequest, response: Response):
    """Login; the session cookie is set on the response."""
    user = get_user_service().authenticate(request.email, request.password)
    set_session_cookie(response, create_session(user["id"]))
    logger.info("User %s logged in", user["email"])
    return user


@router.post("/logout")
async def logout(request: Request, response: Response):
    """Destroy the session. Succeeds even without one."""
    token = request.cookies.get(settings.session_cookie_name)
    if token:
        destroy_session(token)
        logger.info("Session ended")
    clear_session_cookie(response)
    return {"success": True}


@router.get("/me", response_model=UserResponse)
async def get_me(user: dict = Depends(get_current_user)):
    """Get current authenticated user's info."""
    row = get_user_service().get(user["id"])
    if not row:
        raise AuthError("Not authenticated")
    return row
