"""
Admin Routes (admin only)

GET /admin/stats - Platform totals
GET /admin/students - List all students
GET /admin/students/{student_id}/profile - A student's profile with user info
GET /admin/students/{student_id}/analytics - Goals, latest skill levels and stats
"""

from fastapi import APIRouter, Depends
from typing import List

from futureflow.core.auth import require_admin
from futureflow.services.analytics_service import get_admin_analytics_service
from futureflow.services.user_service import get_user_service
from futureflow.schemas.schemas import (
    AdminStatsResponse, UserResponse, StudentProfileResponse, StudentAnalyticsResponse
)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/stats", response_model=AdminStatsResponse)
async def admin_stats(admin: dict = Depends(require_admin)):
    return get_admin_analytics_service().platform_stats()


@router.get("/students", response_model=List[UserResponse])
async def list_students(admin: dict = Depends(require_admin)):
    return get_user_service().list_students()


@router.get("/students/{student_id}/profile", response_model=StudentProfileResponse)
async def student_profile(student_id: str, admin: dict = Depends(require_admin)):
    return get_admin_analytics_service().student_profile(student_id)


@router.get("/students/{student_id}/analytics", response_model=StudentAnalyticsResponse)
async def student_analytics(student_id: str, admin: dict = Depends(require_admin)):
    return get_admin_analytics_service().student_analytics(student_id)
