"""
Profile Routes (self only)

GET /profile - Get own profile
PUT /profile - Update profile (only provided fields)
PATCH /profile - Same as PUT
POST /profile - Same as PUT, kept for older clients
"""

from fastapi import APIRouter, Depends

from futureflow.core.auth import get_current_user
from futureflow.services.user_service import get_profile_service
from futureflow.schemas.schemas import ProfileUpdate, ProfileResponse

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", response_model=ProfileResponse)
async def get_profile(user: dict = Depends(get_current_user)):
    return get_profile_service().get_required(user["id"])


@router.put("", response_model=ProfileResponse)
@router.patch("", response_model=ProfileResponse)
@router.post("", response_model=ProfileResponse)
async def update_profile(data: ProfileUpdate, user: dict = Depends(get_current_user)):
    """
    Update profile. Only provided fields are updated.

    Newly added skills start at level 25 in progress tracking.
    """
    return get_profile_service().update(user["id"], data.model_dump(exclude_unset=True))
