"""
Opportunity Routes

GET /opportunities - List opportunities (?type, ?industry); active only unless admin
GET /opportunities/latest - Newest active opportunities
GET /opportunities/saved - Caller's bookmarked opportunities
GET /opportunities/{opportunity_id} - Get opportunity details
POST /opportunities - Create opportunity (admin only)
PUT /opportunities/{opportunity_id} - Update opportunity (admin only)
DELETE /opportunities/{opportunity_id} - Delete opportunity (admin only)
POST /opportunities/{opportunity_id}/save - Bookmark (409 if already saved)
DELETE /opportunities/{opportunity_id}/save - Remove bookmark
GET /opportunities/{opportunity_id}/save/check - Is it bookmarked?
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from futureflow.core.auth import get_current_user, get_optional_user, require_admin, is_admin
from futureflow.services.catalog_service import get_opportunity_service, get_saved_opportunity_service
from futureflow.schemas.schemas import (
    OpportunityCreate, OpportunityUpdate, OpportunityResponse, OpportunityType,
    SavedCheckResponse, MessageResponse
)

router = APIRouter(prefix="/opportunities", tags=["Opportunities"])


@router.get("", response_model=List[OpportunityResponse])
async def list_opportunities(
    type: Optional[OpportunityType] = Query(None),
    industry: Optional[str] = Query(None),
    user: Optional[dict] = Depends(get_optional_user)
):
    """Newest first. Admins also see inactive opportunities."""
    return get_opportunity_service().search(
        type=type.value if type else None,
        industry=industry,
        active_only=not is_admin(user),
    )


@router.get("/latest", response_model=List[OpportunityResponse])
async def latest_opportunities(limit: int = Query(3, ge=1, le=50)):
    return get_opportunity_service().latest(limit)


@router.get("/saved", response_model=List[OpportunityResponse])
async def saved_opportunities(user: dict = Depends(get_current_user)):
    return get_saved_opportunity_service().list_for_user(user["id"])


@router.get("/{opportunity_id}", response_model=OpportunityResponse)
async def get_opportunity(opportunity_id: str):
    return get_opportunity_service().get(opportunity_id)


@router.post("", response_model=OpportunityResponse, status_code=201)
async def create_opportunity(opportunity: OpportunityCreate, admin: dict = Depends(require_admin)):
    return get_opportunity_service().create(opportunity.model_dump())


@router.put("/{opportunity_id}", response_model=OpportunityResponse)
@router.patch("/{opportunity_id}", response_model=OpportunityResponse)
async def update_opportunity(
    opportunity_id: str,
    update: OpportunityUpdate,
    admin: dict = Depends(require_admin)
):
    return get_opportunity_service().update(opportunity_id, update.model_dump(exclude_unset=True))


@router.delete("/{opportunity_id}", response_model=MessageResponse)
async def delete_opportunity(opportunity_id: str, admin: dict = Depends(require_admin)):
    """Delete an opportunity and every bookmark pointing at it."""
    get_opportunity_service().delete(opportunity_id)
    return MessageResponse(message="Opportunity deleted")


@router.post("/{opportunity_id}/save", response_model=MessageResponse, status_code=201)
async def save_opportunity(opportunity_id: str, user: dict = Depends(get_current_user)):
    get_saved_opportunity_service().save(user["id"], opportunity_id)
    return MessageResponse(message="Opportunity saved")


@router.delete("/{opportunity_id}/save", response_model=MessageResponse)
async def unsave_opportunity(opportunity_id: str, user: dict = Depends(get_current_user)):
    get_saved_opportunity_service().unsave(user["id"], opportunity_id)
    return MessageResponse(message="Opportunity removed from saved")


@router.get("/{opportunity_id}/save/check", response_model=SavedCheckResponse)
async def check_saved(opportunity_id: str, user: dict = Depends(get_current_user)):
    return SavedCheckResponse(saved=get_saved_opportunity_service().is_saved(user["id"], opportunity_id))
