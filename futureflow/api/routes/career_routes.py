"""
Career Routes

GET /careers - List all careers (catalog order)
GET /careers/recommended - Top careers for the caller's skills
GET /careers/{career_id} - Get career details
POST /careers - Create career (admin only)
PUT /careers/{career_id} - Update career (admin only)
DELETE /careers/{career_id} - Delete career (admin only)
"""

from fastapi import APIRouter, Depends, Query
from typing import List

from futureflow.core.auth import get_current_user, require_admin
from futureflow.services.catalog_service import get_career_service
from futureflow.services.matching_service import get_career_recommendation_service
from futureflow.schemas.schemas import CareerCreate, CareerUpdate, CareerResponse, MessageResponse

router = APIRouter(prefix="/careers", tags=["Careers"])


@router.get("", response_model=List[CareerResponse])
async def list_careers():
    return get_career_service().list()


@router.get("/recommended", response_model=List[CareerResponse])
async def recommended_careers(
    limit: int = Query(5, ge=1, le=20),
    user: dict = Depends(get_current_user)
):
    """
    Careers ranked by how many of the caller's profile skills appear in
    their required skills. Without skills: the first careers in the catalog.
    """
    return get_career_recommendation_service().for_user(user["id"], limit)


@router.get("/{career_id}", response_model=CareerResponse)
async def get_career(career_id: str):
    return get_career_service().get(career_id)


@router.post("", response_model=CareerResponse, status_code=201)
async def create_career(career: CareerCreate, admin: dict = Depends(require_admin)):
    return get_career_service().create(career.model_dump())


@router.put("/{career_id}", response_model=CareerResponse)
@router.patch("/{career_id}", response_model=CareerResponse)
async def update_career(career_id: str, update: CareerUpdate, admin: dict = Depends(require_admin)):
    return get_career_service().update(career_id, update.model_dump(exclude_unset=True))


@router.delete("/{career_id}", response_model=MessageResponse)
async def delete_career(career_id: str, admin: dict = Depends(require_admin)):
    get_career_service().delete(career_id)
    return MessageResponse(message="Career deleted")
