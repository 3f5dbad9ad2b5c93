"""
Resource Routes

GET /resources - List resources (?type, ?category), newest first
GET /resources/{resource_id} - Get resource
POST /resources - Create resource (admin only)
PUT /resources/{resource_id} - Update resource (admin only)
DELETE /resources/{resource_id} - Delete resource (admin only)
POST /resources/{resource_id}/download - Count a download (anyone)
"""

from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from futureflow.core.auth import require_admin
from futureflow.services.catalog_service import get_resource_service
from futureflow.schemas.schemas import (
    ResourceCreate, ResourceUpdate, ResourceResponse, ResourceType, MessageResponse
)

router = APIRouter(prefix="/resources", tags=["Resources"])


@router.get("", response_model=List[ResourceResponse])
async def list_resources(
    type: Optional[ResourceType] = Query(None),
    category: Optional[str] = Query(None)
):
    return get_resource_service().search(type=type.value if type else None, category=category)


@router.get("/{resource_id}", response_model=ResourceResponse)
async def get_resource(resource_id: str):
    return get_resource_service().get(resource_id)


@router.post("", response_model=ResourceResponse, status_code=201)
async def create_resource(resource: ResourceCreate, admin: dict = Depends(require_admin)):
    return get_resource_service().create(resource.model_dump())


@router.put("/{resource_id}", response_model=ResourceResponse)
@router.patch("/{resource_id}", response_model=ResourceResponse)
async def update_resource(resource_id: str, update: ResourceUpdate, admin: dict = Depends(require_admin)):
    return get_resource_service().update(resource_id, update.model_dump(exclude_unset=True))


@router.delete("/{resource_id}", response_model=MessageResponse)
async def delete_resource(resource_id: str, admin: dict = Depends(require_admin)):
    get_resource_service().delete(resource_id)
    return MessageResponse(message="Resource deleted")


@router.post("/{resource_id}/download", response_model=ResourceResponse)
async def download_resource(resource_id: str):
    """
    Record the intent to download and return the resource (with its url).
    Whether the file was actually fetched is not verified.
    """
    return get_resource_service().increment_download(resource_id)
