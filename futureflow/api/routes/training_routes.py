"""
Training Program Routes

GET /training-programs - List programs (active only unless admin)
GET /training-programs/{program_id} - Get program
POST /training-programs - Create (admin only)
PUT /training-programs/{program_id} - Update (admin only)
DELETE /training-programs/{program_id} - Delete (admin only)
"""

from fastapi import APIRouter, Depends
from typing import List, Optional

from futureflow.core.auth import get_optional_user, require_admin, is_admin
from futureflow.services.catalog_service import get_training_program_service
from futureflow.schemas.schemas import (
    TrainingProgramCreate, TrainingProgramUpdate, TrainingProgramResponse, MessageResponse
)

router = APIRouter(prefix="/training-programs", tags=["Training Programs"])


@router.get("", response_model=List[TrainingProgramResponse])
async def list_training_programs(user: Optional[dict] = Depends(get_optional_user)):
    return get_training_program_service().search(active_only=not is_admin(user))


@router.get("/{program_id}", response_model=TrainingProgramResponse)
async def get_training_program(program_id: str):
    return get_training_program_service().get(program_id)


@router.post("", response_model=TrainingProgramResponse, status_code=201)
async def create_training_program(program: TrainingProgramCreate, admin: dict = Depends(require_admin)):
    return get_training_program_service().create(program.model_dump())


@router.put("/{program_id}", response_model=TrainingProgramResponse)
@router.patch("/{program_id}", response_model=TrainingProgramResponse)
async def update_training_program(
    program_id: str,
    update: TrainingProgramUpdate,
    admin: dict = Depends(require_admin)
):
    return get_training_program_service().update(program_id, update.model_dump(exclude_unset=True))


@router.delete("/{program_id}", response_model=MessageResponse)
async def delete_training_program(program_id: str, admin: dict = Depends(require_admin)):
    get_training_program_service().delete(program_id)
    return MessageResponse(message="Training program deleted")
