"""
Progress & Academic Routes (self only)

GET /progress - Skill snapshot, goals, modules and overall progress
GET /progress/skills - Current level per skill
POST /progress/skills/{skill_name} - Record a new level (appends to history)
GET /progress/skills/{skill_name}/history - Every recorded level, newest first
GET /academic/modules - List academic modules
POST /academic/modules - Add module
PUT /academic/modules/{module_id} - Update module
DELETE /academic/modules/{module_id} - Delete module
"""

from fastapi import APIRouter, Depends
from typing import List

from futureflow.core.auth import get_current_user
from futureflow.services.analytics_service import get_progress_overview_service
from futureflow.services.progress_service import get_progress_service, get_academic_module_service
from futureflow.schemas.schemas import (
    SkillLevelUpdate, SkillProgress, ProgressRecordResponse, ProgressOverviewResponse,
    AcademicModuleCreate, AcademicModuleUpdate, AcademicModuleResponse, MessageResponse
)

router = APIRouter(tags=["Progress"])


@router.get("/progress", response_model=ProgressOverviewResponse)
async def progress_overview(user: dict = Depends(get_current_user)):
    return get_progress_overview_service().overview(user["id"])


@router.get("/progress/skills", response_model=List[SkillProgress])
async def skill_progress(user: dict = Depends(get_current_user)):
    return get_progress_service().latest_levels(user["id"])


@router.post("/progress/skills/{skill_name}", response_model=ProgressRecordResponse, status_code=201)
async def record_skill_level(skill_name: str, update: SkillLevelUpdate, user: dict = Depends(get_current_user)):
    return get_progress_service().record_level(user["id"], skill_name, update.level)


@router.get("/progress/skills/{skill_name}/history", response_model=List[ProgressRecordResponse])
async def skill_history(skill_name: str, user: dict = Depends(get_current_user)):
    return get_progress_service().history(user["id"], skill_name)


@router.get("/academic/modules", response_model=List[AcademicModuleResponse])
async def list_modules(user: dict = Depends(get_current_user)):
    return get_academic_module_service().list_for_user(user["id"])


@router.post("/academic/modules", response_model=AcademicModuleResponse, status_code=201)
async def create_module(module: AcademicModuleCreate, user: dict = Depends(get_current_user)):
    return get_academic_module_service().create(user["id"], module.model_dump())


@router.put("/academic/modules/{module_id}", response_model=AcademicModuleResponse)
@router.patch("/academic/modules/{module_id}", response_model=AcademicModuleResponse)
async def update_module(module_id: str, update: AcademicModuleUpdate, user: dict = Depends(get_current_user)):
    return get_academic_module_service().update(module_id, user["id"], update.model_dump(exclude_unset=True))


@router.delete("/academic/modules/{module_id}", response_model=MessageResponse)
async def delete_module(module_id: str, user: dict = Depends(get_current_user)):
    get_academic_module_service().delete(module_id, user["id"])
    return MessageResponse(message="Academic module deleted")
