"""
Goal Routes (self only)

GET /goals - List own goals, newest first
GET /goals/recent - Latest N goals
POST /goals - Create goal
GET /goals/{goal_id} - Get goal
PUT /goals/{goal_id} - Update goal (partial)
PATCH /goals/{goal_id} - Update goal (partial)
DELETE /goals/{goal_id} - Delete goal

Someone else's goal answers 404, never 403.
"""

from fastapi import APIRouter, Depends, Query
from typing import List

from futureflow.core.auth import get_current_user
from futureflow.services.goal_service import get_goal_service
from futureflow.schemas.schemas import GoalCreate, GoalUpdate, GoalResponse, MessageResponse

router = APIRouter(prefix="/goals", tags=["Goals"])


@router.get("", response_model=List[GoalResponse])
async def list_goals(user: dict = Depends(get_current_user)):
    return get_goal_service().list_for_user(user["id"])


@router.get("/recent", response_model=List[GoalResponse])
async def recent_goals(
    limit: int = Query(3, ge=1, le=50),
    user: dict = Depends(get_current_user)
):
    return get_goal_service().recent(user["id"], limit)


@router.post("", response_model=GoalResponse, status_code=201)
async def create_goal(goal: GoalCreate, user: dict = Depends(get_current_user)):
    return get_goal_service().create(user["id"], goal.model_dump())


@router.get("/{goal_id}", response_model=GoalResponse)
async def get_goal(goal_id: str, user: dict = Depends(get_current_user)):
    return get_goal_service().get(goal_id, user["id"])


@router.put("/{goal_id}", response_model=GoalResponse)
@router.patch("/{goal_id}", response_model=GoalResponse)
async def update_goal(goal_id: str, update: GoalUpdate, user: dict = Depends(get_current_user)):
    """Status and progress are independent: 100% progress does not complete a goal."""
    return get_goal_service().update(goal_id, user["id"], update.model_dump(exclude_unset=True))


@router.delete("/{goal_id}", response_model=MessageResponse)
async def delete_goal(goal_id: str, user: dict = Depends(get_current_user)):
    get_goal_service().delete(goal_id, user["id"])
    return MessageResponse(message="Goal deleted")
