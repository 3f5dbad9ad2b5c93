"""
Dashboard & Ranking Routes

GET /dashboard/stats - Student or admin stats, depending on the caller's role
GET /students/ranking - Composite-score leaderboard
"""

from fastapi import APIRouter, Depends
from typing import Union

from futureflow.core.auth import get_current_user
from futureflow.services.analytics_service import get_dashboard_service
from futureflow.services.matching_service import get_ranking_service
from futureflow.schemas.schemas import StudentDashboardStats, AdminDashboardStats, RankingResponse

router = APIRouter(tags=["Dashboard"])


@router.get("/dashboard/stats", response_model=Union[StudentDashboardStats, AdminDashboardStats])
async def dashboard_stats(user: dict = Depends(get_current_user)):
    """
    Students: goalsCount (not completed), completedGoals, skillsCount,
    careersCount (top-5 recommendations), overallProgress (mean over all goals).

    Admins: totalStudents, totalCareers, totalOpportunities, totalResources.
    """
    return get_dashboard_service().get_dashboard_stats(user)


@router.get("/students/ranking", response_model=RankingResponse)
async def student_ranking(user: dict = Depends(get_current_user)):
    """
    score = skills*2 + completedGoals*5 + overallProgress*0.4 + (gpa/4)*20

    currentUser is null when the caller is not on the leaderboard (admins).
    """
    return get_ranking_service().get_student_ranking(user["id"])
