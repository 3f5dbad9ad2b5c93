"""
Analytics Service - dashboard numbers and admin views over students.

Nothing here is cached: catalogs and per-student goal sets are small, so
every request recomputes from the database.
"""

from typing import List
from sqlalchemy import text

from futureflow.db.database import get_db_session
from futureflow.schemas.schemas import GoalStatus, UserRole
from futureflow.services.catalog_service import CareerService
from futureflow.services.goal_service import GoalService
from futureflow.services.matching_service import recommend_careers, summarize_goals, round_half_up
from futureflow.services.progress_service import ProgressService, AcademicModuleService
from futureflow.services.user_service import ProfileService, UserService


def _count(db, sql: str, params: dict = None) -> int:
    return int(db.execute(text(sql), params or {}).scalar() or 0)


class DashboardService:

    def __init__(self):
        self.goal_service = GoalService()
        self.profile_service = ProfileService()
        self.career_service = CareerService()

    def student_stats(self, user_id: str) -> dict:
        goals = self.goal_service.list_for_user(user_id)
        profile = self.profile_service.get_by_user(user_id)
        skills = profile["skills"] if profile else []

        active, completed, overall_progress = summarize_goals(goals)
        recommended = recommend_careers(self.career_service.list(), skills, 5)

        return {
            "goals_count": active,
            "completed_goals": completed,
            "skills_count": len(skills),
            "careers_count": len(recommended),
            "overall_progress": overall_progress,
        }

    def admin_stats(self) -> dict:
        with get_db_session() as db:
            return {
                "total_students": _count(db, "SELECT COUNT(*) FROM users WHERE role = :role",
                                         {"role": UserRole.student.value}),
                "total_careers": _count(db, "SELECT COUNT(*) FROM careers"),
                "total_opportunities": _count(db, "SELECT COUNT(*) FROM opportunities"),
                "total_resources": _count(db, "SELECT COUNT(*) FROM resources"),
            }

    def get_dashboard_stats(self, user: dict) -> dict:
        """Shape depends on the caller's role."""
        if user["role"] == UserRole.admin:
            return self.admin_stats()
        return self.student_stats(user["id"])


class AdminAnalyticsService:

    def __init__(self):
        self.user_service = UserService()
        self.profile_service = ProfileService()
        self.goal_service = GoalService()
        self.progress_service = ProgressService()

    def platform_stats(self) -> dict:
        with get_db_session() as db:
            return {
                "total_users": _count(db, "SELECT COUNT(*) FROM users WHERE role = :role",
                                      {"role": UserRole.student.value}),
                "total_goals": _count(db, "SELECT COUNT(*) FROM goals"),
                "total_opportunities": _count(db, "SELECT COUNT(*) FROM opportunities"),
                "total_resources": _count(db, "SELECT COUNT(*) FROM resources"),
            }

    def student_profile(self, student_id: str) -> dict:
        """Profile fields plus a summary of the student's user row."""
        user = self.user_service.get_student(student_id)
        profile = self.profile_service.get_by_user(student_id) or {"id": None, "user_id": student_id}
        return {
            **profile,
            "user": {
                "name": user["name"],
                "email": user["email"],
                "year_level": user["year_level"],
                "course": user["course"],
                "avatar_url": user["avatar_url"],
            },
        }

    def student_analytics(self, student_id: str) -> dict:
        user = self.user_service.get_student(student_id)
        profile = self.profile_service.get_by_user(student_id)
        goals = self.goal_service.list_for_user(student_id)
        latest = self.progress_service.latest_levels(student_id)

        _, completed, _ = summarize_goals(goals)
        in_progress = sum(1 for goal in goals if goal["status"] == GoalStatus.in_progress.value)
        average_level = sum(record["level"] for record in latest) / len(latest) if latest else 0.0

        return {
            "user": user,
            "profile": profile,
            "goals": goals,
            "progress_records": latest,
            "stats": {
                "total_goals": len(goals),
                "completed_goals": completed,
                "in_progress_goals": in_progress,
                "total_skills": len(profile["skills"]) if profile else 0,
                "average_skill_level": round_half_up(average_level, 2),
            },
        }


class ProgressOverviewService:
    """Everything the progress page needs in one call."""

    def __init__(self):
        self.progress_service = ProgressService()
        self.goal_service = GoalService()
        self.module_service = AcademicModuleService()

    def overview(self, user_id: str) -> dict:
        goals = self.goal_service.list_for_user(user_id)
        _, _, overall_progress = summarize_goals(goals)
        return {
            "skill_progress": self.progress_service.latest_levels(user_id),
            "goals": goals,
            "modules": self.module_service.list_for_user(user_id),
            "overall_progress": overall_progress,
        }


def get_dashboard_service() -> DashboardService:
    return DashboardService()


def get_admin_analytics_service() -> AdminAnalyticsService:
    return AdminAnalyticsService()


def get_progress_overview_service() -> ProgressOverviewService:
    return ProgressOverviewService()
