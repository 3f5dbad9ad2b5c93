"""
Matching & Ranking Service

PURPOSE:
Score careers against a student's skills and rank students on a composite
leaderboard.

HOW IT WORKS:
1. recommend_careers: count how many of the student's skills appear
   (case-insensitive substring) in each career's required skills,
   then keep the top N, catalog order preserved on ties
2. compute_ranking_score: weighted sum of skills, completed goals,
   average goal progress and GPA
3. build_leaderboard: score every student, sort, assign 1-based ranks

The scoring functions are pure: they work on rows that have already been
loaded, so they can be tested with literal lists.
"""

import math
from typing import Dict, List, Optional, Tuple

from futureflow.schemas.schemas import GoalStatus
from futureflow.services.catalog_service import CareerService
from futureflow.services.goal_service import GoalService
from futureflow.services.user_service import ProfileService, UserService

# Composite score weights
SKILL_WEIGHT = 2
COMPLETED_GOAL_WEIGHT = 5
PROGRESS_WEIGHT = 0.4
GPA_MAX_POINTS = 20
GPA_SCALE = 4.0

DEFAULT_RECOMMENDATION_LIMIT = 5


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like Math.round: .5 always goes up."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


# ============================================================
# CAREER RECOMMENDATION
# ============================================================

def score_career(career: dict, user_skills: List[str]) -> int:
    """Number of user skills found inside any of the career's required skills."""
    required = [skill.lower() for skill in (career.get("required_skills") or [])]
    return sum(
        1 for skill in user_skills
        if any(skill.lower() in required_skill for required_skill in required)
    )


def recommend_careers(
    all_careers: List[dict],
    user_skills: List[str],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT
) -> List[dict]:
    """
    Top `limit` careers by skill overlap.

    Without skills the first `limit` careers are returned in catalog order.
    sorted() is stable, so equal scores keep catalog order.
    """
    if not user_skills:
        return list(all_careers[:limit])

    scored = [(score_career(career, user_skills), career) for career in all_careers]
    ranked = sorted(scored, key=lambda pair: pair[0], reverse=True)
    return [career for _, career in ranked[:limit]]


# ============================================================
# GOAL AGGREGATES
# ============================================================

def summarize_goals(goals: List[dict]) -> Tuple[int, int, int]:
    """
    Returns:
        (active_count, completed_count, overall_progress)

    overall_progress is the rounded mean progress over ALL goals,
    completed ones included; 0 when there are none.
    """
    completed = sum(1 for goal in goals if goal.get("status") == GoalStatus.completed.value)
    active = len(goals) - completed
    if not goals:
        return active, completed, 0
    total_progress = sum(goal.get("progress") or 0 for goal in goals)
    return active, completed, int(round_half_up(total_progress / len(goals)))


# ============================================================
# STUDENT RANKING
# ============================================================

def compute_ranking_score(
    skills_count: int,
    completed_goals: int,
    overall_progress: int,
    gpa: Optional[float]
) -> float:
    """
    score = skills*2 + completed_goals*5 + overall_progress*0.4 + (gpa/4)*20

    GPA is clamped to [0, 4] so the GPA component never exceeds 20 points.
    Rounded to 2 decimals.
    """
    gpa_score = 0.0
    if gpa is not None:
        clamped = min(max(gpa, 0.0), GPA_SCALE)
        gpa_score = (clamped / GPA_SCALE) * GPA_MAX_POINTS

    score = (
        skills_count * SKILL_WEIGHT
        + completed_goals * COMPLETED_GOAL_WEIGHT
        + overall_progress * PROGRESS_WEIGHT
        + gpa_score
    )
    return round_half_up(score, 2)


def build_leaderboard(
    students: List[dict],
    profiles_by_user: Dict[str, dict],
    goals_by_user: Dict[str, List[dict]]
) -> List[dict]:
    """Score every student and rank them. Ties keep retrieval order."""
    entries = []
    for student in students:
        profile = profiles_by_user.get(student["id"])
        user_goals = goals_by_user.get(student["id"], [])

        skills_count = len(profile.get("skills") or []) if profile else 0
        _, completed_goals, overall_progress = summarize_goals(user_goals)
        gpa = profile.get("gpa") if profile else None

        entries.append({
            "user_id": student["id"],
            "name": student["name"],
            "score": compute_ranking_score(skills_count, completed_goals, overall_progress, gpa),
            "skills_count": skills_count,
            "completed_goals": completed_goals,
            "overall_progress": overall_progress,
            "gpa": gpa,
        })

    leaderboard = sorted(entries, key=lambda entry: entry["score"], reverse=True)
    for position, entry in enumerate(leaderboard, start=1):
        entry["rank"] = position
    return leaderboard


class RankingService:
    """Loads students, profiles and goals, then ranks in memory."""

    def __init__(self):
        self.user_service = UserService()
        self.profile_service = ProfileService()
        self.goal_service = GoalService()

    def get_student_ranking(self, viewer_id: str) -> dict:
        students = self.user_service.list_students()
        profiles_by_user = {profile["user_id"]: profile for profile in self.profile_service.list_all()}

        goals_by_user: Dict[str, List[dict]] = {}
        for goal in self.goal_service.list_all():
            goals_by_user.setdefault(goal["user_id"], []).append(goal)

        leaderboard = build_leaderboard(students, profiles_by_user, goals_by_user)
        current_user = next((entry for entry in leaderboard if entry["user_id"] == viewer_id), None)

        return {
            "leaderboard": leaderboard,
            "current_user": current_user,
            "total": len(leaderboard),
        }


class CareerRecommendationService:

    def __init__(self):
        self.career_service = CareerService()
        self.profile_service = ProfileService()

    def for_user(self, user_id: str, limit: int = DEFAULT_RECOMMENDATION_LIMIT) -> List[dict]:
        profile = self.profile_service.get_by_user(user_id)
        skills = profile["skills"] if profile else []
        return recommend_careers(self.career_service.list(), skills, limit)


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_ranking_service() -> RankingService:
    """Get ranking service instance."""
    return RankingService()


def get_career_recommendation_service() -> CareerRecommendationService:
    """Get career recommendation service instance."""
    return CareerRecommendationService()
