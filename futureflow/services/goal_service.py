"""
Goal Service - SMART goals owned by a single user.

Ownership is part of every query: a goal that belongs to someone else is
indistinguishable from a goal that does not exist (NotFoundError).
Status and progress are independent fields; neither is derived from the other.
"""

from datetime import datetime
from typing import List, Optional
from sqlalchemy import text

from futureflow.core.errors import NotFoundError
from futureflow.db.database import get_db_session, fetch_one, fetch_all, insert_row, update_row, new_id, drop_nulls

GOAL_NOT_FOUND = "Goal not found"
REQUIRED_FIELDS = ("title", "type", "progress", "status")


class GoalService:

    def list_for_user(self, user_id: str, limit: Optional[int] = None) -> List[dict]:
        """Goals for a user, newest first."""
        sql = "SELECT * FROM goals WHERE user_id = :user_id ORDER BY created_at DESC, id"
        params = {"user_id": user_id}
        if limit is not None:
            sql += " LIMIT :limit"
            params["limit"] = limit
        with get_db_session() as db:
            return fetch_all(db, sql, params)

    def recent(self, user_id: str, limit: int = 3) -> List[dict]:
        return self.list_for_user(user_id, limit=limit)

    def get(self, goal_id: str, user_id: str) -> dict:
        with get_db_session() as db:
            goal = fetch_one(
                db,
                "SELECT * FROM goals WHERE id = :id AND user_id = :user_id",
                {"id": goal_id, "user_id": user_id}
            )
        if not goal:
            raise NotFoundError(GOAL_NOT_FOUND)
        return goal

    def create(self, user_id: str, data: dict) -> dict:
        goal_id = new_id()
        with get_db_session() as db:
            insert_row(db, "goals", {
                **data,
                "id": goal_id,
                "user_id": user_id,
                "created_at": datetime.utcnow(),
            })
        return self.get(goal_id, user_id)

    def update(self, goal_id: str, user_id: str, data: dict) -> dict:
        with get_db_session() as db:
            updated = update_row(
                db, "goals", drop_nulls(data, REQUIRED_FIELDS),
                "id = :where_id AND user_id = :where_user_id",
                {"where_id": goal_id, "where_user_id": user_id}
            )
        if not updated:
            raise NotFoundError(GOAL_NOT_FOUND)
        return self.get(goal_id, user_id)

    def delete(self, goal_id: str, user_id: str) -> None:
        with get_db_session() as db:
            result = db.execute(
                text("DELETE FROM goals WHERE id = :id AND user_id = :user_id"),
                {"id": goal_id, "user_id": user_id}
            )
            if result.rowcount == 0:
                raise NotFoundError(GOAL_NOT_FOUND)

    def list_all(self) -> List[dict]:
        """Every goal, for leaderboard computation."""
        with get_db_session() as db:
            return fetch_all(db, "SELECT user_id, progress, status FROM goals ORDER BY created_at, id")


def get_goal_service() -> GoalService:
    """Get goal service instance."""
    return GoalService()
