"""
Progress Service - skill progress event log and academic modules.

progress_records is append-only: every level change inserts a new row.
The current level of a skill is the row with the latest recorded_at for
that (user, skill); the integer id breaks ties between equal timestamps.
"""

from datetime import datetime
from typing import List
from sqlalchemy import text

from futureflow.core.errors import NotFoundError, ValidationError
from futureflow.db.database import get_db_session, fetch_one, fetch_all, insert_row, update_row, new_id, drop_nulls

MODULE_NOT_FOUND = "Academic module not found"
REQUIRED_FIELDS = ("module_name", "completed")


class ProgressService:

    def record_level(self, user_id: str, skill_name: str, level: int) -> dict:
        """Append a new level for a skill."""
        if not skill_name.strip():
            raise ValidationError("Skill name is required")
        with get_db_session() as db:
            insert_row(db, "progress_records", {
                "user_id": user_id,
                "skill_name": skill_name,
                "level": level,
                "recorded_at": datetime.utcnow(),
            })
            return fetch_one(
                db,
                """
                    SELECT * FROM progress_records
                    WHERE user_id = :user_id AND skill_name = :skill_name
                    ORDER BY recorded_at DESC, id DESC LIMIT 1
                """,
                {"user_id": user_id, "skill_name": skill_name}
            )

    def history(self, user_id: str, skill_name: str = None) -> List[dict]:
        """Full event log, newest first, optionally for a single skill."""
        sql = "SELECT * FROM progress_records WHERE user_id = :user_id"
        params = {"user_id": user_id}
        if skill_name:
            sql += " AND skill_name = :skill_name"
            params["skill_name"] = skill_name
        sql += " ORDER BY recorded_at DESC, id DESC"
        with get_db_session() as db:
            return fetch_all(db, sql, params)

    def latest_levels(self, user_id: str) -> List[dict]:
        """Current snapshot: one row per skill, the most recent one."""
        with get_db_session() as db:
            return fetch_all(
                db,
                """
                    SELECT id, user_id, skill_name, level, recorded_at FROM (
                        SELECT pr.id, pr.user_id, pr.skill_name, pr.level, pr.recorded_at,
                               ROW_NUMBER() OVER (
                                   PARTITION BY pr.skill_name
                                   ORDER BY pr.recorded_at DESC, pr.id DESC
                               ) AS rn
                        FROM progress_records pr
                        WHERE pr.user_id = :user_id
                    ) latest
                    WHERE rn = 1
                    ORDER BY recorded_at DESC, id DESC
                """,
                {"user_id": user_id}
            )


class AcademicModuleService:
    """Course-completion records owned by one user."""

    def list_for_user(self, user_id: str) -> List[dict]:
        with get_db_session() as db:
            return fetch_all(
                db,
                "SELECT * FROM academic_modules WHERE user_id = :user_id ORDER BY semester, module_name",
                {"user_id": user_id}
            )

    def get(self, module_id: str, user_id: str) -> dict:
        with get_db_session() as db:
            module = fetch_one(
                db,
                "SELECT * FROM academic_modules WHERE id = :id AND user_id = :user_id",
                {"id": module_id, "user_id": user_id}
            )
        if not module:
            raise NotFoundError(MODULE_NOT_FOUND)
        return module

    def create(self, user_id: str, data: dict) -> dict:
        module_id = new_id()
        with get_db_session() as db:
            insert_row(db, "academic_modules", {**data, "id": module_id, "user_id": user_id})
        return self.get(module_id, user_id)

    def update(self, module_id: str, user_id: str, data: dict) -> dict:
        with get_db_session() as db:
            updated = update_row(
                db, "academic_modules", drop_nulls(data, REQUIRED_FIELDS),
                "id = :where_id AND user_id = :where_user_id",
                {"where_id": module_id, "where_user_id": user_id}
            )
        if not updated:
            raise NotFoundError(MODULE_NOT_FOUND)
        return self.get(module_id, user_id)

    def delete(self, module_id: str, user_id: str) -> None:
        with get_db_session() as db:
            result = db.execute(
                text("DELETE FROM academic_modules WHERE id = :id AND user_id = :user_id"),
                {"id": module_id, "user_id": user_id}
            )
            if result.rowcount == 0:
                raise NotFoundError(MODULE_NOT_FOUND)


def get_progress_service() -> ProgressService:
    """Get progress service instance."""
    return ProgressService()


def get_academic_module_service() -> AcademicModuleService:
    """Get academic module service instance."""
    return AcademicModuleService()
