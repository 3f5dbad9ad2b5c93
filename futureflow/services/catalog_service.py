"""
Catalog Service - admin-managed, globally shared entities.

Catalogs:
1. careers            career pathways with required skills and learning path
2. opportunities      internships/jobs, soft-hidden via is_active
3. resources          downloadable material with a download counter
4. training_programs  external programs, soft-hidden via is_active

Plus saved_opportunities, the per-user bookmark join table.

All catalogs share one CRUD shape (CatalogService); subclasses only add
their filters and extra operations.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional, Tuple
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from futureflow.core.errors import ConflictError, NotFoundError
from futureflow.db.database import (
    get_db_session, fetch_one, fetch_all, insert_row, update_row, new_id,
    encode_json_fields, decode_json_fields, drop_nulls
)

logger = logging.getLogger("futureflow.catalog")


class CatalogService:
    """
    Generic CRUD over one catalog table.

    Subclasses set:
        table          table name
        label          human name used in "<label> not found"
        list_fields    JSON array columns
        object_fields  JSON object columns
        order_by       ORDER BY clause for list()
        required       NOT NULL columns, explicit nulls are ignored on update
    """

    table: str = ""
    label: str = "Item"
    list_fields: Tuple[str, ...] = ()
    object_fields: Tuple[str, ...] = ()
    order_by: str = "created_at, id"
    required: Tuple[str, ...] = ("title",)

    def _decode(self, row: Optional[dict]) -> Optional[dict]:
        return decode_json_fields(row, self.list_fields, self.object_fields)

    def _encode(self, data: dict) -> dict:
        return encode_json_fields(data, self.list_fields + self.object_fields)

    def _where(self, filters: Dict[str, object]) -> Tuple[str, dict]:
        """Equality filters; None values are skipped."""
        clauses = []
        params = {}
        for column, value in filters.items():
            if value is None:
                continue
            clauses.append(f"{column} = :{column}")
            params[column] = value
        return (" WHERE " + " AND ".join(clauses)) if clauses else "", params

    def list(self, filters: Dict[str, object] = None, limit: Optional[int] = None) -> List[dict]:
        where, params = self._where(filters or {})
        sql = f"SELECT * FROM {self.table}{where} ORDER BY {self.order_by}"
        if limit is not None:
            sql += " LIMIT :limit"
            params["limit"] = limit
        with get_db_session() as db:
            rows = fetch_all(db, sql, params)
        return [self._decode(row) for row in rows]

    def get(self, item_id: str) -> dict:
        with get_db_session() as db:
            row = fetch_one(db, f"SELECT * FROM {self.table} WHERE id = :id", {"id": item_id})
        if not row:
            raise NotFoundError(f"{self.label} not found")
        return self._decode(row)

    def create(self, data: dict) -> dict:
        item_id = new_id()
        values = {**self._encode(data), "id": item_id, "created_at": datetime.utcnow()}
        with get_db_session() as db:
            insert_row(db, self.table, values)
        logger.info("Created %s %s", self.table, item_id)
        return self.get(item_id)

    def update(self, item_id: str, data: dict) -> dict:
        values = self._encode(drop_nulls(data, self.required))
        with get_db_session() as db:
            updated = update_row(db, self.table, values, "id = :where_id", {"where_id": item_id})
        if not updated:
            raise NotFoundError(f"{self.label} not found")
        logger.info("Updated %s %s", self.table, item_id)
        return self.get(item_id)

    def delete(self, item_id: str) -> None:
        with get_db_session() as db:
            self._delete_children(db, item_id)
            result = db.execute(text(f"DELETE FROM {self.table} WHERE id = :id"), {"id": item_id})
            if result.rowcount == 0:
                raise NotFoundError(f"{self.label} not found")
        logger.info("Deleted %s %s", self.table, item_id)

    def _delete_children(self, db, item_id: str) -> None:
        pass


# ============================================================
# CAREERS
# ============================================================

class CareerService(CatalogService):
    table = "careers"
    label = "Career"
    required = ("title", "description")
    list_fields = ("required_skills", "recommended_tools")
    object_fields = ("learning_path",)


# ============================================================
# OPPORTUNITIES
# ============================================================

class OpportunityService(CatalogService):
    table = "opportunities"
    label = "Opportunity"
    required = ("title", "company", "description", "type", "is_active")
    list_fields = ("required_skills",)
    order_by = "created_at DESC, id"

    def search(
        self,
        type: Optional[str] = None,
        industry: Optional[str] = None,
        active_only: bool = True,
        limit: Optional[int] = None,
    ) -> List[dict]:
        """Newest first. Industry matches case-insensitively."""
        clauses = []
        params = {}
        if active_only:
            clauses.append("is_active = :is_active")
            params["is_active"] = True
        if type:
            clauses.append("type = :type")
            params["type"] = type
        if industry:
            clauses.append("LOWER(industry) = LOWER(:industry)")
            params["industry"] = industry

        sql = f"SELECT * FROM {self.table}"
        if clauses:
            sql += " WHERE " + " AND ".join(clauses)
        sql += f" ORDER BY {self.order_by}"
        if limit is not None:
            sql += " LIMIT :limit"
            params["limit"] = limit

        with get_db_session() as db:
            rows = fetch_all(db, sql, params)
        return [self._decode(row) for row in rows]

    def latest(self, limit: int = 3) -> List[dict]:
        return self.search(active_only=True, limit=limit)

    def _delete_children(self, db, item_id: str) -> None:
        db.execute(text("DELETE FROM saved_opportunities WHERE opportunity_id = :id"), {"id": item_id})


class SavedOpportunityService:
    """Bookmarks: unique per (user_id, opportunity_id)."""

    def __init__(self):
        self.opportunities = OpportunityService()

    def save(self, user_id: str, opportunity_id: str) -> dict:
        """
        Bookmark an opportunity.

        Raises:
            NotFoundError if the opportunity does not exist
            ConflictError if the pair is already saved
        """
        self.opportunities.get(opportunity_id)

        saved_id = new_id()
        try:
            with get_db_session() as db:
                if self._find(db, user_id, opportunity_id):
                    raise ConflictError("Opportunity already saved")
                insert_row(db, "saved_opportunities", {
                    "id": saved_id,
                    "user_id": user_id,
                    "opportunity_id": opportunity_id,
                    "saved_at": datetime.utcnow(),
                })
        except IntegrityError:
            raise ConflictError("Opportunity already saved")

        return {"id": saved_id, "user_id": user_id, "opportunity_id": opportunity_id}

    def unsave(self, user_id: str, opportunity_id: str) -> None:
        with get_db_session() as db:
            db.execute(
                text("DELETE FROM saved_opportunities WHERE user_id = :user_id AND opportunity_id = :opportunity_id"),
                {"user_id": user_id, "opportunity_id": opportunity_id}
            )

    def is_saved(self, user_id: str, opportunity_id: str) -> bool:
        with get_db_session() as db:
            return self._find(db, user_id, opportunity_id) is not None

    def list_for_user(self, user_id: str) -> List[dict]:
        """The bookmarked opportunities themselves, most recently saved first."""
        with get_db_session() as db:
            rows = fetch_all(
                db,
                """
                    SELECT o.* FROM saved_opportunities s
                    JOIN opportunities o ON s.opportunity_id = o.id
                    WHERE s.user_id = :user_id
                    ORDER BY s.saved_at DESC, s.id
                """,
                {"user_id": user_id}
            )
        return [self.opportunities._decode(row) for row in rows]

    @staticmethod
    def _find(db, user_id: str, opportunity_id: str) -> Optional[dict]:
        return fetch_one(
            db,
            "SELECT id FROM saved_opportunities WHERE user_id = :user_id AND opportunity_id = :opportunity_id",
            {"user_id": user_id, "opportunity_id": opportunity_id}
        )


# ============================================================
# RESOURCES
# ============================================================

class ResourceService(CatalogService):
    table = "resources"
    label = "Resource"
    required = ("title", "type", "category")
    list_fields = ("tags",)
    order_by = "created_at DESC, id"

    def search(self, type: Optional[str] = None, category: Optional[str] = None) -> List[dict]:
        return self.list({"type": type, "category": category})

    def create(self, data: dict) -> dict:
        # download_count is server-owned
        return super().create({**data, "download_count": 0})

    def increment_download(self, resource_id: str) -> dict:
        """
        Count one download intent. The increment happens in SQL so
        concurrent requests never lose an update.
        """
        with get_db_session() as db:
            result = db.execute(
                text("UPDATE resources SET download_count = download_count + 1 WHERE id = :id"),
                {"id": resource_id}
            )
            if result.rowcount == 0:
                raise NotFoundError(f"{self.label} not found")
        return self.get(resource_id)


# ============================================================
# TRAINING PROGRAMS
# ============================================================

class TrainingProgramService(CatalogService):
    table = "training_programs"
    label = "Training program"
    required = ("title", "certification_offered", "is_active")
    list_fields = ("skills",)

    def search(self, active_only: bool = True) -> List[dict]:
        return self.list({"is_active": True} if active_only else {})


# ============================================================
# CONVENIENCE FUNCTIONS
# ============================================================

def get_career_service() -> CareerService:
    return CareerService()


def get_opportunity_service() -> OpportunityService:
    return OpportunityService()


def get_saved_opportunity_service() -> SavedOpportunityService:
    return SavedOpportunityService()


def get_resource_service() -> ResourceService:
    return ResourceService()


def get_training_program_service() -> TrainingProgramService:
    return TrainingProgramService()
