import json
import logging
import uuid
from contextlib import contextmanager
from enum import Enum
from typing import Iterable, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker, Session
from futureflow.core.config import get_settings
from futureflow.core.errors import UnexpectedError

settings = get_settings()
logger = logging.getLogger("futureflow.db")


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite is only used for local runs and the test suite
        return {"connect_args": {"check_same_thread": False}}
    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return {"pool_size": 5, "max_overflow": 10, "pool_pre_ping": True}


engine = create_engine(
    settings.sqlalchemy_url,
    echo=settings.debug,  # Log SQL queries in debug mode
    **_engine_options(settings.sqlalchemy_url)
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM users"))

    Store failures (unreachable server, missing table) surface as
    UnexpectedError; constraint violations propagate unchanged.
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except OperationalError as e:
        session.rollback()
        logger.error("Database operation failed: %s", e)
        raise UnexpectedError("Database unavailable") from e
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def test_database_connection() -> bool:
    """
    Test if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.warning("Database connection failed: %s", e)
        return False


def execute_raw_sql(sql: str, params: dict = None) -> list:
    """
    Execute raw SQL and return results as list of dicts.
    This is useful for complex queries and aggregates.
    """
    with get_db_session() as db:
        result = db.execute(text(sql), params or {})
        # Convert rows to dicts
        columns = result.keys()
        return [dict(zip(columns, row)) for row in result.fetchall()]


def fetch_one(db: Session, sql: str, params: dict = None) -> Optional[dict]:
    """Run a query inside an open session and return the first row as a dict."""
    row = db.execute(text(sql), params or {}).mappings().first()
    return dict(row) if row else None


def fetch_all(db: Session, sql: str, params: dict = None) -> list:
    return [dict(row) for row in db.execute(text(sql), params or {}).mappings().all()]


def new_id() -> str:
    """Primary keys are UUID strings."""
    return str(uuid.uuid4())


def to_db_params(data: dict) -> dict:
    """Unwrap enum members so drivers receive plain values."""
    return {key: value.value if isinstance(value, Enum) else value for key, value in data.items()}


def insert_row(db: Session, table: str, data: dict) -> None:
    columns = list(data)
    db.execute(
        text(f"INSERT INTO {table} ({', '.join(columns)}) VALUES ({', '.join(':' + c for c in columns)})"),
        to_db_params(data)
    )


def update_row(db: Session, table: str, data: dict, where: str, where_params: dict) -> int:
    """
    UPDATE only the provided columns. Column names come from schema fields,
    never from raw client keys. Returns the affected row count.
    """
    if not data:
        return db.execute(text(f"SELECT COUNT(*) FROM {table} WHERE {where}"), where_params).scalar()
    assignments = ", ".join(f"{column} = :{column}" for column in data)
    params = {**to_db_params(data), **where_params}
    result = db.execute(text(f"UPDATE {table} SET {assignments} WHERE {where}"), params)
    return result.rowcount


# ============================================================
# JSON ARRAY COLUMNS
# Text columns holding JSON, so the same SQL runs on PostgreSQL and SQLite
# ============================================================

def encode_json_fields(data: dict, fields: Iterable[str]) -> dict:
    """Serialize list/dict values of the given fields for storage."""
    encoded = dict(data)
    for field in fields:
        if field in encoded and encoded[field] is not None:
            encoded[field] = json.dumps(encoded[field])
    return encoded


def decode_json_fields(row: Optional[dict], list_fields: Iterable[str] = (), object_fields: Iterable[str] = ()) -> Optional[dict]:
    """Deserialize stored JSON. Missing arrays become [], missing objects stay None."""
    if row is None:
        return None
    for field in list_fields:
        value = row.get(field)
        row[field] = json.loads(value) if value else []
    for field in object_fields:
        value = row.get(field)
        row[field] = json.loads(value) if value else None
    return row


def drop_nulls(data: dict, fields: Iterable[str]) -> dict:
    """Ignore explicit nulls for NOT NULL columns in a partial update."""
    return {key: value for key, value in data.items() if not (value is None and key in fields)}
