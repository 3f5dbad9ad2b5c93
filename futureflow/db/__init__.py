"""
Database module - SQLAlchemy engine, sessions and table definitions.
"""
from futureflow.db.database import get_db_session, test_database_connection

__all__ = [
    "get_db_session",
    "test_database_connection",
]
