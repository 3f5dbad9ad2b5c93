"""
Relational schema - table definitions for the FutureFlow database.

Tables:
- users, sessions, profiles              identity and per-student data
- goals, progress_records, academic_modules   owned by a single user
- careers, opportunities, resources, training_programs   admin-managed catalog
- saved_opportunities                    bookmark join table

Array-valued columns (skills, tags, ...) are Text holding JSON so the raw
SQL in the services runs unchanged on PostgreSQL and SQLite.
"""

from sqlalchemy import (
    MetaData, Table, Column, String, Text, Integer, Float, Boolean, DateTime,
    ForeignKey, UniqueConstraint, Index
)

from futureflow.db.database import engine

metadata = MetaData()

ID = String(36)

users = Table(
    "users", metadata,
    Column("id", ID, primary_key=True),
    Column("email", String(255), nullable=False, unique=True),
    Column("password", Text, nullable=False),
    Column("name", Text, nullable=False),
    Column("role", String(16), nullable=False, default="student"),
    Column("year_level", Integer),
    Column("course", Text),
    Column("avatar_url", Text),
    Column("created_at", DateTime, nullable=False),
)

sessions = Table(
    "sessions", metadata,
    Column("sid", String(64), primary_key=True),
    Column("user_id", ID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("created_at", DateTime, nullable=False),
    Column("expires_at", DateTime, nullable=False, index=True),
)

profiles = Table(
    "profiles", metadata,
    Column("id", ID, primary_key=True),
    Column("user_id", ID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
    Column("gpa", Float),
    Column("skills", Text),
    Column("interests", Text),
    Column("career_preferences", Text),
    Column("certifications", Text),
    Column("subjects_taken", Text),
    Column("resume_url", Text),
    Column("bio", Text),
)

goals = Table(
    "goals", metadata,
    Column("id", ID, primary_key=True),
    Column("user_id", ID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("type", String(16), nullable=False),
    Column("specific", Text),
    Column("measurable", Text),
    Column("achievable", Text),
    Column("relevant", Text),
    Column("time_bound", Text),
    Column("progress", Integer, nullable=False, default=0),
    Column("status", String(16), nullable=False, default="in_progress"),
    Column("target_date", DateTime),
    Column("created_at", DateTime, nullable=False),
)

careers = Table(
    "careers", metadata,
    Column("id", ID, primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("overview", Text),
    Column("required_skills", Text),
    Column("recommended_tools", Text),
    Column("salary_range", Text),
    Column("industry", Text),
    Column("learning_path", Text),
    Column("icon", Text),
    Column("created_at", DateTime, nullable=False),
)

opportunities = Table(
    "opportunities", metadata,
    Column("id", ID, primary_key=True),
    Column("title", Text, nullable=False),
    Column("company", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("location", Text),
    Column("type", String(16), nullable=False),
    Column("industry", Text),
    Column("required_skills", Text),
    Column("application_url", Text),
    Column("deadline", DateTime),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("created_at", DateTime, nullable=False),
)

saved_opportunities = Table(
    "saved_opportunities", metadata,
    Column("id", ID, primary_key=True),
    Column("user_id", ID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("opportunity_id", ID, ForeignKey("opportunities.id", ondelete="CASCADE"), nullable=False),
    Column("saved_at", DateTime, nullable=False),
    UniqueConstraint("user_id", "opportunity_id", name="uq_saved_opportunity"),
)

resources = Table(
    "resources", metadata,
    Column("id", ID, primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("type", String(16), nullable=False),
    Column("category", Text, nullable=False),
    Column("url", Text),
    Column("tags", Text),
    Column("download_count", Integer, nullable=False, default=0),
    Column("created_at", DateTime, nullable=False),
)

# Append-only event log: the integer id is the insertion sequence
progress_records = Table(
    "progress_records", metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", ID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("skill_name", Text, nullable=False),
    Column("level", Integer, nullable=False, default=0),
    Column("recorded_at", DateTime, nullable=False),
)
Index("ix_progress_user_skill_recorded", progress_records.c.user_id, progress_records.c.skill_name,
      progress_records.c.recorded_at)

academic_modules = Table(
    "academic_modules", metadata,
    Column("id", ID, primary_key=True),
    Column("user_id", ID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True),
    Column("module_name", Text, nullable=False),
    Column("grade", Text),
    Column("units", Integer),
    Column("semester", Text),
    Column("completed", Boolean, nullable=False, default=False),
)

training_programs = Table(
    "training_programs", metadata,
    Column("id", ID, primary_key=True),
    Column("title", Text, nullable=False),
    Column("description", Text),
    Column("provider", Text),
    Column("duration", Text),
    Column("skills", Text),
    Column("certification_offered", Boolean, nullable=False, default=False),
    Column("url", Text),
    Column("is_active", Boolean, nullable=False, default=True),
    Column("created_at", DateTime, nullable=False),
)

# Child tables first
DELETE_ORDER = [
    "sessions", "saved_opportunities", "progress_records", "academic_modules", "goals",
    "profiles", "users", "careers", "opportunities", "resources", "training_programs",
]


def init_db() -> None:
    """Create any missing tables. Safe to call on every startup."""
    metadata.create_all(engine)


def drop_db() -> None:
    metadata.drop_all(engine)
