"""
User & Profile Service - identity rows and the 1:1 student profile.

Covers:
- registration (always creates a student + an empty profile)
- credential checks for login
- profile reads and partial updates (upsert)
"""

import logging
from datetime import datetime
from typing import Optional, List

from sqlalchemy.exc import IntegrityError

from futureflow.core.auth import hash_password, verify_password
from futureflow.core.errors import AuthError, ConflictError, NotFoundError
from futureflow.db.database import (
    get_db_session, fetch_one, fetch_all, insert_row, update_row, new_id,
    encode_json_fields, decode_json_fields
)
from futureflow.schemas.schemas import UserRole

logger = logging.getLogger("futureflow.users")

DEFAULT_COURSE = "Computer Engineering"
INITIAL_SKILL_LEVEL = 25

USER_COLUMNS = "id, email, name, role, year_level, course, avatar_url, created_at"
PROFILE_LIST_FIELDS = ("skills", "interests", "career_preferences", "certifications", "subjects_taken")


def decode_profile(row: Optional[dict]) -> Optional[dict]:
    return decode_json_fields(row, PROFILE_LIST_FIELDS)


class UserService:
    """Users table. Password hashes never leave this class."""

    def get(self, user_id: str) -> Optional[dict]:
        with get_db_session() as db:
            return fetch_one(db, f"SELECT {USER_COLUMNS} FROM users WHERE id = :id", {"id": user_id})

    def get_by_email(self, email: str) -> Optional[dict]:
        with get_db_session() as db:
            return fetch_one(db, f"SELECT {USER_COLUMNS} FROM users WHERE email = :email", {"email": email})

    def create_user(
        self,
        email: str,
        password: str,
        name: str,
        role: UserRole = UserRole.student,
        year_level: Optional[int] = None,
        course: Optional[str] = None,
    ) -> dict:
        """
        Insert a user together with an empty profile.

        Raises:
            ConflictError if the email is already registered
        """
        user_id = new_id()
        try:
            with get_db_session() as db:
                if fetch_one(db, "SELECT id FROM users WHERE email = :email", {"email": email}):
                    raise ConflictError("Email already registered")

                insert_row(db, "users", {
                    "id": user_id,
                    "email": email,
                    "password": hash_password(password),
                    "name": name,
                    "role": role,
                    "year_level": year_level,
                    "course": course,
                    "created_at": datetime.utcnow(),
                })
                insert_row(db, "profiles", {"id": new_id(), "user_id": user_id})
        except IntegrityError:
            # Lost a race against a concurrent registration for the same email
            raise ConflictError("Email already registered")

        return self.get(user_id)

    def register_student(
        self,
        email: str,
        password: str,
        name: str,
        year_level: Optional[int] = None,
        course: Optional[str] = None,
    ) -> dict:
        """Public registration path: the role is always student."""
        user = self.create_user(
            email=email,
            password=password,
            name=name,
            role=UserRole.student,
            year_level=year_level,
            course=course or DEFAULT_COURSE,
        )
        logger.info("Registered student %s", email)
        return user

    def authenticate(self, email: str, password: str) -> dict:
        """
        Verify credentials and return the user without its password.

        Raises:
            AuthError("Invalid email or password") on unknown email or bad password
        """
        with get_db_session() as db:
            row = fetch_one(
                db,
                f"SELECT {USER_COLUMNS}, password FROM users WHERE email = :email",
                {"email": email}
            )

        if not row or not verify_password(password, row.pop("password")):
            logger.info("Failed login for %s", email)
            raise AuthError("Invalid email or password")

        return row

    def list_students(self) -> List[dict]:
        with get_db_session() as db:
            return fetch_all(
                db,
                f"SELECT {USER_COLUMNS} FROM users WHERE role = :role ORDER BY created_at, id",
                {"role": UserRole.student.value}
            )

    def get_student(self, user_id: str) -> dict:
        user = self.get(user_id)
        if not user or user["role"] != UserRole.student.value:
            raise NotFoundError("Student not found")
        return user


class ProfileService:
    """Profiles table, keyed by user_id."""

    def get_by_user(self, user_id: str) -> Optional[dict]:
        with get_db_session() as db:
            row = fetch_one(db, "SELECT * FROM profiles WHERE user_id = :user_id", {"user_id": user_id})
        return decode_profile(row)

    def get_required(self, user_id: str) -> dict:
        profile = self.get_by_user(user_id)
        if not profile:
            raise NotFoundError("Profile not found")
        return profile

    def update(self, user_id: str, data: dict) -> dict:
        """
        Apply a partial update, creating the profile if it is missing.

        Skills that were not on the profile before get an initial progress
        record so they show up in progress tracking straight away.
        """
        now = datetime.utcnow()

        with get_db_session() as db:
            existing = decode_profile(
                fetch_one(db, "SELECT * FROM profiles WHERE user_id = :user_id", {"user_id": user_id})
            )
            values = encode_json_fields(data, PROFILE_LIST_FIELDS)

            if existing:
                update_row(db, "profiles", values, "user_id = :where_user_id", {"where_user_id": user_id})
            else:
                insert_row(db, "profiles", {"id": new_id(), "user_id": user_id, **values})

            if data.get("skills") is not None:
                known = set(existing["skills"]) if existing else set()
                new_skills = []
                for skill in data["skills"]:
                    if skill not in known and skill not in new_skills:
                        new_skills.append(skill)

                for skill in new_skills:
                    insert_row(db, "progress_records", {
                        "user_id": user_id,
                        "skill_name": skill,
                        "level": INITIAL_SKILL_LEVEL,
                        "recorded_at": now,
                    })

        return self.get_by_user(user_id)

    def list_all(self) -> List[dict]:
        with get_db_session() as db:
            rows = fetch_all(db, "SELECT * FROM profiles")
        return [decode_profile(row) for row in rows]


def get_user_service() -> UserService:
    """Get user service instance."""
    return UserService()


def get_profile_service() -> ProfileService:
    """Get profile service instance."""
    return ProfileService()
