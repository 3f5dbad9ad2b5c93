"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "futureflow_user"
    postgres_password: str = "password"
    postgres_db: str = "futureflow_db"

    # Full URL override (e.g. sqlite:///./futureflow.db for local runs)
    database_url: Optional[str] = None

    # Session cookie
    session_secret_key: str = "change-this-secret"
    session_algorithm: str = "HS256"
    session_cookie_name: str = "futureflow_session"
    session_expire_days: int = 7

    # Password hashing
    bcrypt_rounds: int = Field(12, ge=4, le=31)

    # App
    environment: str = "development"
    cors_origins: List[str] = ["http://localhost:5173"]
    debug: bool = False
    log_level: str = "INFO"

    @property
    def postgres_url(self) -> str:
        """Construct PostgreSQL connection URL"""
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def sqlalchemy_url(self) -> str:
        return self.database_url or self.postgres_url

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
