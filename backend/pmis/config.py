"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - storage_backend is either "memory" or "sql"

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for every setting: the in-memory backend works out-of-the-box
"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "PMIS API"

    # Storage
    storage_backend: Literal["memory", "sql"] = "memory"
    database_url: str = "sqlite+aiosqlite:///./pmis.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # File import
    import_max_bytes: int = 50 * 1024 * 1024
    import_processing_delay_seconds: float = 2.0

    # No authentication: every request acts as this user
    default_user_id: int = 1

    # Seeded administrator
    admin_username: str = "admin"
    admin_password: str = "admin123"
    admin_email: str = "admin@pmis.com"
    admin_full_name: str = "John Smith"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
