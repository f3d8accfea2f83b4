"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. The database URL is validated at load time.
"""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults; validate_database rejects an
    empty or synchronous database_url.
    """

    # App
    app_name: str = "tasktree"
    app_version: str = "1.0.0"
    debug: bool = False

    # Database: any SQLAlchemy async URL (sqlite+aiosqlite, postgresql+asyncpg, ...)
    database_url: str = "sqlite+aiosqlite:///./tasks.db"
    database_echo: bool = False
    # Create missing tables on startup (no migration tool is shipped).
    database_create_schema: bool = True

    # Task rules
    # When True, TaskRepository.replace checks status changes against the stored status.
    enforce_status_transitions: bool = True

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_database(self) -> "Settings":
        """Require a non-empty async database URL (driver after '+', e.g. sqlite+aiosqlite)."""
        if not self.database_url:
            raise ValueError(
                "DATABASE_URL is required. Set in environment or .env file "
                "(e.g. sqlite+aiosqlite:///./tasks.db)."
            )
        scheme = self.database_url.split(":", 1)[0]
        if "+" not in scheme:
            raise ValueError(
                f"DATABASE_URL must name an async driver (e.g. 'sqlite+aiosqlite', "
                f"'postgresql+asyncpg'), got scheme: {scheme!r}"
            )
        return self

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins parsed from the comma-separated setting."""
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
