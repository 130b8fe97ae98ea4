"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env (never hardcoded in code paths)
    - get_settings() is cached (lru_cache): single instance per process
    - database_url always carries an async driver for PostgreSQL

Design Decisions:
    - Defaults provided for every non-secret setting: `uvicorn blogapi.main:app` boots locally
    - Google OAuth credentials optional: the OAuth routes report ExternalAuthError when unset
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def normalize_database_url(url: str) -> str:
    """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
    if isinstance(url, str) and url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "postgresql+asyncpg://blog:blog@db:5432/blog"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        return normalize_database_url(v)

    database_pool_size: int = 20
    database_max_overflow: int = 10
    # Development/SQLite only; production schemas come from Alembic
    create_tables_on_startup: bool = False

    # Session tokens
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7

    # Password hashing
    bcrypt_rounds: int = 12

    # Google OAuth
    google_client_id: str | None = None
    google_client_secret: str | None = None
    google_metadata_url: str = (
        "https://accounts.google.com/.well-known/openid-configuration"
    )
    session_secret: str = "change-me-session-secret"
    frontend_url: str = "http://localhost:3000"

    # Pagination
    default_page_size: int = 10
    max_page_size: int = 100

    # Admin seed
    admin_email: str = "admin@example.com"
    admin_password: str = "admin123"
    admin_name: str = "Admin"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def google_oauth_enabled(self) -> bool:
        return bool(self.google_client_id and self.google_client_secret)


@lru_cache
def get_settings() -> Settings:
    return Settings()
