"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded beyond dev placeholders)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from apm.core.domain_types import MergePolicy
from apm.infrastructure.security import PASSWORD_HASH_METHOD


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://apm:apm@db:5432/apm"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 10
    database_max_overflow: int = 10
    database_pool_recycle_seconds: int = 3600

    # Auth
    jwt_secret: str = "change-me-in-production"
    jwt_ttl_hours: int = 24
    password_hash_method: str = PASSWORD_HASH_METHOD

    # Optional organization admin created at startup when both are set
    admin_email: str | None = None
    admin_password: str | None = None
    admin_first_name: str = "Admin"
    admin_last_name: str = "User"

    # Update semantics for every collection's PUT
    update_merge_policy: MergePolicy = MergePolicy.NON_EMPTY

    # API
    cors_origins: list[str] = ["*"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
