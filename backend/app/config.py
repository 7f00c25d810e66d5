"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded outside dev defaults)
    - The dev JWT secret is refused unless the database is SQLite
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


DEV_JWT_SECRET = "dev-secret-change-me"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://portfolio:portfolio@db:5432/portfolio"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting providers hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    # Dev default only accepted with SQLite; server databases need JWT_SECRET
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    # Only this address may register (single-owner portfolio)
    admin_email: str = "admin@example.com"

    @field_validator("admin_email")
    @classmethod
    def normalize_admin_email(cls, v: str) -> str:
        return v.strip().lower()

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @model_validator(mode="after")
    def require_jwt_secret(self) -> "Settings":
        if (
            self.jwt_secret == DEV_JWT_SECRET
            and not self.database_url.startswith("sqlite")
        ):
            raise ValueError(
                "JWT_SECRET must be set when running against a server database",
            )
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
