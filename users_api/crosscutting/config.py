"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Assemble the database URL from DATABASE_* parts when DATABASE_URL is absent

Collaborators:
  - api/main.py: reads settings for CORS, pool sizing and startup migrations
  - infrastructure/db/pool.py: statement timeout per connection
  - container.py: chooses repository implementation by environment

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic, pure configuration

Notes:
  - Singleton via lru_cache for performance
  - DATABASE_HOST/USER/PASSWORD/NAME/PORT are kept for deployments that
    configure the connection piecewise (serverless env vars)
"""

from functools import lru_cache
from urllib.parse import quote

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        database_url: PostgreSQL connection string (takes precedence)
        database_host/user/password/name/port: piecewise connection settings
        app_env: Application environment (development/test/production)
        log_level: Root log level (default: INFO)
        log_json: Emit JSON log lines (default: True)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin (default: False)
        db_pool_min_size: Minimum pooled connections (default: 1)
        db_pool_max_size: Maximum pooled connections (default: 5)
        db_statement_timeout_ms: Per-statement timeout (default: 30s)
        db_auto_migrate: Run Alembic migrations on startup (default: True)
        alembic_config_path: Path to alembic.ini
    """

    database_url: str = ""

    database_host: str = ""
    database_user: str = ""
    database_password: str = ""
    database_name: str = ""
    database_port: str = "5432"

    # Environment
    app_env: str = "development"

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:3000"
    cors_allow_credentials: bool = False

    # Database - Connection Pool
    # Small defaults: serverless instances each hold their own pool.
    db_pool_min_size: int = 1
    db_pool_max_size: int = 5
    db_statement_timeout_ms: int = 30000  # 30 seconds

    # Database - Schema
    db_auto_migrate: bool = True
    alembic_config_path: str = "alembic.ini"

    @field_validator("db_pool_min_size", "db_pool_max_size")
    @classmethod
    def pool_size_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("pool sizes must be greater than 0")
        return v

    @field_validator("db_statement_timeout_ms")
    @classmethod
    def statement_timeout_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("db_statement_timeout_ms must be >= 0")
        return v

    @model_validator(mode="after")
    def validate_pool_bounds(self):
        if self.db_pool_min_size > self.db_pool_max_size:
            raise ValueError(
                f"db_pool_min_size ({self.db_pool_min_size}) must be <= "
                f"db_pool_max_size ({self.db_pool_max_size})"
            )
        return self

    @model_validator(mode="after")
    def validate_production_requirements(self):
        if self.is_production() and not self.get_database_url():
            raise ValueError(
                "DATABASE_URL or DATABASE_HOST/DATABASE_NAME is required in production"
            )
        return self

    def get_database_url(self) -> str:
        """
        Resolve the connection string.

        DATABASE_URL wins; otherwise a postgresql:// URL is built from the
        DATABASE_* parts (URL form so both psycopg and Alembic accept it).
        Returns "" when nothing is configured.
        """
        if self.database_url.strip():
            return self.database_url.strip()

        if not (self.database_host and self.database_name):
            return ""

        user = quote(self.database_user, safe="")
        password = quote(self.database_password, safe="")
        credentials = f"{user}:{password}@" if password else f"{user}@" if user else ""
        return (
            f"postgresql://{credentials}{self.database_host}:{self.database_port}"
            f"/{quote(self.database_name, safe='')}?sslmode=disable"
        )

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
