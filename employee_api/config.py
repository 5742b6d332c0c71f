"""
Employee API — Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads environment variables (or a .env file),
       validates types/ranges, and exposes a singleton `settings` object.
Who:   Imported by the database layer, the app factory and middleware.
When:  Loaded once at module import time; validated during app startup.

Database connection parameters are fixed for the lifetime of the process.
The password comes from the `PASS` environment variable; everything else
has a development default and can be overridden individually, or replaced
wholesale with `DATABASE_URL`.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL, make_url


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes are grouped by concern for readability.
    """

    # ── Database ──────────────────────────────────────────────────────────
    # Async driver used to reach the store (SQLAlchemy dialect+driver name)
    db_driver: str = Field(default="postgresql+asyncpg")
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432, ge=1, le=65535)
    db_user: str = Field(default="postgres")
    db_password: str = Field(
        default="",
        validation_alias=AliasChoices("PASS", "DB_PASSWORD"),
        description="Database password, read from the PASS environment variable",
    )
    db_name: str = Field(default="companydb")

    # Full URL override, e.g. sqlite+aiosqlite:///./employees.db
    database_url: Optional[str] = Field(default=None)

    # Pool sizing: pool_size persistent connections plus max_overflow burst
    db_pool_size: int = Field(default=10, ge=1, le=100)
    db_max_overflow: int = Field(default=5, ge=0, le=50)
    db_pool_pre_ping: bool = Field(default=True)
    db_pool_recycle: int = Field(default=3600, ge=-1)

    @property
    def sqlalchemy_url(self) -> URL:
        """
        What: The URL handed to create_async_engine().
        How:  DATABASE_URL wins when set; otherwise the URL is assembled from
              the individual parts so the password never needs escaping.
        """
        if self.database_url:
            return make_url(self.database_url)
        return URL.create(
            self.db_driver,
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        )

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list of allowed origins
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000, ge=1024, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
    }

    def validate_required_for_production(self) -> None:
        """
        What:  Validates that critical settings are configured.
        When:  Called during app startup (lifespan).
        How:   Collects every problem and raises one ValueError listing them.
        """
        errors = []
        if not self.database_url and not self.db_password:
            errors.append(
                "PASS is not set. The database password must be provided "
                "through the PASS environment variable (or set DATABASE_URL)."
            )
        if errors:
            raise ValueError(
                "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
            )


# Singleton instance — imported throughout the application
settings = Settings()
