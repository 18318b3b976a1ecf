# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# This module loads configuration from environment variables using pydantic-settings.
# It provides a single Settings class with all configuration values.
#
# Usage:
#   from app.config import get_settings
#   print(get_settings().APP_ENV)
#
# Environment variables are loaded from:
# 1. System environment variables
# 2. .env file in the working directory (if exists)
#
# Settings are validated when first loaded. A missing DB_URI stops the
# process before any listener is opened.
# =============================================================================

import logging
from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Uses pydantic-settings to:
    - Automatically load from .env file
    - Validate types and constraints
    - Provide sensible defaults for development
    """

    # -------------------------------------------------------------------------
    # Application Settings
    # -------------------------------------------------------------------------

    APP_ENV: str = Field(
        default="development",
        description="Name of the environment the API runs in"
    )

    PORT: int = Field(
        default=8080,
        ge=0,
        le=65535,
        description="Port for the API server (0 picks a free port)"
    )

    # -------------------------------------------------------------------------
    # Database Configuration
    # -------------------------------------------------------------------------
    # Required - app won't start without it. Only its presence is checked;
    # no connection is ever opened.

    DB_URI: str = Field(
        ...,
        min_length=1,
        description="Database connection URI"
    )

    # -------------------------------------------------------------------------
    # Pydantic Settings Configuration
    # -------------------------------------------------------------------------

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        # Empty values count as unset (DB_URI="" is missing)
        env_ignore_empty=True,
        case_sensitive=True,
        # .env files may carry variables for other tools
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.APP_ENV == "production"


def _describe_errors(exc: ValidationError) -> list[str]:
    problems = []
    for error in exc.errors():
        name = ".".join(str(part) for part in error["loc"])
        if error["type"] == "missing":
            problems.append(f"{name} is required but not set")
        else:
            problems.append(f"{name}: {error['msg']}")
    return problems


def load_settings(env_file: str | None = ".env") -> Settings:
    """
    Load and validate settings, exiting the process on failure.

    Args:
        env_file: Path of the .env file to read, or None to read only
            the process environment. A missing file is not an error.

    Returns:
        Settings: The validated settings

    Raises:
        SystemExit: With status 1 if any setting is missing or invalid
    """
    try:
        return Settings(_env_file=env_file)
    except ValidationError as exc:
        for problem in _describe_errors(exc):
            logger.critical(problem)
        raise SystemExit(1) from exc


@lru_cache
def get_settings() -> Settings:
    """
    Get cached Settings instance.

    Using lru_cache ensures we only parse .env and validate once,
    not on every access. Also used as a FastAPI dependency.

    Returns:
        Settings: The application settings instance
    """
    return load_settings()
