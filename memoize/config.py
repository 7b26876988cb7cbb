"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./memoize.db"

    # Record store backing: "sql" keeps records in DATABASE_URL, "memory" in this process
    RECORD_STORE_BACKEND: Literal["sql", "memory"] = "sql"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "memoize API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Identity
    GOOGLE_USERINFO_URL: str = "https://openidconnect.googleapis.com/v1/userinfo"
    IDENTITY_TIMEOUT_SECONDS: float = 10.0

    # Logging: overrides the level implied by ENVIRONMENT
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] | None = None

    @field_validator("IDENTITY_TIMEOUT_SECONDS", mode="after")
    @classmethod
    def positive_timeout(cls, value: float) -> float:
        """Reject non-positive identity timeouts."""
        if value <= 0:
            msg = "IDENTITY_TIMEOUT_SECONDS must be positive"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development", level: str | None = None) -> None:
    """
    Configure structured logging with structlog.

    Production renders JSON lines, other environments a console format.
    ``level`` overrides the environment's default (DEBUG in development, INFO elsewhere).
    """
    use_json = environment == "production"
    default_level = logging.DEBUG if environment == "development" else logging.INFO

    logging.basicConfig(format="%(message)s", stream=sys.stdout)
    logging.getLogger().setLevel(level or default_level)

    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
