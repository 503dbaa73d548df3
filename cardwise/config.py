"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cardwise.domain.common.value_objects.language import SUPPORTED_LANGUAGES

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    DATABASE_URL: str = f"sqlite:///{PROJECT_ROOT / 'cardwise.db'}"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "cardwise API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Flashcard bundles
    BUNDLE_CACHE_TTL_SECONDS: float = 60.0
    DEFAULT_LANGUAGE: str = "pt"

    @field_validator("BUNDLE_CACHE_TTL_SECONDS", mode="after")
    @classmethod
    def validate_cache_ttl(cls, value: float) -> float:
        """Reject non-positive cache lifetimes."""
        if value <= 0:
            msg = "BUNDLE_CACHE_TTL_SECONDS must be positive"
            raise ValueError(msg)
        return value

    @field_validator("DEFAULT_LANGUAGE", mode="after")
    @classmethod
    def validate_default_language(cls, value: str) -> str:
        """Only supported languages can be the default."""
        value = value.strip().lower()
        if value not in SUPPORTED_LANGUAGES:
            msg = f"DEFAULT_LANGUAGE must be one of {', '.join(SUPPORTED_LANGUAGES)}"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # Determine if we should use JSON output (production) or console output (dev)
    use_json = environment == "production"

    # Configure stdlib logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        # Production: JSON output
        processors.append(structlog.processors.JSONRenderer())
    else:
        # Development: Console output with colors
        processors.append(structlog.dev.ConsoleRenderer())

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
