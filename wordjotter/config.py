"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordjotter.domain.learning.value_objects import DEFAULT_REVIEW_INTERVALS


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./wordjotter.db"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "WordJotter API"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Spaced repetition
    REVIEW_INTERVALS: list[int] = list(DEFAULT_REVIEW_INTERVALS)
    # None keeps the reset-to-level-0 policy on a wrong answer
    REVIEW_FAILURE_LEVEL_DROP: int | None = None

    # Notebook
    RECENT_WORDS_LIMIT: int = 5

    # IANA zone whose calendar day decides what is due "today"
    TIMEZONE: str = "UTC"

    @field_validator("REVIEW_INTERVALS", mode="after")
    @classmethod
    def validate_review_intervals(cls, value: list[int]) -> list[int]:
        """Reject interval tables the scheduler cannot use."""
        if not value:
            msg = "REVIEW_INTERVALS must contain at least one interval"
            raise ValueError(msg)
        if any(days <= 0 for days in value):
            msg = "REVIEW_INTERVALS must be positive"
            raise ValueError(msg)
        if any(later < earlier for earlier, later in zip(value, value[1:])):
            msg = "REVIEW_INTERVALS must be non-decreasing"
            raise ValueError(msg)
        return value

    @field_validator("REVIEW_FAILURE_LEVEL_DROP", mode="after")
    @classmethod
    def validate_failure_level_drop(cls, value: int | None) -> int | None:
        if value is not None and value <= 0:
            msg = "REVIEW_FAILURE_LEVEL_DROP must be positive when set"
            raise ValueError(msg)
        return value

    @field_validator("TIMEZONE", mode="after")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            msg = f"Unknown TIMEZONE: {value}"
            raise ValueError(msg) from e
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    # JSON output in production, console output otherwise
    use_json = environment == "production"

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.DEBUG if environment == "development" else logging.INFO,
    )

    processors: list[Callable[..., Any]] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
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
