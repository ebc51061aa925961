"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import structlog
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Path constants - calculated once at module load
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
DEFAULT_DATABASE_PATH = PROJECT_ROOT / "wordvault.db"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = f"sqlite:///{DEFAULT_DATABASE_PATH}"

    # API (constants, not from env)
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "wordvault"
    VERSION: str = "0.1.0"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    # CORS
    CORS_ORIGINS: list[str] = ["*"]

    # Backup
    BACKUP_FILE_NAME: str = "vocab_backup.json"
    BACKUP_DEBOUNCE_SECONDS: float = 10.0

    # Word list
    DEFAULT_PAGE_SIZE: int = 100
    MAX_PAGE_SIZE: int = 200

    # Review
    REVIEW_MEANING_FIRST_PROBABILITY: float = 0.7

    # Import
    IMPORT_YIELD_INTERVAL: int = 1500

    @field_validator("REVIEW_MEANING_FIRST_PROBABILITY", mode="after")
    @classmethod
    def validate_probability(cls, value: float) -> float:
        """Probability must lie within [0, 1]."""
        if not 0.0 <= value <= 1.0:
            msg = "REVIEW_MEANING_FIRST_PROBABILITY must be between 0 and 1"
            raise ValueError(msg)
        return value

    @field_validator("BACKUP_DEBOUNCE_SECONDS", mode="after")
    @classmethod
    def validate_debounce(cls, value: float) -> float:
        """Debounce delay cannot be negative."""
        if value < 0:
            msg = "BACKUP_DEBOUNCE_SECONDS cannot be negative"
            raise ValueError(msg)
        return value

    @field_validator("IMPORT_YIELD_INTERVAL", mode="after")
    @classmethod
    def validate_yield_interval(cls, value: int) -> int:
        """Import must yield at least every N >= 1 inserts."""
        if value < 1:
            msg = "IMPORT_YIELD_INTERVAL must be at least 1"
            raise ValueError(msg)
        return value

    @model_validator(mode="after")
    def validate_page_sizes(self) -> "Settings":
        """Validate page size configuration."""
        if self.MAX_PAGE_SIZE < 1:
            msg = "MAX_PAGE_SIZE must be at least 1"
            raise ValueError(msg)
        if not 1 <= self.DEFAULT_PAGE_SIZE <= self.MAX_PAGE_SIZE:
            msg = "DEFAULT_PAGE_SIZE must be between 1 and MAX_PAGE_SIZE"
            raise ValueError(msg)
        return self


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

    processors: list[Callable[..., Any]] = [
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
