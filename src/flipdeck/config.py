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

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", env_prefix="FLIPDECK_"
    )

    # Remote backend
    API_URL: str = "http://localhost:8000"
    REQUEST_TIMEOUT: float = 30.0

    # Credentials for the email/password provider
    EMAIL: str = ""
    PASSWORD: str = ""

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    @field_validator("API_URL", mode="after")
    @classmethod
    def normalize_api_url(cls, value: str) -> str:
        """Strip whitespace and trailing slashes from the API URL."""
        return value.strip().rstrip("/")

    @field_validator("REQUEST_TIMEOUT", mode="after")
    @classmethod
    def validate_timeout(cls, value: float) -> float:
        """Reject non-positive request timeouts."""
        if value <= 0:
            msg = "REQUEST_TIMEOUT must be positive"
            raise ValueError(msg)
        return value


def configure_logging(environment: str = "development") -> None:
    """Configure structured logging with structlog."""
    use_json = environment == "production"

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
