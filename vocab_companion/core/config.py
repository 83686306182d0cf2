"""Application configuration from environment."""
import logging
import sys
from functools import lru_cache
from typing import Any, Callable, Literal

import structlog
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """App settings loaded from env / .env."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Vocab Companion"
    debug: bool = False
    environment: Literal["development", "production", "test"] = "development"

    # Database
    database_url: str = "sqlite+aiosqlite:///./vocab_companion.db"

    # Google Translate v2
    google_translate_api_key: str | None = None  # env GOOGLE_TRANSLATE_API_KEY
    google_translate_url: str = "https://translation.googleapis.com/language/translate/v2"
    translate_timeout_seconds: float = 10.0

    cors_origins: list[str] = ["*"]

    history_limit: int = 50  # max entries returned by GET /api/translations/{user_id}
    seed_vocabulary: bool = True


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(environment: str = "development") -> None:
    """Configure structlog on top of stdlib logging."""
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
    if environment == "production":
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
