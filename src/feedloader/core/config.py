"""feedloader configuration.

Settings loaded from environment variables with FEEDLOADER_ prefix.

Example:
    >>> from feedloader.core.config import get_settings
    >>> settings = get_settings(log_level="DEBUG")
    >>> settings.log_level
    'DEBUG'
    >>> settings.expectation_timeout
    1.0
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_LOGGER = "feedloader"
MAX_RETRY_LIMIT = 200


class Settings(BaseSettings):
    """Application settings.

    Loads from environment variables with FEEDLOADER_ prefix.

    Example:
        >>> from feedloader.core.config import Settings
        >>> s = Settings(default_retry_count=2)
        >>> s.default_retry_count
        2
    """

    model_config = SettingsConfigDict(
        env_prefix="FEEDLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level for the feedloader logger")

    # Composition
    default_retry_count: int = Field(default=0, ge=0, description="Retries used when none is given")
    max_retry_count: int = Field(
        default=100,
        ge=0,
        le=MAX_RETRY_LIMIT,
        description="Largest count retry() accepts; failure callbacks nest one level per retry",
    )

    # Test harness
    expectation_timeout: float = Field(
        default=1.0,
        gt=0.0,
        description="Seconds a load expectation waits before failing",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in logging.getLevelNamesMapping():
            msg = f"unknown log level: {value!r}"
            raise ValueError(msg)
        return level


def get_settings(**overrides: Any) -> Settings:
    """Get settings with optional overrides.

    Example:
        >>> from feedloader.core.config import get_settings
        >>> s = get_settings(expectation_timeout=0.5)
        >>> s.expectation_timeout
        0.5
    """
    if overrides:
        return Settings(**overrides)
    return _default_settings()


@lru_cache(maxsize=1)
def _default_settings() -> Settings:
    return Settings()


def reset_settings() -> None:
    """Forget cached settings so the environment is read again."""
    _default_settings.cache_clear()


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Apply the configured level to the ``feedloader`` logger.

    Handlers are left to the application; only the level is set.

    Example:
        >>> import logging
        >>> from feedloader.core.config import configure_logging, get_settings
        >>> logger = configure_logging(get_settings(log_level="warning"))
        >>> logger.level == logging.WARNING
        True
    """
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(settings.log_level)
    return logger
