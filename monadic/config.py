"""
Library configuration.

Settings are read once from the environment and cached. Tests call
``reset_settings()`` after changing the environment.
"""

import logging
import os
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

ENV_PREFIX = "MONADIC_"

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def parse_bool_env(key: str, default: bool = False) -> bool:
    """Parse boolean environment variable."""
    value = os.environ.get(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def parse_env_var(key: str, default: str | None = None) -> str | None:
    """Parse environment variable with optional default."""
    return os.environ.get(key, default)


class Settings(BaseModel):
    """Runtime switches for the container types."""

    model_config = ConfigDict(frozen=True)

    warn_on_none_conversion: bool = Field(
        default=True,
        description="Emit a UserWarning when Right(None) is converted to Maybe",
    )
    log_level: str = Field(default="WARNING", description="Level of the package logger")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelName(self.log_level)  # type: ignore[no-any-return]


def load_settings() -> Settings:
    """Build settings from ``MONADIC_*`` environment variables."""
    return Settings(
        warn_on_none_conversion=parse_bool_env(
            f"{ENV_PREFIX}WARN_ON_NONE_CONVERSION", default=True
        ),
        log_level=parse_env_var(f"{ENV_PREFIX}LOG_LEVEL", "WARNING") or "WARNING",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return load_settings()


def reset_settings() -> None:
    """Drop cached settings so the next access re-reads the environment."""
    get_settings.cache_clear()


__all__ = [
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "load_settings",
    "parse_bool_env",
    "reset_settings",
]
