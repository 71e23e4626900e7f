"""Configuration management using Pydantic Settings.

Loads configuration from environment variables (prefix ``FPKIT_``) with validation.
"""

import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    # Logging
    log_level: str = Field(
        default="WARNING", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # Combinators
    tap_log_failures: bool = Field(
        default=True,
        description="Log side-effect failures discarded by tap at DEBUG level",
    )

    # Containers
    option_none_message: str = Field(
        default="Option is none",
        min_length=1,
        description="Default UnwrapError message when unwrapping an empty Option",
    )

    model_config = SettingsConfigDict(
        env_prefix="FPKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_settings() -> Settings:
    """Get the cached settings instance."""
    return Settings()


@lru_cache
def get_settings_or_defaults() -> Settings:
    """
    Get the cached settings, falling back to field defaults if they are invalid.

    Used on error paths (unwrapping, discarded side effects) that must not fail
    because of a misconfigured environment.

    Returns:
        Validated settings, or an instance holding only the defaults
    """
    try:
        return get_settings()
    except ValidationError as e:
        logger.warning("Invalid FPKIT_* settings, using defaults: %s", e)
        return Settings.model_construct()
