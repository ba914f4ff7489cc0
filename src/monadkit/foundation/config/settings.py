"""Environment-based configuration using pydantic-settings.

Example:
    >>> from monadkit.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.logging.level
    'INFO'

    # Or with environment variables:
    # MONADKIT_LOG_LEVEL=DEBUG
    # MONADKIT_BOUNDARY_INCLUDE_EXCEPTION_TYPE=false
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(
        env_prefix="MONADKIT_LOG_",
        extra="ignore",
    )

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["console", "json", "none"] = "console"
    colors: bool | None = Field(default=None, description="Force console colors; None auto-detects a TTY")

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v

    @field_validator("format", mode="before")
    @classmethod
    def _normalize_format(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v


class BoundarySettings(BaseSettings):
    """Fault boundary behaviour for ``attempt``/``guarded``."""

    model_config = SettingsConfigDict(
        env_prefix="MONADKIT_BOUNDARY_",
        extra="ignore",
    )

    include_exception_type: bool = Field(
        default=True,
        description="Prefix failure messages with the exception class name",
    )
    log_faults: bool = Field(default=True, description="Log every exception caught at the boundary")


class MonadkitSettings(BaseSettings):
    """Root settings for monadkit.

    Loads configuration from environment variables with MONADKIT_ prefix.

    Example environment variables:
        MONADKIT_DEBUG=true
        MONADKIT_LOG_LEVEL=DEBUG
        MONADKIT_LOG_FORMAT=json
        MONADKIT_BOUNDARY_LOG_FAULTS=false
    """

    model_config = SettingsConfigDict(
        env_prefix="MONADKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )

    debug: bool = Field(default=False, description="Enable debug mode")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    boundary: BoundarySettings = Field(default_factory=BoundarySettings)

    @computed_field
    @property
    def effective_log_level(self) -> str:
        """Log level after applying debug mode."""
        return "DEBUG" if self.debug else self.logging.level


@lru_cache(maxsize=1)
def get_settings() -> MonadkitSettings:
    """Get the global settings instance (cached)."""
    return MonadkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing).

    After calling this, the next get_settings() call will
    reload configuration from environment.
    """
    get_settings.cache_clear()
