"""Configuration management using pydantic-settings."""

from .settings import (
    BoundarySettings,
    LoggingSettings,
    MonadkitSettings,
    clear_settings_cache,
    get_settings,
)

__all__ = [
    "BoundarySettings",
    "LoggingSettings",
    "MonadkitSettings",
    "clear_settings_cache",
    "get_settings",
]
