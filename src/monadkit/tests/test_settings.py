"""Tests for environment-driven settings."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from pydantic import ValidationError

from monadkit import MonadkitSettings, clear_settings_cache, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    clear_settings_cache()
    yield
    clear_settings_cache()


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ("MONADKIT_DEBUG", "MONADKIT_LOG_LEVEL", "MONADKIT_LOG_FORMAT",
                "MONADKIT_BOUNDARY_INCLUDE_EXCEPTION_TYPE", "MONADKIT_BOUNDARY_LOG_FAULTS"):
        monkeypatch.delenv(var, raising=False)

    settings = get_settings()

    assert settings.debug is False
    assert settings.logging.level == "INFO"
    assert settings.logging.format == "console"
    assert settings.boundary.include_exception_type is True
    assert settings.boundary.log_faults is True
    assert settings.effective_log_level == "INFO"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_LOG_LEVEL", "warning")
    monkeypatch.setenv("MONADKIT_LOG_FORMAT", "JSON")
    monkeypatch.setenv("MONADKIT_BOUNDARY_LOG_FAULTS", "false")

    settings = get_settings()

    assert settings.logging.level == "WARNING"
    assert settings.logging.format == "json"
    assert settings.boundary.log_faults is False


def test_debug_forces_debug_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_DEBUG", "true")
    monkeypatch.setenv("MONADKIT_LOG_LEVEL", "ERROR")

    assert get_settings().effective_log_level == "DEBUG"


def test_invalid_level_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_LOG_LEVEL", "LOUD")

    with pytest.raises(ValidationError):
        MonadkitSettings()
