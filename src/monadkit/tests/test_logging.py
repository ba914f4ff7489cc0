"""Tests for structured logging."""

from __future__ import annotations

import io
from collections.abc import Iterator

import orjson
import pytest

from monadkit import Failure, Success, chain, clear_settings_cache
from monadkit.runtime.observability.logging import (
    ConsoleRenderer,
    JsonRenderer,
    NoOpRenderer,
    configure_from_settings,
    configure_logging,
    get_logger,
    log_context,
    reset_logging,
)


@pytest.fixture(autouse=True)
def _reset() -> Iterator[None]:
    yield
    reset_logging()
    clear_settings_cache()


def _lines(buf: io.StringIO) -> list[dict[str, object]]:
    return [orjson.loads(line) for line in buf.getvalue().splitlines()]


def test_json_output_with_bound_context() -> None:
    buf = io.StringIO()
    configure_logging(format="json", output=buf)

    get_logger("wallets", service="billing").bind(wallet_id=7).info("loaded", amount=10)

    (entry,) = _lines(buf)
    assert entry["event"] == "loaded"
    assert entry["level"] == "info"
    assert entry["logger"] == "wallets"
    assert entry["service"] == "billing"
    assert entry["wallet_id"] == 7
    assert entry["amount"] == 10
    assert "timestamp" in entry


def test_level_filtering_is_resolved_lazily() -> None:
    log = get_logger("early")  # created before configuration
    buf = io.StringIO()
    configure_logging(format="json", level="WARNING", output=buf)

    log.info("hidden")
    log.warning("shown")
    log.error("also shown")

    assert [(e["level"], e["event"]) for e in _lines(buf)] == [("warning", "shown"), ("error", "also shown")]


def test_unbind_and_new() -> None:
    log = get_logger("x", a=1, b=2)
    assert log.unbind("a").context == {"b": 2, "logger": "x"}
    assert log.new(c=3).context == {"c": 3}


def test_log_context_scope() -> None:
    buf = io.StringIO()
    configure_logging(format="json", output=buf)
    log = get_logger()

    with log_context(request_id="abc"):
        log.info("inside")
    log.info("outside")

    inside, outside = _lines(buf)
    assert inside["request_id"] == "abc"
    assert "request_id" not in outside


def test_console_renderer_plain() -> None:
    buf = io.StringIO()
    configure_logging(format="console", output=buf, colors=False)

    get_logger("c").info("hello", n=1)

    line = buf.getvalue().strip()
    assert "[info] hello" in line
    assert 'logger="c"' in line
    assert "n=1" in line
    assert "\033[" not in line


def test_unknown_format_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown format"):
        configure_logging(format="xml")


def test_configure_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MONADKIT_LOG_FORMAT", "json")
    clear_settings_cache()
    assert isinstance(configure_from_settings(), JsonRenderer)

    monkeypatch.setenv("MONADKIT_LOG_FORMAT", "none")
    clear_settings_cache()
    assert isinstance(configure_from_settings(), NoOpRenderer)

    monkeypatch.setenv("MONADKIT_LOG_FORMAT", "console")
    clear_settings_cache()
    assert isinstance(configure_from_settings(output=io.StringIO()), ConsoleRenderer)


def test_chain_short_circuit_logged_at_debug() -> None:
    buf = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buf)

    chain(Success(1), lambda _: Failure("it broke"), lambda x: Success(x), lambda x: Success(x))

    (entry,) = _lines(buf)
    assert entry["event"] == "chain short-circuited"
    assert entry["logger"] == "monadkit.result"
    assert entry["skipped_from"] == 1
    assert entry["skipped"] == 2
    assert entry["message"] == "it broke"


def test_chain_silent_at_info() -> None:
    buf = io.StringIO()
    configure_logging(format="json", level="INFO", output=buf)

    chain(Failure("x"), lambda x: Success(x))

    assert buf.getvalue() == ""
