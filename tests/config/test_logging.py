# topmark:header:start
#
#   project      : SpanMark
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Tests for `spanmark.config.logging`."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from spanmark.config.logging import (
    TRACE_LEVEL,
    SpanmarkLogger,
    StyledFormatter,
    get_logger,
    resolve_env_log_level,
)
from tests.conftest import parametrize

if TYPE_CHECKING:
    import pytest


def test_get_logger_returns_spanmark_logger() -> None:
    """Loggers created after import support ``trace``."""
    logger: SpanmarkLogger = get_logger("spanmark.tests.probe")
    assert isinstance(logger, SpanmarkLogger)
    assert logging.getLevelName(TRACE_LEVEL) == "TRACE"


def test_trace_is_emitted_below_debug(caplog: pytest.LogCaptureFixture) -> None:
    """TRACE records are captured when the level allows them."""
    logger: SpanmarkLogger = get_logger("spanmark.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="spanmark.tests.trace"):
        logger.trace("layout of %d rows", 3)
    assert [r.getMessage() for r in caplog.records] == ["layout of 3 rows"]
    assert caplog.records[0].levelno == TRACE_LEVEL


@parametrize(
    "raw, expected",
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("20", 20),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None
) -> None:
    """Names (case-insensitive) and numbers are accepted; unknown names yield None."""
    monkeypatch.setenv("SPANMARK_LOG_LEVEL", raw)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable no level is returned."""
    assert resolve_env_log_level() is None


def test_styled_formatter_colors_by_level() -> None:
    """Warnings are colored and keep the plain message text."""
    record = logging.LogRecord("spanmark", logging.WARNING, __file__, 1, "careful", None, None)
    out: str = StyledFormatter("%(message)s").format(record)
    assert out.startswith("\x1b[")
    assert "careful" in out
