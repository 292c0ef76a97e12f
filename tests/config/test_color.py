# topmark:header:start
#
#   project      : SpanMark
#   file         : test_color.py
#   file_relpath : tests/config/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Tests for `spanmark.config.color.resolve_color_mode`."""

from __future__ import annotations

from typing import TYPE_CHECKING

from spanmark.config.color import ColorMode, color_forced, resolve_color_mode
from tests.conftest import parametrize

if TYPE_CHECKING:
    import pytest


@parametrize(
    "mode, isatty, expected",
    [
        (ColorMode.ALWAYS, False, True),
        (ColorMode.NEVER, True, False),
        (ColorMode.AUTO, True, True),
        (ColorMode.AUTO, False, False),
        (None, True, True),
    ],
)
def test_explicit_and_auto(mode: ColorMode | None, isatty: bool, expected: bool) -> None:
    """Explicit settings win; otherwise the TTY decides."""
    assert resolve_color_mode(color_mode=mode, stdout_isatty=isatty) is expected


def test_force_color_beats_tty(monkeypatch: pytest.MonkeyPatch) -> None:
    """``FORCE_COLOR`` enables color without a TTY, but not over ``NEVER``."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert color_forced()
    assert resolve_color_mode(color_mode=ColorMode.AUTO, stdout_isatty=False) is True
    assert resolve_color_mode(color_mode=ColorMode.NEVER, stdout_isatty=True) is False


def test_force_color_zero_is_ignored(monkeypatch: pytest.MonkeyPatch) -> None:
    """``FORCE_COLOR=0`` does not force anything."""
    monkeypatch.setenv("FORCE_COLOR", "0")
    assert not color_forced()
    assert resolve_color_mode(color_mode=None, stdout_isatty=False) is False


def test_no_color_disables_auto(monkeypatch: pytest.MonkeyPatch) -> None:
    """``NO_COLOR`` (any value, even empty) disables auto color on a TTY."""
    monkeypatch.setenv("NO_COLOR", "")
    assert resolve_color_mode(color_mode=ColorMode.AUTO, stdout_isatty=True) is False
    assert resolve_color_mode(color_mode=ColorMode.ALWAYS, stdout_isatty=True) is True
