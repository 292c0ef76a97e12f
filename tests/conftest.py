# topmark:header:start
#
#   project      : SpanMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Pytest configuration for the SpanMark test suite.

This file sets up global fixtures, typed wrappers around pytest decorators and
small helpers shared by the rendering tests.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    settings with `spanmark.config.model.MutableRenderConfig`, then `freeze()`
    into a `RenderConfig`. Do **not** mutate a frozen config; call
    `RenderConfig.thaw()` instead.
"""

from __future__ import annotations

import html
import re
from collections.abc import Callable
from typing import Any, Final, TypeVar, cast

import pytest

from spanmark.config import logging
from spanmark.config.logging import LOG_LEVEL_ENV

F = TypeVar("F", bound=Callable[..., object])

# This defines the type for the decorator function itself:
# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]

ANSI_RE: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")
TAG_RE: Final[re.Pattern[str]] = re.compile(r"<[^>]+>")


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_spanmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure SpanMark's runtime log level is not forced via env during tests.

    Also clears the color and mode environment variables so a developer's shell
    settings cannot change rendering results.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    for name in (LOG_LEVEL_ENV, "SPANMARK_MODE", "FORCE_COLOR", "NO_COLOR"):
        monkeypatch.delenv(name, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for all tests so trace calls are exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI SGR sequences."""
    return ANSI_RE.sub("", text)


def strip_html(text: str) -> str:
    """Return ``text`` without markup, entities unescaped, one line per row element."""
    return html.unescape(TAG_RE.sub("", text))
