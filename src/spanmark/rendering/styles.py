# topmark:header:start
#
#   project      : SpanMark
#   file         : styles.py
#   file_relpath : src/spanmark/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Stylers: the decoration capability of a rendering backend.

A styler wraps already-positioned text pieces. It never adds or removes display
columns, so the styled output of every backend lines up with the plain one:

    - `PlainStyler`: identity; used by the plain and ASCII backends.
    - `AnsiStyler`: `click.style` colors keyed by marker tag or stacking index.
    - `HtmlStyler`: escapes text with `html.escape` and wraps pieces in
      ``<span>`` elements and rows in ``<div>`` elements.
"""

from __future__ import annotations

import html
from typing import Protocol

import click

from spanmark.rendering.colored_enum import MarkerColor


class Styler(Protocol):
    """Decoration hooks applied by the plan serializer."""

    def text(self, text: str) -> str:
        """Undecorated filler text (padding, separators)."""
        ...

    def gutter(self, text: str) -> str:
        """Line number column."""
        ...

    def frame(self, text: str) -> str:
        """Borders, gutter bars and the trim ellipsis."""
        ...

    def source(self, text: str) -> str:
        """Source line content."""
        ...

    def location(self, text: str) -> str:
        """Location tag embedded in a border."""
        ...

    def marker(self, text: str, stack: int, tag: str | None) -> str:
        """Underline marker or connector glyphs."""
        ...

    def comment(self, text: str, stack: int, tag: str | None) -> str:
        """Comment text."""
        ...

    def tag(self, text: str, stack: int) -> str:
        """Right-aligned span tag."""
        ...

    def row(self, text: str, kind: str) -> str:
        """A complete row."""
        ...


class PlainStyler:
    """Styler that leaves every piece untouched."""

    def text(self, text: str) -> str:
        return text

    def gutter(self, text: str) -> str:
        return text

    def frame(self, text: str) -> str:
        return text

    def source(self, text: str) -> str:
        return text

    def location(self, text: str) -> str:
        return text

    def marker(self, text: str, stack: int, tag: str | None) -> str:
        return text

    def comment(self, text: str, stack: int, tag: str | None) -> str:
        return text

    def tag(self, text: str, stack: int) -> str:
        return text

    def row(self, text: str, kind: str) -> str:
        return text


def _styled(text: str, fg: str | None = None, bold: bool | None = None) -> str:
    """Apply `click.style` to non-empty text only."""
    return click.style(text, fg=fg, bold=bold) if text else text


class AnsiStyler:
    """Styler emitting ANSI SGR codes through `click.style`.

    Every styled run is reset right after its text.
    """

    def text(self, text: str) -> str:
        return text

    def gutter(self, text: str) -> str:
        return _styled(text, fg="blue", bold=True)

    def frame(self, text: str) -> str:
        return _styled(text, fg="blue")

    def source(self, text: str) -> str:
        return text

    def location(self, text: str) -> str:
        return _styled(text, bold=True)

    def marker(self, text: str, stack: int, tag: str | None) -> str:
        return MarkerColor.pick(stack, tag).color(text) if text else text

    def comment(self, text: str, stack: int, tag: str | None) -> str:
        return MarkerColor.pick(stack, tag).color(text) if text else text

    def tag(self, text: str, stack: int) -> str:
        return MarkerColor.pick(stack, text).color(text) if text else text

    def row(self, text: str, kind: str) -> str:
        return text


def _span(css_class: str, text: str) -> str:
    return f"<span class='{css_class}'>{html.escape(text)}</span>" if text else ""


class HtmlStyler:
    """Styler producing an escaped markup fragment, one ``<div>`` per row."""

    def text(self, text: str) -> str:
        return html.escape(text)

    def gutter(self, text: str) -> str:
        return _span("spanmark-gutter", text)

    def frame(self, text: str) -> str:
        return _span("spanmark-frame", text)

    def source(self, text: str) -> str:
        return _span("spanmark-source", text)

    def location(self, text: str) -> str:
        return _span("spanmark-location", text)

    def marker(self, text: str, stack: int, tag: str | None) -> str:
        return _span(f"spanmark-marker spanmark-stack-{stack}", text)

    def comment(self, text: str, stack: int, tag: str | None) -> str:
        return _span(f"spanmark-comment spanmark-stack-{stack}", text)

    def tag(self, text: str, stack: int) -> str:
        return _span(f"spanmark-tag spanmark-stack-{stack}", text)

    def row(self, text: str, kind: str) -> str:
        return f"<div class='spanmark-row spanmark-{kind}'>{text}</div>"
