# topmark:header:start
#
#   project      : SpanMark
#   file         : assemble.py
#   file_relpath : src/spanmark/diagnostic/assemble.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Assemble complete diagnostic messages around a rendered plan.

Text layout (plain, ASCII and color modes):

    error: <message>
    <rendered contexts>
    <description>
    Did you mean: <suggestion>?
    Version: <version>
    Underlying error(s):
    <nested diagnostics>

Lines whose content is empty are left out. HTML mode produces one ``<div>`` per
diagnostic with the rendered contexts embedded.
"""

from __future__ import annotations

import html
from functools import partial
from typing import TYPE_CHECKING

import click

from spanmark.layout.engine import layout
from spanmark.layout.merge import merge
from spanmark.rendering.api import render
from spanmark.rendering.formats import RenderMode

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from spanmark.diagnostic.model import Diagnostic
    from spanmark.model.context import Context


def _identity(text: str) -> str:
    return text


_SUGGESTION_STYLE = partial(click.style, fg="blue")
_VERSION_STYLE = partial(click.style, fg="green")
_UNDERLYING_STYLE = partial(click.style, fg="yellow")


def _suggestion_label(count: int) -> str:
    return "Did you mean" if count == 1 else "Did you mean any of"


def _underlying_label(count: int) -> str:
    return "Underlying error" if count == 1 else "Underlying errors"


def _render_contexts(diagnostic: Diagnostic, mode: RenderMode) -> str | None:
    """Render the located contexts of a diagnostic; None when it has no location."""
    contexts: list[Context] = [c for c in merge(diagnostic.contexts) if not c.is_empty]
    if not contexts:
        return None
    return render(layout(contexts), mode)


def _format_text(diagnostic: Diagnostic, mode: RenderMode) -> list[str]:
    colored: bool = mode is RenderMode.COLOR

    def style(colorizer: Callable[[str], str]) -> Callable[[str], str]:
        return colorizer if colored else _identity

    level: str = style(diagnostic.level.color)(diagnostic.level.value)
    lines: list[str] = [f"{level}: {diagnostic.message}"]
    rendered: str | None = _render_contexts(diagnostic, mode)
    if rendered is not None:
        lines.append(rendered)
    if diagnostic.description:
        lines.append(diagnostic.description)
    if diagnostic.suggestions:
        label: str = style(_SUGGESTION_STYLE)(_suggestion_label(len(diagnostic.suggestions)))
        lines.append(f"{label}: {', '.join(diagnostic.suggestions)}?")
    if diagnostic.version:
        lines.append(f"{style(_VERSION_STYLE)('Version')}: {diagnostic.version}")
    if diagnostic.underlying:
        heading: str = style(_UNDERLYING_STYLE)(_underlying_label(len(diagnostic.underlying)))
        lines.append(f"{heading}:")
        for index, nested in enumerate(diagnostic.underlying):
            if index:
                lines.append("")
            lines.extend(_format_text(nested, mode))
    return lines


def _format_html(diagnostic: Diagnostic) -> str:
    esc = html.escape
    parts: list[str] = [
        f"<div class='{diagnostic.level.value}'>",
        f"<p class='title'>{esc(diagnostic.message)}</p>",
        "<div class='contexts'>",
    ]
    rendered: str | None = _render_contexts(diagnostic, RenderMode.HTML)
    if rendered is not None:
        parts.append(rendered)
    parts.append("</div>")
    if diagnostic.description:
        parts.append(f"<p class='description'>{esc(diagnostic.description)}</p>")
    if diagnostic.suggestions:
        parts.append(f"<p>{_suggestion_label(len(diagnostic.suggestions))}?</p><ul>")
        parts.extend(f"<li class='suggestion'>{esc(s)}</li>" for s in diagnostic.suggestions)
        parts.append("</ul>")
    if diagnostic.version:
        parts.append(
            "<p class='version'>Version: "
            f"<span class='version-text'>{esc(diagnostic.version)}</span></p>"
        )
    if diagnostic.underlying:
        parts.append(
            "<label><input type='checkbox'></input> "
            f"{_underlying_label(len(diagnostic.underlying))}</label><ul>"
        )
        parts.extend(
            f"<li class='underlying_error'>{_format_html(nested)}</li>"
            for nested in diagnostic.underlying
        )
        parts.append("</ul>")
    parts.append("</div>")
    return "".join(parts)


def format_diagnostic(diagnostic: Diagnostic, mode: RenderMode | str = RenderMode.PLAIN) -> str:
    """Format one diagnostic, its contexts and its footers.

    Args:
        diagnostic (Diagnostic): The diagnostic to format.
        mode (RenderMode | str): Output encoding. Defaults to ``PLAIN``.

    Returns:
        str: The formatted diagnostic, without a trailing newline.
    """
    mode = RenderMode(mode)
    if mode is RenderMode.HTML:
        return _format_html(diagnostic)
    return "\n".join(_format_text(diagnostic, mode))


def format_all(
    diagnostics: Iterable[Diagnostic], mode: RenderMode | str = RenderMode.PLAIN
) -> str:
    """Format several diagnostics, separated by a blank line (one per line in HTML)."""
    mode = RenderMode(mode)
    separator: str = "\n" if mode is RenderMode.HTML else "\n\n"
    return separator.join(format_diagnostic(d, mode) for d in diagnostics)
