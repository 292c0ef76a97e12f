# topmark:header:start
#
#   project      : SpanMark
#   file         : api.py
#   file_relpath : src/spanmark/rendering/api.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""API for rendering SpanMark plans.

This module selects the backend for a `RenderMode` and serializes a
`RenderPlan` (or a list of contexts, laid out on the fly) into one string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from spanmark.config.logging import get_logger
from spanmark.layout.engine import layout
from spanmark.rendering.backends import Backend
from spanmark.rendering.formats import RenderMode
from spanmark.rendering.glyphs import ASCII_GLYPHS, UNICODE_GLYPHS
from spanmark.rendering.styles import AnsiStyler, HtmlStyler, PlainStyler

if TYPE_CHECKING:
    from collections.abc import Sequence

    from spanmark.config.logging import SpanmarkLogger
    from spanmark.layout.plan import RenderPlan
    from spanmark.model.context import Context

logger: SpanmarkLogger = get_logger(__name__)

_BACKENDS: Final[dict[RenderMode, Backend]] = {
    RenderMode.PLAIN: Backend(RenderMode.PLAIN, UNICODE_GLYPHS, PlainStyler()),
    RenderMode.ASCII: Backend(RenderMode.ASCII, ASCII_GLYPHS, PlainStyler()),
    RenderMode.COLOR: Backend(RenderMode.COLOR, UNICODE_GLYPHS, AnsiStyler()),
    RenderMode.HTML: Backend(RenderMode.HTML, UNICODE_GLYPHS, HtmlStyler()),
}


def get_backend(mode: RenderMode | str) -> Backend:
    """Return the backend implementing ``mode``.

    Args:
        mode (RenderMode | str): A `RenderMode` or its string value.

    Returns:
        Backend: The matching backend.

    Raises:
        ValueError: If ``mode`` is not a known render mode.
    """
    return _BACKENDS[RenderMode(mode)]


def render(plan: RenderPlan, mode: RenderMode | str = RenderMode.PLAIN) -> str:
    """Serialize a render plan for the given output mode.

    Args:
        plan (RenderPlan): Plan produced by `spanmark.layout.engine.layout`.
        mode (RenderMode | str): Output encoding. Defaults to ``PLAIN``.

    Returns:
        str: Newline-separated rows, without a trailing newline.
    """
    backend: Backend = get_backend(mode)
    logger.trace("Rendering %d row(s) as %s", len(plan), backend.mode.value)
    return backend.render(plan)


def render_contexts(contexts: Sequence[Context], mode: RenderMode | str = RenderMode.PLAIN) -> str:
    """Lay out ``contexts`` and render the resulting plan in one step."""
    return render(layout(contexts), mode)
