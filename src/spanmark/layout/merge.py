# topmark:header:start
#
#   project      : SpanMark
#   file         : merge.py
#   file_relpath : src/spanmark/layout/merge.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Merge engine: fold occurrences of one logical error into distinct contexts.

Occurrences are walked in input order. Contexts with the same identity key
(file name, start line, lines) collapse into one entry that keeps its
first-seen position; their highlight groups are unioned per line with
identical spans deduplicated. Output is never reordered, so callers sort
occurrences beforehand when they want a particular top-to-bottom order.

The engine is pure and total over well-formed input.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from spanmark.config.logging import get_logger
from spanmark.model.context import Context
from spanmark.model.highlight import HighlightGroup

if TYPE_CHECKING:
    from spanmark.config.logging import SpanmarkLogger
    from spanmark.model.context import ContextKey

logger: SpanmarkLogger = get_logger(__name__)

Occurrence = Context | tuple[Context, HighlightGroup | None]


def _unpack(occurrence: Occurrence) -> Context:
    """Return the occurrence's context with its extra highlight group folded in."""
    if isinstance(occurrence, Context):
        return occurrence
    context, extra = occurrence
    if extra:
        return context.with_highlights(extra)
    return context


def merge(occurrences: Iterable[Occurrence]) -> list[Context]:
    """Merge occurrences into an ordered list of distinct contexts.

    Args:
        occurrences (Iterable[Occurrence]): Contexts, or ``(context, extra_group)``
            pairs whose extra group is added to the context's own highlights.

    Returns:
        list[Context]: One context per identity key, in first-seen order, each
        carrying the union of all highlights seen for that key.
    """
    return merge_contexts([], occurrences)


def merge_contexts(existing: Iterable[Context], occurrences: Iterable[Occurrence]) -> list[Context]:
    """Merge new occurrences into an already merged list of contexts.

    ``existing`` is merged first (so it is itself deduplicated), then each new
    occurrence either extends a known context or is appended.

    Args:
        existing (Iterable[Context]): Previously merged contexts.
        occurrences (Iterable[Occurrence]): New occurrences to fold in.

    Returns:
        list[Context]: A new list; the inputs are not modified.
    """
    merged: list[Context] = []
    slots: dict[ContextKey, int] = {}
    seen: int = 0

    def _fold(context: Context) -> None:
        key: ContextKey = context.identity_key
        slot: int | None = slots.get(key)
        if slot is None:
            slots[key] = len(merged)
            merged.append(context)
            return
        merged[slot] = merged[slot].with_highlights(context.highlights)

    for context in existing:
        seen += 1
        _fold(context)
    for occurrence in occurrences:
        seen += 1
        _fold(_unpack(occurrence))

    logger.trace("Merged %d occurrence(s) into %d context(s)", seen, len(merged))
    return merged
