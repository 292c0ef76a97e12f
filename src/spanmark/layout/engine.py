# topmark:header:start
#
#   project      : SpanMark
#   file         : engine.py
#   file_relpath : src/spanmark/layout/engine.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Layout engine: turn merged contexts into a `RenderPlan`.

Steps:
    1. Compute one gutter width for the whole plan (digits of the largest line
       number shown; 0 when no context carries line numbers).
    2. Open with a top border. Location tags are embedded when more than one
       context is shown or any context names a file; every further context opens
       with a middle border carrying its own tag.
    3. For each line emit the source row, then for every packed underline row its
       markers followed by one comment row per annotated span.
    4. Close with a bottom border.

Packing:
    Spans are clamped to the rendered line, spans with identical clamped columns
    share one marker, and markers are placed left to right (by start column,
    insertion order breaking ties) into the first underline row where they do not
    collide. The row index is the marker's stacking index.

Comments:
    Within an underline row, comments are emitted rightmost first so the
    pass-through connectors of pending comments (always further left) never cross
    comment text. Comments under the same marker keep insertion order. Tags are
    right aligned in one column shared by the whole plan.
"""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING

from spanmark.config.logging import get_logger
from spanmark.layout.plan import (
    Border,
    BorderKind,
    CommentRow,
    Connector,
    Marker,
    RenderPlan,
    SourceLine,
    UnderlineRow,
)
from spanmark.model.span import GlyphClass, underline_class

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from spanmark.config.logging import SpanmarkLogger
    from spanmark.layout.plan import Row
    from spanmark.model.context import Context
    from spanmark.model.span import Span

logger: SpanmarkLogger = get_logger(__name__)

_Columns = tuple[int, int]
_Group = tuple[_Columns, list["Span"]]


def _extent_end(cols: _Columns) -> int:
    """Return the first display column after a drawn marker (points take one column)."""
    start, end = cols
    return start + max(end - start, 1)


def _collides(a: _Columns, b: _Columns) -> bool:
    return a[0] < _extent_end(b) and b[0] < _extent_end(a)


def pack_spans(spans: Sequence[Span], line_length: int) -> list[list[_Group]]:
    """Group and pack the spans of one line into underline rows.

    Args:
        spans (Sequence[Span]): Spans of the line in insertion order.
        line_length (int): Rendered length of the line, used for clamping.

    Returns:
        list[list[_Group]]: One list per underline row; each entry holds the
        clamped ``(start, end)`` columns and the spans sharing them, sorted by
        start column.
    """
    groups: dict[_Columns, list[Span]] = {}
    for span in spans:
        cols: _Columns = span.clamped(line_length)
        if cols != (span.start_col, span.end_col):
            logger.trace(
                "Clamped span %d..%d to %d..%d (line length %d)",
                span.start_col,
                span.end_col,
                cols[0],
                cols[1],
                line_length,
            )
        groups.setdefault(cols, []).append(span)

    rows: list[list[_Group]] = []
    for cols, members in sorted(groups.items(), key=lambda item: item[0][0]):
        for row in rows:
            if not any(_collides(cols, other) for other, _ in row):
                row.append((cols, members))
                break
        else:
            rows.append([(cols, members)])
    return rows


def _first_tag(spans: Iterable[Span]) -> str | None:
    return next((s.tag for s in spans if s.tag is not None), None)


def _comment_rows(row: list[_Group], stack: int, shift: int) -> list[CommentRow]:
    """Build the comment rows for one underline row (tag columns resolved later)."""
    pending: list[tuple[int, Span]] = [
        (cols[0] + shift, span) for cols, members in row for span in members if span.is_annotated
    ]
    # Rightmost first; the sort is stable so spans under one marker keep their order.
    pending.sort(key=lambda item: -item[0])

    out: list[CommentRow] = []
    for index, (col, span) in enumerate(pending):
        passing: dict[int, Connector] = {}
        for later_col, later in pending[index + 1 :]:
            if later_col < col and later_col not in passing:
                passing[later_col] = Connector(later_col, GlyphClass.PASS, stack, later.tag)
        connectors = (
            *sorted(passing.values(), key=lambda c: c.col),
            Connector(col, GlyphClass.ELBOW, stack, span.tag),
        )
        out.append(
            CommentRow(connectors=connectors, text=span.comment or "", tag=span.tag, stack=stack)
        )
    return out


def _line_rows(context: Context, index: int, gutter_width: int) -> list[Row]:
    text: str = context.lines[index]
    trimmed: bool = index == 0 and context.is_trimmed
    shift: int = 1 if trimmed else 0
    number: int | None = context.line_number(index)
    gutter_text: str = " " * gutter_width if number is None else str(number).ljust(gutter_width)

    rows: list[Row] = [SourceLine(gutter_text, text, trimmed)]
    spans: tuple[Span, ...] = context.highlights.spans_for(index)
    if not spans:
        return rows

    for stack, row in enumerate(pack_spans(spans, len(text))):
        markers = tuple(
            Marker(
                start + shift,
                end + shift,
                underline_class(end - start),
                stack,
                _first_tag(members),
            )
            for (start, end), members in row
        )
        rows.append(UnderlineRow(markers))
        rows.extend(_comment_rows(row, stack, shift))
    return rows


def _content_width(rows: Iterable[Row]) -> int:
    """Return the widest display extent of any row's content area."""
    width: int = 0
    for row in rows:
        if isinstance(row, SourceLine):
            width = max(width, row.display_length)
        elif isinstance(row, UnderlineRow):
            width = max([width, *(m.start + m.extent for m in row.markers)])
        elif isinstance(row, CommentRow):
            width = max(width, row.text_col + len(row.text))
    return width


def _align_tags(rows: list[Row]) -> list[Row]:
    """Right-align every comment-row tag in one shared column."""
    tagged: list[CommentRow] = [r for r in rows if isinstance(r, CommentRow) and r.tag is not None]
    if not tagged:
        return rows
    tag_end: int = _content_width(rows) + 1 + max(len(r.tag or "") for r in tagged)
    return [
        replace(row, tag_col=tag_end - len(row.tag))
        if isinstance(row, CommentRow) and row.tag is not None
        else row
        for row in rows
    ]


def layout(contexts: Sequence[Context]) -> RenderPlan:
    """Lay out merged contexts as a single render plan.

    Args:
        contexts (Sequence[Context]): Contexts in display order, typically the
            output of `spanmark.layout.merge.merge`.

    Returns:
        RenderPlan: The rows to draw and the shared gutter width.
    """
    gutter_width: int = max((c.gutter_width for c in contexts), default=0)
    show_tags: bool = len(contexts) > 1 or any(c.file_name is not None for c in contexts)

    rows: list[Row] = []
    if not contexts:
        rows.append(Border(BorderKind.TOP))
    for position, context in enumerate(contexts):
        tag: str | None = (context.location_tag() or None) if show_tags else None
        rows.append(Border(BorderKind.TOP if position == 0 else BorderKind.MIDDLE, tag))
        for index in range(len(context.lines)):
            rows.extend(_line_rows(context, index, gutter_width))
    rows.append(Border(BorderKind.BOTTOM))

    plan = RenderPlan(tuple(_align_tags(rows)), gutter_width)
    logger.debug(
        "Laid out %d context(s) into %d row(s) (gutter width %d)",
        len(contexts),
        len(plan.rows),
        gutter_width,
    )
    return plan
