# topmark:header:start
#
#   project      : SpanMark
#   file         : backends.py
#   file_relpath : src/spanmark/rendering/backends.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Plan serializer shared by every rendering backend.

A `Backend` pairs a `GlyphTable` (which characters to draw) with a `Styler`
(how to decorate them). The serializer walks a `RenderPlan` once and emits
exactly one output line per row:

    - border rows: ``<pad> <glyph>[─[<tag>]]``
    - source rows: ``<gutter> │ […]<content>``
    - underline and comment rows: ``<pad> ╎ `` followed by positioned glyphs,
      comment text and the right-aligned tag.

Control characters in source lines, comments, tags and location labels are
replaced with one-column glyphs, so every row stays on one output line.
Column positions are taken verbatim from the plan, so all backends agree on
them. Pieces after the last glyph or text are never padded with trailing
spaces.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from spanmark.layout.plan import Border, CommentRow, SourceLine, UnderlineRow

if TYPE_CHECKING:
    from spanmark.layout.plan import RenderPlan, Row
    from spanmark.rendering.formats import RenderMode
    from spanmark.rendering.glyphs import GlyphTable
    from spanmark.rendering.styles import Styler


class _Line:
    """Accumulates positioned pieces of the content area of one row."""

    def __init__(self, styler: Styler) -> None:
        self._styler: Styler = styler
        self._parts: list[str] = []
        self._col: int = 0

    def put(self, col: int, styled: str, width: int) -> None:
        """Pad up to ``col`` and append an already styled piece ``width`` columns wide."""
        if col > self._col:
            self._parts.append(self._styler.text(" " * (col - self._col)))
            self._col = col
        self._parts.append(styled)
        self._col += width

    def render(self) -> str:
        """Return the styled pieces joined, without trailing padding."""
        return "".join(self._parts)


@dataclass(frozen=True, slots=True)
class Backend:
    """One output encoding: a glyph table plus a styler.

    Attributes:
        mode (RenderMode): The mode this backend implements.
        glyphs (GlyphTable): Literal glyph vocabulary.
        styler (Styler): Decoration applied to every positioned piece.
    """

    mode: RenderMode
    glyphs: GlyphTable
    styler: Styler

    def render(self, plan: RenderPlan) -> str:
        """Serialize ``plan`` into one newline-separated buffer."""
        return "\n".join(self.render_rows(plan))

    def render_rows(self, plan: RenderPlan) -> list[str]:
        """Serialize ``plan`` into one string per row."""
        return [self._row(row, plan.gutter_width) for row in plan.rows]

    def _row(self, row: Row, gutter_width: int) -> str:
        if isinstance(row, Border):
            return self.styler.row(self._border(row, gutter_width), f"border-{row.kind.value}")
        if isinstance(row, SourceLine):
            return self.styler.row(self._source(row), "source")
        if isinstance(row, UnderlineRow):
            return self.styler.row(self._underline(row, gutter_width), "underline")
        return self.styler.row(self._comment(row, gutter_width), "comment")

    def _border(self, row: Border, gutter_width: int) -> str:
        s: Styler = self.styler
        out: str = s.text(" " * gutter_width + " ") + s.frame(
            self.glyphs.border(row.kind, row.tag is not None)
        )
        if row.tag is not None:
            out += (
                s.frame(self.glyphs.tag_open)
                + s.location(self.glyphs.visible(row.tag))
                + s.frame(self.glyphs.tag_close)
            )
        return out

    def _source(self, row: SourceLine) -> str:
        s: Styler = self.styler
        out: str = s.gutter(row.gutter_text) + s.text(" ") + s.frame(self.glyphs.source_bar)
        out += s.text(" ")
        if row.trimmed:
            out += s.frame(self.glyphs.ellipsis)
        return out + s.source(self.glyphs.visible(row.content))

    def _note_prefix(self, gutter_width: int) -> str:
        s: Styler = self.styler
        return s.text(" " * gutter_width + " ") + s.frame(self.glyphs.note_bar) + s.text(" ")

    def _underline(self, row: UnderlineRow, gutter_width: int) -> str:
        line = _Line(self.styler)
        for marker in row.markers:
            glyph: str = self.glyphs.underline(marker.glyph, marker.end - marker.start)
            line.put(
                marker.start,
                self.styler.marker(glyph, marker.stack, marker.tag),
                marker.extent,
            )
        return self._note_prefix(gutter_width) + line.render()

    def _comment(self, row: CommentRow, gutter_width: int) -> str:
        line = _Line(self.styler)
        for connector in row.connectors:
            line.put(
                connector.col,
                self.styler.marker(
                    self.glyphs.connector(connector.glyph), connector.stack, connector.tag
                ),
                1,
            )
        if row.text:
            text: str = self.glyphs.visible(row.text)
            line.put(row.text_col, self.styler.comment(text, row.stack, row.tag), len(text))
        if row.tag is not None:
            tag: str = self.glyphs.visible(row.tag)
            line.put(row.tag_col, self.styler.tag(tag, row.stack), len(tag))
        return self._note_prefix(gutter_width) + line.render()
