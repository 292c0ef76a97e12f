# topmark:header:start
#
#   project      : SpanMark
#   file         : plan.py
#   file_relpath : src/spanmark/layout/plan.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Encoding-independent render plan produced by the layout engine.

A `RenderPlan` is a flat, ordered sequence of rows. Every layout decision (gutter
width, marker columns, stacking, comment placement, tag alignment) is already
made here; backends only substitute glyphs and styling.

Row kinds:
    * `Border`: top, middle (context separator) and bottom borders, with an
      optional location tag.
    * `SourceLine`: the padded gutter text and the raw line content.
    * `UnderlineRow`: markers under the preceding source line.
    * `CommentRow`: connectors plus a comment, and an optional right-aligned tag.

All columns are *display* columns relative to the start of the content area,
i.e. already shifted for trimmed lines.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from spanmark.model.span import GlyphClass


class BorderKind(str, Enum):
    """Position of a border row within a plan."""

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


@dataclass(frozen=True, slots=True)
class Border:
    """Border row; ``tag`` is the location label embedded in the border, if any."""

    kind: BorderKind
    tag: str | None = None


@dataclass(frozen=True, slots=True)
class SourceLine:
    """A source line with its gutter.

    Attributes:
        gutter_text (str): Line number left-aligned and padded to the plan's gutter width.
        content (str): Raw line content; control characters are mapped by backends.
        trimmed (bool): True when the line was cut at the front and needs an
            ellipsis in its first display column.
    """

    gutter_text: str
    content: str
    trimmed: bool = False

    @property
    def display_length(self) -> int:
        """Number of display columns taken by the content."""
        return len(self.content) + (1 if self.trimmed else 0)


@dataclass(frozen=True, slots=True)
class Marker:
    """Underline marker covering display columns ``[start, end)``.

    A ``POINT`` marker has ``start == end`` and is drawn in column ``start``.
    """

    start: int
    end: int
    glyph: GlyphClass
    stack: int = 0
    tag: str | None = None

    @property
    def extent(self) -> int:
        """Number of display columns the drawn marker occupies."""
        return max(self.end - self.start, 1)


@dataclass(frozen=True, slots=True)
class UnderlineRow:
    """Markers drawn beneath a source line, sorted by start column."""

    markers: tuple[Marker, ...]


@dataclass(frozen=True, slots=True)
class Connector:
    """A single-column connector glyph on a comment row."""

    col: int
    glyph: GlyphClass
    stack: int = 0
    tag: str | None = None


@dataclass(frozen=True, slots=True)
class CommentRow:
    """Comment beneath an underline row.

    Attributes:
        connectors (tuple[Connector, ...]): Connectors sorted by column; the last one
            is the elbow of the commented marker.
        text (str): Comment text, drawn two columns after the elbow.
        tag (str | None): Optional tag, drawn from ``tag_col``.
        tag_col (int): Display column at which ``tag`` starts (right aligned across the plan).
        stack (int): Stacking index of the commented marker.
    """

    connectors: tuple[Connector, ...]
    text: str = ""
    tag: str | None = None
    tag_col: int = 0
    stack: int = 0

    @property
    def text_col(self) -> int:
        """Display column where the comment text starts."""
        return self.connectors[-1].col + 2 if self.connectors else 0


Row = Border | SourceLine | UnderlineRow | CommentRow


@dataclass(frozen=True, slots=True)
class RenderPlan:
    """Ordered rows plus the gutter width shared by every row."""

    rows: tuple[Row, ...]
    gutter_width: int = 0

    def __len__(self) -> int:
        return len(self.rows)
