# topmark:header:start
#
#   project      : SpanMark
#   file         : span.py
#   file_relpath : src/spanmark/model/span.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Highlighted column ranges on a single source line.

A `Span` is an immutable, half-open column range ``[start_col, end_col)`` with an
optional comment and an optional tag. Columns are 0-based character offsets into
one line. Validation happens at construction time so the merge and layout engines
only ever see well-formed spans.

Sections:
    * GlyphClass: the underline category a span renders with.
    * Span: the immutable span value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from spanmark.core.errors import InvalidSpanError


class GlyphClass(str, Enum):
    """Abstract marker vocabulary shared by the render plan and all backends.

    Attributes:
        POINT: Zero-width insertion point.
        SHORT: Underline for a single column.
        LONG: Underline for two or more columns, drawn with end caps.
        ELBOW: Connector turning from a marker into its comment.
        PASS: Vertical connector passing a pending comment's column.
    """

    POINT = "point"
    SHORT = "short"
    LONG = "long"
    ELBOW = "elbow"
    PASS = "pass"


def underline_class(width: int) -> GlyphClass:
    """Return the underline glyph class for a column width.

    Args:
        width (int): Number of highlighted columns (after clamping).

    Returns:
        GlyphClass: ``POINT`` for 0, ``SHORT`` for 1, ``LONG`` otherwise.
    """
    if width <= 0:
        return GlyphClass.POINT
    if width == 1:
        return GlyphClass.SHORT
    return GlyphClass.LONG


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open column range [start_col, end_col) on one line.

    Attributes:
        start_col (int): First highlighted column (0-based).
        end_col (int): Column just past the highlight; equal to ``start_col``
            for an insertion point.
        comment (str | None): Optional text shown beneath the underline.
        tag (str | None): Optional short label, shown right aligned next to the
            comment and used as a color key.

    Raises:
        InvalidSpanError: If a column is negative or ``start_col > end_col``.
    """

    start_col: int
    end_col: int
    comment: str | None = None
    tag: str | None = None

    def __post_init__(self) -> None:
        if self.start_col < 0 or self.end_col < 0 or self.start_col > self.end_col:
            raise InvalidSpanError(self.start_col, self.end_col)

    @classmethod
    def point(cls, col: int, comment: str | None = None, tag: str | None = None) -> Span:
        """Create a zero-width span marking an insertion point."""
        return cls(col, col, comment, tag)

    @classmethod
    def of_length(
        cls,
        start_col: int,
        length: int,
        comment: str | None = None,
        tag: str | None = None,
    ) -> Span:
        """Create a span from a start column and a length."""
        return cls(start_col, start_col + length, comment, tag)

    @property
    def width(self) -> int:
        """Number of columns covered by this span."""
        return self.end_col - self.start_col

    @property
    def glyph_class(self) -> GlyphClass:
        """Underline class for the unclamped width of this span."""
        return underline_class(self.width)

    @property
    def is_annotated(self) -> bool:
        """True when the span needs a comment row (comment or tag present)."""
        return self.comment is not None or self.tag is not None

    def clamped(self, line_length: int) -> tuple[int, int]:
        """Return the column range clipped to a rendered line length.

        Args:
            line_length (int): Number of rendered characters on the line.

        Returns:
            tuple[int, int]: ``(start, end)`` with ``start <= end <= line_length``
            except for a start past the line end, which is pulled back to the end.
        """
        start: int = min(self.start_col, line_length)
        end: int = max(start, min(self.end_col, line_length))
        return start, end
