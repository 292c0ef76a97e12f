# topmark:header:start
#
#   project      : SpanMark
#   file         : context.py
#   file_relpath : src/spanmark/model/context.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Source snippets with file/line metadata and their highlights.

A `Context` is an immutable value holding an ordered run of source lines, the
user-facing number of the first line, an optional file name, and the
`HighlightGroup` attached to those lines. Contexts never read files: callers
hand in already-extracted text.

Constructors mirror the common ways a caller knows where an error is:

    - `Context.none`: no context at all.
    - `Context.show`: a single line without line number (e.g. a file name).
    - `Context.full_line`: a whole faulty line with its number.
    - `Context.line`: one highlighted range on one line.
    - `Context.multiple_highlights`: several ranges on a multi-line snippet.
    - `Context.from_text`: split a text block into lines.

Builder methods (``with_*``) return new contexts; nothing is mutated in place.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from spanmark.core.errors import InvalidContextError
from spanmark.model.highlight import HighlightGroup
from spanmark.model.span import Span

if TYPE_CHECKING:
    from collections.abc import Sequence

ContextKey = tuple[str | None, int | None, tuple[str, ...]]


def split_lines(text: str) -> tuple[str, ...]:
    """Split text into lines on line boundaries, dropping the terminators.

    Only ``\\n`` and ``\\r\\n`` end a line; other control characters stay in the
    line so they can be rendered visibly.
    """
    if not text:
        return ()
    lines: list[str] = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return tuple(line[:-1] if line.endswith("\r") else line for line in lines)


@dataclass(frozen=True, slots=True)
class Context:
    """An ordered run of source lines plus their highlights.

    Attributes:
        lines (tuple[str, ...]): The source lines, without terminators.
        start_line (int | None): User-facing (1-based) number of the first line;
            None hides line numbers.
        file_name (str | None): Optional file name or other source label.
        highlights (HighlightGroup): Spans attached to the lines, keyed by line index.
        column_offset (int): Characters cut from the front of the first line; a
            positive value renders the first line as trimmed.

    Raises:
        InvalidContextError: If a highlight points at a line outside ``lines``.
    """

    lines: tuple[str, ...] = ()
    start_line: int | None = None
    file_name: str | None = None
    highlights: HighlightGroup = field(default_factory=HighlightGroup)
    column_offset: int = 0

    def __post_init__(self) -> None:
        last: int | None = self.highlights.max_line_index()
        if last is not None and last >= len(self.lines):
            raise InvalidContextError(last, len(self.lines))
        first: tuple[int, ...] = self.highlights.line_indices()
        if first and first[0] < 0:
            raise InvalidContextError(first[0], len(self.lines))

    # ---------------------------- Constructors ----------------------------

    @classmethod
    def none(cls) -> Context:
        """Create an empty context for errors without any location."""
        return cls()

    @classmethod
    def show(cls, text: str) -> Context:
        """Create a context that only shows a line, without a line number."""
        return cls(lines=split_lines(text))

    @classmethod
    def full_line(cls, line_number: int, text: str) -> Context:
        """Create a context for a fully faulty line with no particular position."""
        return cls(lines=split_lines(text), start_line=line_number)

    @classmethod
    def line(
        cls,
        line_number: int | None,
        text: str,
        start_col: int,
        end_col: int,
        comment: str | None = None,
        tag: str | None = None,
    ) -> Context:
        """Create a context highlighting ``[start_col, end_col)`` on a single line."""
        return cls(
            lines=split_lines(text),
            start_line=line_number,
            highlights=HighlightGroup.from_pairs([(0, Span(start_col, end_col, comment, tag))]),
        )

    @classmethod
    def multiple_highlights(
        cls,
        line_number: int | None,
        text: str,
        highlights: Iterable[tuple[int, Span]],
    ) -> Context:
        """Create a context from a text block and ``(line_index, span)`` pairs."""
        return cls(
            lines=split_lines(text),
            start_line=line_number,
            highlights=HighlightGroup.from_pairs(highlights),
        )

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        start_line: int | None = None,
        file_name: str | None = None,
    ) -> Context:
        """Create a context by splitting ``text`` into lines."""
        return cls(lines=split_lines(text), start_line=start_line, file_name=file_name)

    # ------------------------------ Builders ------------------------------

    def with_file_name(self, file_name: str) -> Context:
        """Return a copy with the given file name."""
        return replace(self, file_name=file_name)

    def with_start_line(self, start_line: int) -> Context:
        """Return a copy whose first line has the given user-facing number."""
        return replace(self, start_line=start_line)

    def with_lines(self, column_offset: int, text: str) -> Context:
        """Return a copy with new lines, cut ``column_offset`` characters into the first line."""
        return replace(self, lines=split_lines(text), column_offset=column_offset)

    def with_highlight(self, line: int, span: Span) -> Context:
        """Return a copy with ``span`` added to line ``line``."""
        return replace(self, highlights=self.highlights.with_span(line, span))

    def with_highlights(self, group: HighlightGroup) -> Context:
        """Return a copy whose highlights are the union with ``group``."""
        return replace(self, highlights=self.highlights.union(group))

    # ----------------------------- Queries -----------------------------

    @property
    def identity_key(self) -> ContextKey:
        """Key under which two contexts are the same snippet for merging."""
        return (self.file_name, self.start_line, self.lines)

    @property
    def is_empty(self) -> bool:
        """True when the context has no lines."""
        return not self.lines

    @property
    def is_trimmed(self) -> bool:
        """True when the first line was cut at the front."""
        return self.column_offset > 0

    def line_number(self, index: int) -> int | None:
        """Return the user-facing number of line ``index``, or None without numbers."""
        if self.start_line is None:
            return None
        return self.start_line + index

    @property
    def last_line_number(self) -> int | None:
        """User-facing number of the last line (or of the first, when empty)."""
        if self.start_line is None:
            return None
        return self.start_line + max(len(self.lines) - 1, 0)

    @property
    def gutter_width(self) -> int:
        """Decimal digit count of the largest line number shown, 0 without numbers."""
        last: int | None = self.last_line_number
        return 0 if last is None else len(str(last))

    def location_tag(self) -> str:
        """Return the ``file:line[:col]`` label used in border rows.

        The column is only added when the context carries line numbers and has a
        single highlight, placed on its first line; it counts from 1 on the
        untrimmed line.
        """
        parts: list[str] = []
        if self.file_name is not None:
            parts.append(self.file_name)
        if self.start_line is not None:
            parts.append(str(self.start_line))
            spans: Sequence[tuple[int, Span]] = list(self.highlights.spans())
            if len(spans) == 1 and spans[0][0] == 0:
                parts.append(str(self.column_offset + spans[0][1].start_col + 1))
        if self.file_name is None and parts:
            return "line " + ":".join(parts)
        return ":".join(parts)
