# topmark:header:start
#
#   project      : SpanMark
#   file         : highlight.py
#   file_relpath : src/spanmark/model/highlight.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Immutable per-line collections of spans.

A `HighlightGroup` maps a line index (relative to its context) to the ordered
spans attached to that line. Insertion order within a line is priority order
for glyph assignment; identical spans are stored only once.

Entries are kept sorted by line index so two groups holding the same spans per
line compare equal regardless of the order lines were first populated.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass

from spanmark.model.span import Span

_Entries = tuple[tuple[int, tuple[Span, ...]], ...]


def _append_unique(spans: tuple[Span, ...], additions: Iterable[Span]) -> tuple[Span, ...]:
    """Append spans not already present, preserving order."""
    out: list[Span] = list(spans)
    for span in additions:
        if span not in out:
            out.append(span)
    return tuple(out)


@dataclass(frozen=True, slots=True)
class HighlightGroup:
    """Mapping from line index to the ordered spans on that line.

    Attributes:
        entries (tuple[tuple[int, tuple[Span, ...]], ...]): ``(line, spans)`` pairs
            sorted by line index; lines without spans are not stored.
    """

    entries: _Entries = ()

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[int, Span]]) -> HighlightGroup:
        """Build a group from ``(line_index, span)`` pairs in insertion order."""
        by_line: dict[int, tuple[Span, ...]] = {}
        for line, span in pairs:
            by_line[line] = _append_unique(by_line.get(line, ()), (span,))
        return cls._from_dict(by_line)

    @classmethod
    def from_mapping(cls, mapping: Mapping[int, Iterable[Span]]) -> HighlightGroup:
        """Build a group from a ``{line_index: spans}`` mapping."""
        return cls._from_dict(
            {line: _append_unique((), spans) for line, spans in mapping.items()}
        )

    @classmethod
    def _from_dict(cls, by_line: Mapping[int, tuple[Span, ...]]) -> HighlightGroup:
        return cls(tuple(sorted(((k, v) for k, v in by_line.items() if v), key=lambda e: e[0])))

    def spans_for(self, line: int) -> tuple[Span, ...]:
        """Return the spans attached to ``line`` (empty when none)."""
        for index, spans in self.entries:
            if index == line:
                return spans
        return ()

    def line_indices(self) -> tuple[int, ...]:
        """Return the line indices carrying at least one span, ascending."""
        return tuple(index for index, _ in self.entries)

    def max_line_index(self) -> int | None:
        """Return the largest line index with spans, or None for an empty group."""
        return self.entries[-1][0] if self.entries else None

    def with_span(self, line: int, span: Span) -> HighlightGroup:
        """Return a new group with ``span`` appended to ``line`` (deduplicated)."""
        return self.union(HighlightGroup(((line, (span,)),)))

    def union(self, other: HighlightGroup) -> HighlightGroup:
        """Return the per-line union of two groups.

        Spans of ``self`` keep their order; spans of ``other`` that are not
        already present on the same line are appended in their own order.
        """
        if not other.entries:
            return self
        by_line: dict[int, tuple[Span, ...]] = dict(self.entries)
        for line, spans in other.entries:
            by_line[line] = _append_unique(by_line.get(line, ()), spans)
        return self._from_dict(by_line)

    def spans(self) -> Iterator[tuple[int, Span]]:
        """Iterate over ``(line_index, span)`` pairs, line by line."""
        for line, spans in self.entries:
            for span in spans:
                yield line, span

    def __iter__(self) -> Iterator[tuple[int, tuple[Span, ...]]]:
        return iter(self.entries)

    def __len__(self) -> int:
        """Return the total number of spans in the group."""
        return sum(len(spans) for _, spans in self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
