# topmark:header:start
#
#   project      : SpanMark
#   file         : test_merge.py
#   file_relpath : tests/layout/test_merge.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Tests for the merge engine in `spanmark.layout.merge`."""

from __future__ import annotations

from spanmark.layout.merge import merge, merge_contexts
from spanmark.model.context import Context
from spanmark.model.highlight import HighlightGroup
from spanmark.model.span import Span


def test_identical_occurrences_collapse() -> None:
    """Two occurrences of the same span on the same snippet give one context, one span."""
    occ = Context.line(1, "abc", 0, 1).with_file_name("a.txt")
    merged: list[Context] = merge([occ, occ])
    assert merged == [occ]
    assert len(merged[0].highlights) == 1


def test_highlights_are_unioned_in_first_seen_slot() -> None:
    """Repeats extend the first context; distinct snippets keep input order."""
    a1 = Context.line(1, "abc", 0, 1).with_file_name("a.txt")
    b = Context.line(5, "xyz", 1, 2).with_file_name("b.txt")
    a2 = Context.line(1, "abc", 2, 3).with_file_name("a.txt")
    merged: list[Context] = merge([a1, b, a2])
    assert [c.file_name for c in merged] == ["a.txt", "b.txt"]
    assert merged[0].highlights.spans_for(0) == (Span(0, 1), Span(2, 3))
    assert merged[1] == b


def test_extra_groups_are_folded_in() -> None:
    """``(context, group)`` occurrences add the group to the context's highlights."""
    ctx = Context.full_line(3, "hello")
    extra = HighlightGroup.from_pairs([(0, Span(1, 4, "here"))])
    merged: list[Context] = merge([(ctx, extra), (ctx, None)])
    assert len(merged) == 1
    assert merged[0].highlights.spans_for(0) == (Span(1, 4, "here"),)


def test_never_reorders() -> None:
    """Later line numbers given first stay first."""
    late = Context.full_line(50, "late")
    early = Context.full_line(2, "early")
    assert merge([late, early]) == [late, early]


def test_merge_is_idempotent() -> None:
    """Merging an already merged list changes nothing."""
    occurrences: list[Context] = [
        Context.line(1, "abc", 0, 1),
        Context.line(1, "abc", 1, 2),
        Context.line(2, "abc", 0, 1),
    ]
    once: list[Context] = merge(occurrences)
    assert merge(once) == once


def test_merge_contexts_extends_existing() -> None:
    """New occurrences fold into an existing merged list without mutating it."""
    existing: list[Context] = [Context.line(1, "abc", 0, 1)]
    result: list[Context] = merge_contexts(existing, [Context.line(1, "abc", 2, 3)])
    assert len(existing[0].highlights) == 1
    assert result[0].highlights.spans_for(0) == (Span(0, 1), Span(2, 3))
