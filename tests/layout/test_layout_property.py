# topmark:header:start
#
#   project      : SpanMark
#   file         : test_layout_property.py
#   file_relpath : tests/layout/test_layout_property.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

# pyright: strict

"""Property tests for merging, layout and the cross-mode rendering contract.

Generated occurrence lists are merged, laid out and rendered in every mode; the
suite asserts that:
1) merging and layout are deterministic, and merging is idempotent;
2) every mode emits one output line per plan row;
3) color output without escape codes, and HTML output without tags, equal plain output;
4) markers stay within one column past the (clamped) line end;
5) all tags of a plan end in the same column.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from hypothesis import HealthCheck, given, settings

from spanmark.layout.engine import layout
from spanmark.layout.merge import merge
from spanmark.layout.plan import CommentRow, SourceLine, UnderlineRow
from spanmark.rendering.api import render
from spanmark.rendering.formats import RenderMode
from tests.conftest import strip_ansi, strip_html
from tests.strategies_spanmark import s_occurrences

if TYPE_CHECKING:
    from spanmark.layout.plan import RenderPlan
    from spanmark.model.context import Context


# Mark the entire test module
pytestmark: pytest.MarkDecorator = pytest.mark.hypothesis_slow

_SETTINGS = settings(
    suppress_health_check=[HealthCheck.too_slow],
    deadline=None,
    max_examples=60,
)


@_SETTINGS
@given(occurrences=s_occurrences())
def test_merge_and_layout_are_deterministic(occurrences: list[Context]) -> None:
    """Same input, same plan; merging merged contexts changes nothing."""
    merged: list[Context] = merge(occurrences)
    assert merge(merged) == merged
    assert len({c.identity_key for c in merged}) == len(merged)
    assert layout(merged) == layout(merge(occurrences))


@_SETTINGS
@given(occurrences=s_occurrences())
def test_modes_agree_row_for_row(occurrences: list[Context]) -> None:
    """Every mode renders the same rows; decorations strip back to plain text."""
    plan: RenderPlan = layout(merge(occurrences))
    plain: str = render(plan, RenderMode.PLAIN)
    colored: str = render(plan, RenderMode.COLOR)
    marked_up: str = render(plan, RenderMode.HTML)
    ascii_text: str = render(plan, RenderMode.ASCII)

    for out in (plain, colored, marked_up, ascii_text):
        assert len(out.split("\n")) == len(plan.rows)
    assert strip_ansi(colored) == plain
    assert strip_html(marked_up) == plain
    assert ascii_text.isascii()


@_SETTINGS
@given(occurrences=s_occurrences())
def test_markers_stay_near_the_line(occurrences: list[Context]) -> None:
    """Markers never reach more than one column past their line's content."""
    plan: RenderPlan = layout(merge(occurrences))
    line: SourceLine | None = None
    for row in plan.rows:
        if isinstance(row, SourceLine):
            line = row
        elif isinstance(row, UnderlineRow):
            assert line is not None
            for marker in row.markers:
                assert marker.start <= marker.end
                assert marker.start + marker.extent <= line.display_length + 1


@_SETTINGS
@given(occurrences=s_occurrences())
def test_tags_share_one_end_column(occurrences: list[Context]) -> None:
    """Tags are right-aligned past every comment in the plan."""
    plan: RenderPlan = layout(merge(occurrences))
    tagged: list[CommentRow] = [
        r for r in plan.rows if isinstance(r, CommentRow) and r.tag is not None
    ]
    ends: set[int] = {r.tag_col + len(r.tag or "") for r in tagged}
    assert len(ends) <= 1
    for row in tagged:
        assert row.tag_col > row.text_col + len(row.text)
