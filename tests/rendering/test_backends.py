# topmark:header:start
#
#   project      : SpanMark
#   file         : test_backends.py
#   file_relpath : tests/rendering/test_backends.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Tests for the rendering backends: exact plain/ASCII output and cross-mode equivalence."""

from __future__ import annotations

import pytest

from spanmark.layout.engine import layout
from spanmark.layout.plan import RenderPlan
from spanmark.model.context import Context
from spanmark.model.span import Span
from spanmark.rendering.api import get_backend, render, render_contexts
from spanmark.rendering.formats import RenderMode
from tests.conftest import parametrize, strip_ansi, strip_html


def _hello() -> Context:
    return Context.multiple_highlights(
        42, "Hello world", [(0, Span(6, 7)), (0, Span(8, 9))]
    ).with_file_name("file.txt")


SCENARIOS: list[list[Context]] = [
    [_hello()],
    [],
    [Context.none()],
    [Context.show("fileee.txt")],
    [Context.line(1, "Hello world", 5, 999)],
    [Context.line(3, "let x = 5;", 4, 5, comment="unused variable")],
    [
        Context.multiple_highlights(
            None, "abcdefghij", [(0, Span(0, 2, "first")), (0, Span(5, 7, "second"))]
        )
    ],
    [
        Context.multiple_highlights(
            1, "let x = 5;", [(0, Span(0, 3, "a", "TAG")), (0, Span(4, 5, "bb", "X"))]
        )
    ],
    [
        Context.line(1, "foo", 0, 3).with_file_name("a.txt"),
        Context.line(10, "b<a>r & 'q'", 1, 2).with_file_name("b.txt"),
    ],
    [Context.line(1, "cdef", 1, 2).with_lines(2, "cdef")],
    [Context.line(1, "a\tb\x7f", 1, 2, comment="tab")],
]


def test_hello_world_plain() -> None:
    """Reference output for two single-column spans on line 42 of file.txt."""
    assert render(layout([_hello()]), RenderMode.PLAIN) == (
        "   ╭─[file.txt:42]\n42 │ Hello world\n   ╎       ─ ─\n   ╵"
    )


def test_hello_world_ascii() -> None:
    """The ASCII backend draws the same columns with single-byte glyphs."""
    out: str = render(layout([_hello()]), RenderMode.ASCII)
    assert out == "   +-[file.txt:42]\n42 | Hello world\n   :       ^ ^\n   '"
    assert out.isascii()


def test_empty_plan() -> None:
    """An empty plan still draws its border pair."""
    assert render_contexts([]) == " ╷\n ╵"


def test_clamped_long_underline() -> None:
    """Clamped spans end at the last character of the line."""
    assert render_contexts([Context.line(1, "Hello world", 5, 999)]) == (
        "  ╷\n1 │ Hello world\n  ╎      ╶────╴\n  ╵"
    )


def test_point_marker() -> None:
    """A zero-width span draws a point just after the insertion column."""
    assert render_contexts([Context.line(1, "abc", 3, 3)]).splitlines()[2] == "  ╎    ⁃"


def test_comment_rows() -> None:
    """Comments hang off an elbow; pending comments keep a pass-through bar."""
    ctx = Context.multiple_highlights(
        None, "abcdefghij", [(0, Span(0, 2, "first")), (0, Span(5, 7, "second"))]
    )
    assert render_contexts([ctx]).splitlines() == [
        " ╷",
        " │ abcdefghij",
        " ╎ ╶╴   ╶╴",
        " ╎ │    ╰ second",
        " ╎ ╰ first",
        " ╵",
    ]


def test_single_comment() -> None:
    """One comment sits two columns right of its elbow."""
    ctx = Context.line(3, "let x = 5;", 4, 5, comment="unused variable")
    assert render_contexts([ctx]).splitlines() == [
        "  ╷",
        "3 │ let x = 5;",
        "  ╎     ─",
        "  ╎     ╰ unused variable",
        "  ╵",
    ]


def test_right_aligned_tags() -> None:
    """Tags of different length end in the same column."""
    ctx = Context.multiple_highlights(
        1, "let x = 5;", [(0, Span(0, 3, "a", "TAG")), (0, Span(4, 5, "bb", "X"))]
    )
    lines: list[str] = render_contexts([ctx]).splitlines()
    assert lines[3] == "  ╎ │   ╰ bb     X"
    assert lines[4] == "  ╎ ╰ a        TAG"


def test_multiple_contexts() -> None:
    """Later contexts open with a tagged middle border and share the gutter width."""
    out: str = render_contexts(
        [
            Context.line(1, "foo", 0, 3).with_file_name("a.txt"),
            Context.line(10, "bar", 1, 2).with_file_name("b.txt"),
        ]
    )
    assert out.splitlines() == [
        "   ╭─[a.txt:1:1]",
        "1  │ foo",
        "   ╎ ╶─╴",
        "   ╎─[b.txt:10:2]",
        "10 │ bar",
        "   ╎  ─",
        "   ╵",
    ]


def test_trimmed_line_and_control_characters() -> None:
    """Trimmed lines start with an ellipsis; control characters become visible."""
    trimmed: list[str] = render_contexts([Context.line(1, "cdef", 1, 2).with_lines(2, "cdef")])
    assert trimmed.splitlines()[1:3] == ["1 │ …cdef", "  ╎   ─"]

    controls = Context.show("a\tb\x7f\x00")
    assert render_contexts([controls]).splitlines()[1] == " │ a␉b␡␀"
    assert render_contexts([controls], RenderMode.ASCII).splitlines()[1] == " | a?b??"


@parametrize("contexts", SCENARIOS)
def test_color_strips_to_plain(contexts: list[Context]) -> None:
    """Removing ANSI codes from color output gives the plain output."""
    plan: RenderPlan = layout(contexts)
    assert strip_ansi(render(plan, RenderMode.COLOR)) == render(plan, RenderMode.PLAIN)


@parametrize("contexts", SCENARIOS)
def test_html_strips_to_plain(contexts: list[Context]) -> None:
    """Removing tags and unescaping HTML output gives the plain output."""
    plan: RenderPlan = layout(contexts)
    out: str = render(plan, RenderMode.HTML)
    assert "\x1b[" not in out
    assert strip_html(out) == render(plan, RenderMode.PLAIN)


@parametrize("contexts", SCENARIOS)
def test_all_modes_have_one_line_per_row(contexts: list[Context]) -> None:
    """Every backend emits exactly one line per plan row."""
    plan: RenderPlan = layout(contexts)
    for mode in RenderMode:
        assert len(render(plan, mode).split("\n")) == len(plan)


def test_color_output_is_styled() -> None:
    """The color backend wraps markers in SGR sequences."""
    out: str = render(layout([_hello()]), RenderMode.COLOR)
    assert "\x1b[" in out
    assert "\x1b[0m" in out


def test_html_escapes_source() -> None:
    """Markup in source text is escaped and rows are div elements."""
    out: str = render_contexts([Context.show("<b>&</b>")], RenderMode.HTML)
    assert "&lt;b&gt;&amp;&lt;/b&gt;" in out
    assert "<b>" not in out
    assert out.splitlines()[0].startswith("<div class='spanmark-row spanmark-border-top'>")


def test_mode_lookup() -> None:
    """Backends are looked up by enum or by string value."""
    assert get_backend("ascii").mode is RenderMode.ASCII
    with pytest.raises(ValueError):
        get_backend("rtf")


@parametrize("mode", list(RenderMode))
def test_control_characters_in_labels_keep_one_line_per_row(mode: RenderMode) -> None:
    """Line breaks in comments, tags and file names are drawn, not emitted."""
    ctx = Context.multiple_highlights(1, "abc", [(0, Span(0, 1, "a\nb", "T\t"))]).with_file_name(
        "x\ny.txt"
    )
    plan: RenderPlan = layout([ctx])
    assert len(render(plan, mode).split("\n")) == len(plan.rows)


def test_control_characters_in_labels_plain_output() -> None:
    """Labels are mapped like source content and keep their column widths."""
    ctx = Context.multiple_highlights(1, "abc", [(0, Span(0, 1, "a\nb", "T\t"))]).with_file_name(
        "x\ny.txt"
    )
    assert render_contexts([ctx]).splitlines() == [
        "  ╭─[x␊y.txt:1:1]",
        "1 │ abc",
        "  ╎ ─",
        "  ╎ ╰ a␊b T␉",
        "  ╵",
    ]
