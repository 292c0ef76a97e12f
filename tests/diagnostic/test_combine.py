# topmark:header:start
#
#   project      : SpanMark
#   file         : test_combine.py
#   file_relpath : tests/diagnostic/test_combine.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Tests for `spanmark.diagnostic.combine`."""

from __future__ import annotations

from spanmark.diagnostic.combine import CombinedDiagnostics, combine_diagnostic
from spanmark.diagnostic.model import Diagnostic
from spanmark.model.context import Context


def test_combine_diagnostic_appends_or_folds() -> None:
    """Unmergeable diagnostics are appended, mergeable ones folded into the first match."""
    items: list[Diagnostic] = []
    combine_diagnostic(items, Diagnostic.error("a", Context.line(1, "x", 0, 1)))
    combine_diagnostic(items, Diagnostic.error("b"))
    combine_diagnostic(items, Diagnostic.error("a", Context.line(7, "y", 0, 1)))
    assert [d.message for d in items] == ["a", "b"]
    assert [c.start_line for c in items[0].contexts] == [1, 7]


def test_combined_diagnostics_yields_values_only() -> None:
    """Values pass through; diagnostics are collected and combined."""
    source: list[int | Diagnostic] = [
        1,
        Diagnostic.error("bad", Context.line(1, "abc", 0, 1)),
        2,
        Diagnostic.error("bad", Context.line(1, "abc", 1, 2)),
        3,
    ]
    results: CombinedDiagnostics[int] = CombinedDiagnostics(source)
    assert list(results) == [1, 2, 3]
    assert len(results.diagnostics) == 1
    assert len(results.diagnostics[0].contexts[0].highlights) == 2


def test_drain() -> None:
    """`drain` consumes the rest of the iterable and returns the diagnostics."""
    results: CombinedDiagnostics[str] = CombinedDiagnostics(
        ["ok", Diagnostic.warning("w"), Diagnostic.warning("w")]
    )
    assert next(results) == "ok"
    assert results.drain() == [Diagnostic.warning("w")]
