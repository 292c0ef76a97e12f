# topmark:header:start
#
#   project      : SpanMark
#   file         : combine.py
#   file_relpath : src/spanmark/diagnostic/combine.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Combine repeated diagnostics while iterating over mixed results.

`CombinedDiagnostics` wraps an iterable whose items are either regular values
or `Diagnostic` instances. Iterating over it yields the regular values only;
diagnostics are set aside and combined (see `combine_diagnostic`) so the same
error seen in several places is reported once.

Example:
    ```python
    results = CombinedDiagnostics(check(path) for path in paths)
    ok = list(results)
    for diagnostic in results.diagnostics:
        print(format_diagnostic(diagnostic))
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

from spanmark.diagnostic.model import Diagnostic, combine_diagnostic

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")

__all__ = ["CombinedDiagnostics", "combine_diagnostic"]


class CombinedDiagnostics(Generic[T]):
    """Iterator adapter that yields values and collects combined diagnostics.

    Args:
        items (Iterable[T | Diagnostic]): Mixed values and diagnostics.

    Attributes:
        diagnostics (list[Diagnostic]): Diagnostics seen so far, combined.
    """

    def __init__(self, items: Iterable[T | Diagnostic]) -> None:
        self._items: Iterator[T | Diagnostic] = iter(items)
        self.diagnostics: list[Diagnostic] = []

    def __iter__(self) -> CombinedDiagnostics[T]:
        return self

    def __next__(self) -> T:
        for item in self._items:
            if isinstance(item, Diagnostic):
                combine_diagnostic(self.diagnostics, item)
                continue
            return item
        raise StopIteration

    def drain(self) -> list[Diagnostic]:
        """Consume the remaining items, dropping values, and return the diagnostics."""
        for _ in self:
            pass
        return self.diagnostics
