# topmark:header:start
#
#   project      : SpanMark
#   file         : errors.py
#   file_relpath : src/spanmark/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Exceptions for SpanMark.

Usage:
    Construction-time validation raises these exceptions so malformed values never
    reach the merge or layout engines. Layout itself never raises: out-of-range
    spans are clamped instead.

Hierarchy:
    - `SpanmarkError`: base class for all SpanMark errors.
    - `InvalidSpanError`: a span with negative or inverted columns.
    - `InvalidContextError`: a highlight attached to a line outside its context.
    - `ConfigError`: an inconsistent render configuration.
"""

from __future__ import annotations


class SpanmarkError(Exception):
    """Base class for all SpanMark errors."""


class InvalidSpanError(SpanmarkError, ValueError):
    """Error for spans whose column range is malformed.

    Attributes:
        start_col (int): The offending start column.
        end_col (int): The offending end column.
    """

    def __init__(self, start_col: int, end_col: int) -> None:
        self.start_col = start_col
        self.end_col = end_col
        if start_col < 0 or end_col < 0:
            message = f"Span columns must be non-negative (got {start_col}..{end_col})"
        else:
            message = f"Span start column {start_col} is past its end column {end_col}"
        super().__init__(message)


class InvalidContextError(SpanmarkError, ValueError):
    """Error for contexts whose highlights point outside their lines.

    Attributes:
        line_index (int): The highlight line index that is out of range.
        line_count (int): The number of lines in the context.
    """

    def __init__(self, line_index: int, line_count: int) -> None:
        self.line_index = line_index
        self.line_count = line_count
        super().__init__(
            f"Highlight line index {line_index} is outside the context (0..{line_count - 1})"
            if line_count
            else f"Highlight line index {line_index} on a context without lines"
        )


class ConfigError(SpanmarkError):
    """Error for render configuration that cannot be frozen."""
