# topmark:header:start
#
#   project      : SpanMark
#   file         : __init__.py
#   file_relpath : src/spanmark/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Diagnostics: messages with contexts and footers, their combination and formatting."""

from __future__ import annotations
