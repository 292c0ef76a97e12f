# topmark:header:start
#
#   project      : SpanMark
#   file         : __init__.py
#   file_relpath : src/spanmark/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Core primitives shared by every SpanMark layer (currently the exception hierarchy)."""

from __future__ import annotations
