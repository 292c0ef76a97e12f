# topmark:header:start
#
#   project      : SpanMark
#   file         : __init__.py
#   file_relpath : src/spanmark/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Rendering backends for SpanMark render plans.

A backend pairs a glyph table with a styler; all backends serialize the same
plan to the same columns.

Public modules:
    - spanmark.rendering.api
    - spanmark.rendering.formats
    - spanmark.rendering.glyphs
    - spanmark.rendering.styles
    - spanmark.rendering.colored_enum
"""

from __future__ import annotations
