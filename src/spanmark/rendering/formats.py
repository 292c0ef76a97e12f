# topmark:header:start
#
#   project      : SpanMark
#   file         : formats.py
#   file_relpath : src/spanmark/rendering/formats.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Defines the available output encodings for SpanMark render plans.

This module centralizes the `RenderMode` enum so the config layer, the
diagnostic assembler and the rendering backends agree on the same vocabulary.
"""

from __future__ import annotations

from enum import Enum


class RenderMode(str, Enum):
    """Output encoding for a render plan.

    Attributes:
        PLAIN: Unicode box-drawing and underline glyphs, no styling.
        ASCII: The same rows degraded to single-byte ASCII glyphs.
        COLOR: Plain glyphs with ANSI SGR styling on markers and comments.
        HTML: Escaped markup fragment, one element per row; never contains ANSI codes.
    """

    PLAIN = "plain"
    ASCII = "ascii"
    COLOR = "color"
    HTML = "html"
