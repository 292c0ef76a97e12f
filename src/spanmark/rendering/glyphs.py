# topmark:header:start
#
#   project      : SpanMark
#   file         : glyphs.py
#   file_relpath : src/spanmark/rendering/glyphs.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Glyph tables mapping the abstract plan vocabulary to literal characters.

Every glyph is exactly one display column wide so all tables produce the same
column layout. Two tables exist:

    - `UNICODE_GLYPHS`: box-drawing characters, used by the plain, color and
      HTML backends.
    - `ASCII_GLYPHS`: single-byte fallbacks for terminals and logs that cannot
      display box drawing.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from spanmark.layout.plan import BorderKind
from spanmark.model.span import GlyphClass

_CONTROL_PICTURES_BASE: Final[int] = 0x2400
_DELETE: Final[str] = "\x7f"
_C1_RANGE: Final[range] = range(0x80, 0xA0)


@dataclass(frozen=True, slots=True)
class GlyphTable:
    """Literal characters for one output vocabulary.

    Attributes:
        top (str): Top border without a location tag.
        top_tagged (str): Top border corner followed by a location tag.
        middle (str): Separator opening every context after the first.
        bottom (str): Bottom border.
        tag_open (str): Characters between a border glyph and its tag.
        tag_close (str): Characters closing a tag.
        source_bar (str): Gutter bar on source rows.
        note_bar (str): Gutter bar on underline and comment rows.
        point (str): Zero-width insertion point.
        short (str): Single-column underline.
        long_left (str): Left cap of a long underline.
        long_fill (str): Body of a long underline.
        long_right (str): Right cap of a long underline.
        elbow (str): Connector turning into a comment.
        passing (str): Vertical connector of a pending comment.
        ellipsis (str): Marker for a line cut at the front.
        control_pictures (bool): Show control characters as Unicode control
            pictures (``␀``, ``␉``, ``␡``) instead of ``control_fallback``.
        control_fallback (str): Replacement for control characters without a
            picture (C1 controls), and for all of them when pictures are off.
    """

    top: str
    top_tagged: str
    middle: str
    bottom: str
    tag_open: str
    tag_close: str
    source_bar: str
    note_bar: str
    point: str
    short: str
    long_left: str
    long_fill: str
    long_right: str
    elbow: str
    passing: str
    ellipsis: str
    control_pictures: bool
    control_fallback: str = "?"

    def border(self, kind: BorderKind, tagged: bool) -> str:
        """Return the border glyph for a border kind."""
        if kind is BorderKind.TOP:
            return self.top_tagged if tagged else self.top
        if kind is BorderKind.MIDDLE:
            return self.middle
        return self.bottom

    def underline(self, glyph: GlyphClass, width: int) -> str:
        """Return the underline text for a marker of ``width`` display columns."""
        if glyph is GlyphClass.POINT:
            return self.point
        if glyph is GlyphClass.SHORT:
            return self.short
        return self.long_left + self.long_fill * (width - 2) + self.long_right

    def connector(self, glyph: GlyphClass) -> str:
        """Return the connector character for ``ELBOW`` or ``PASS``."""
        return self.elbow if glyph is GlyphClass.ELBOW else self.passing

    def visible(self, text: str) -> str:
        """Replace control characters in source text, one column per character."""
        if text.isprintable():
            return text
        out: list[str] = []
        for ch in text:
            code: int = ord(ch)
            if code <= 0x1F:
                out.append(
                    chr(_CONTROL_PICTURES_BASE + code)
                    if self.control_pictures
                    else self.control_fallback
                )
            elif ch == _DELETE:
                out.append("␡" if self.control_pictures else self.control_fallback)
            elif code in _C1_RANGE:
                out.append(self.control_fallback)
            else:
                out.append(ch)
        return "".join(out)


UNICODE_GLYPHS: Final[GlyphTable] = GlyphTable(
    top="╷",
    top_tagged="╭",
    middle="╎",
    bottom="╵",
    tag_open="─[",
    tag_close="]",
    source_bar="│",
    note_bar="╎",
    point="⁃",
    short="─",
    long_left="╶",
    long_fill="─",
    long_right="╴",
    elbow="╰",
    passing="│",
    ellipsis="…",
    control_pictures=True,
    control_fallback="\ufffd",
)

ASCII_GLYPHS: Final[GlyphTable] = GlyphTable(
    top=".",
    top_tagged="+",
    middle=":",
    bottom="'",
    tag_open="-[",
    tag_close="]",
    source_bar="|",
    note_bar=":",
    point="^",
    short="^",
    long_left="~",
    long_fill="~",
    long_right="~",
    elbow="`",
    passing="|",
    ellipsis=".",
    control_pictures=False,
)
