# topmark:header:start
#
#   project      : SpanMark
#   file         : colored_enum.py
#   file_relpath : src/spanmark/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Color-aware enum primitives for terminal rendering.

Key types:
    - `Colorizer`: Protocol describing any callable that decorates a string,
      typically a `functools.partial` over `click.style`.
    - `ColoredStrEnum`: `str, Enum` that stores the enum's text value and a
      colorizer. The enum `.value` remains a plain string, while the colorizer
      is exposed via `.color`.
    - `MarkerColor`: the palette used to tell stacked markers apart.

Example:
    ```python
    from functools import partial

    import click

    class Level(ColoredStrEnum):
        OK = ("ok", partial(click.style, fg="green"))
        ERROR = ("error", partial(click.style, fg="red", bold=True))

    print(Level.OK.value)            # 'ok'
    print(Level.OK.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

import zlib
from enum import Enum
from functools import partial
from typing import Protocol

import click


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, text: str) -> str:
        """Return ``text`` decorated for display."""
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer.

    The colorizer is stored separately from ``_value_`` so hashing, equality
    and ``repr`` keep plain Enum semantics.
    """

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color


class MarkerColor(ColoredStrEnum):
    """Palette cycled over by the color backend for markers and their comments."""

    RED = ("red", partial(click.style, fg="red", bold=True))
    YELLOW = ("yellow", partial(click.style, fg="yellow", bold=True))
    GREEN = ("green", partial(click.style, fg="green", bold=True))
    CYAN = ("cyan", partial(click.style, fg="cyan", bold=True))
    BLUE = ("blue", partial(click.style, fg="blue", bold=True))
    MAGENTA = ("magenta", partial(click.style, fg="magenta", bold=True))

    @classmethod
    def pick(cls, stack: int, tag: str | None = None) -> MarkerColor:
        """Return the palette entry for a marker.

        Tagged markers are keyed by a stable checksum of the tag, so one tag keeps
        its color across lines and contexts. Untagged markers cycle by stacking
        index.

        Args:
            stack (int): Stacking index of the marker.
            tag (str | None): Marker tag, if any.

        Returns:
            MarkerColor: The selected palette entry.
        """
        members: list[MarkerColor] = list(cls)
        if tag is not None:
            return members[zlib.crc32(tag.encode("utf-8")) % len(members)]
        return members[stack % len(members)]
