# topmark:header:start
#
#   project      : SpanMark
#   file         : color.py
#   file_relpath : src/spanmark/config/color.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Color-mode resolution for terminal output.

This module provides:

- ColorMode enum.
- Color-mode resolution based on explicit settings, environment, and the
  output stream.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from spanmark.config.logging import get_logger
from spanmark.constants import FORCE_COLOR_ENV, NO_COLOR_ENV

if TYPE_CHECKING:
    from spanmark.config.logging import SpanmarkLogger


logger: SpanmarkLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def color_forced() -> bool:
    """Return True when ``FORCE_COLOR`` is set to anything but ``"0"``."""
    force_color: str | None = os.getenv(FORCE_COLOR_ENV)
    return bool(force_color) and force_color != "0"


def resolve_color_mode(
    *,
    color_mode: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Explicit setting**: ``ALWAYS`` -> True; ``NEVER`` -> False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) -> True
            - `NO_COLOR` (set to any value) -> False
        3. **Auto**: If none of the above decide, return `stdout.isatty()`.

    Args:
        color_mode: Configured `ColorMode`; `None` means "not provided".
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.

    Examples:
        >>> resolve_color_mode(color_mode=ColorMode.NEVER)
        False
        >>> resolve_color_mode(color_mode=ColorMode.ALWAYS, stdout_isatty=False)
        True
    """
    if color_mode == ColorMode.ALWAYS:
        return True
    if color_mode == ColorMode.NEVER:
        return False

    if color_forced():
        return True
    if os.getenv(NO_COLOR_ENV) is not None:
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    logger.trace("Color auto-detection: isatty=%s", stdout_isatty)
    return bool(stdout_isatty)
