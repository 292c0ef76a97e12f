# topmark:header:start
#
#   project      : SpanMark
#   file         : constants.py
#   file_relpath : src/spanmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""SpanMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    SPANMARK_VERSION: str = get_version("spanmark")
except PackageNotFoundError:
    SPANMARK_VERSION = "0.0.0"

# Config files considered during discovery, in same-directory merge order.
PYPROJECT_TOML_NAME: str = "pyproject.toml"
SPANMARK_TOML_NAME: str = "spanmark.toml"
TOOL_SECTION: str = "spanmark"

MODE_ENV: str = "SPANMARK_MODE"
FORCE_COLOR_ENV: str = "FORCE_COLOR"
NO_COLOR_ENV: str = "NO_COLOR"
