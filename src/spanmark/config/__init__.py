# topmark:header:start
#
#   project      : SpanMark
#   file         : __init__.py
#   file_relpath : src/spanmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Configuration for SpanMark: logging, color resolution and TOML-backed render settings.

Settings are read from ``spanmark.toml`` or the ``[tool.spanmark]`` table of
``pyproject.toml``.
"""

from __future__ import annotations
