# topmark:header:start
#
#   project      : SpanMark
#   file         : __init__.py
#   file_relpath : src/spanmark/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Input data model: spans, highlight groups and source contexts.

Public modules:
    - spanmark.model.span
    - spanmark.model.highlight
    - spanmark.model.context
"""

from __future__ import annotations
