# topmark:header:start
#
#   project      : SpanMark
#   file         : __init__.py
#   file_relpath : src/spanmark/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Merge and layout engines producing encoding-independent render plans.

Public modules:
    - spanmark.layout.merge
    - spanmark.layout.engine
    - spanmark.layout.plan
"""

from __future__ import annotations
