# topmark:header:start
#
#   project      : SpanMark
#   file         : __init__.py
#   file_relpath : src/spanmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""SpanMark package.

SpanMark renders diagnostics that point at locations in source text: the
snippet, underlined ranges with comments and tags, and optional footers, in
plain Unicode, ASCII, ANSI color or HTML.

Typical use:

```python
from spanmark import Context, Diagnostic, Span, format_diagnostic

context = Context.multiple_highlights(
    42, "Hello world", [(0, Span(6, 7)), (0, Span(8, 9))]
).with_file_name("file.txt")
print(format_diagnostic(Diagnostic.error("Unexpected letters", context)))
```
"""

from __future__ import annotations

from spanmark.config.model import MutableRenderConfig, RenderConfig
from spanmark.constants import SPANMARK_VERSION
from spanmark.core.errors import (
    ConfigError,
    InvalidContextError,
    InvalidSpanError,
    SpanmarkError,
)
from spanmark.diagnostic.assemble import format_all, format_diagnostic
from spanmark.diagnostic.combine import CombinedDiagnostics, combine_diagnostic
from spanmark.diagnostic.model import Diagnostic, DiagnosticLevel, DiagnosticLog
from spanmark.layout.engine import layout
from spanmark.layout.merge import merge, merge_contexts
from spanmark.layout.plan import RenderPlan
from spanmark.model.context import Context
from spanmark.model.highlight import HighlightGroup
from spanmark.model.span import Span
from spanmark.rendering.api import render, render_contexts
from spanmark.rendering.formats import RenderMode

__version__: str = SPANMARK_VERSION

__all__ = [
    "CombinedDiagnostics",
    "ConfigError",
    "Context",
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "HighlightGroup",
    "InvalidContextError",
    "InvalidSpanError",
    "MutableRenderConfig",
    "RenderConfig",
    "RenderMode",
    "RenderPlan",
    "Span",
    "SpanmarkError",
    "combine_diagnostic",
    "format_all",
    "format_diagnostic",
    "layout",
    "merge",
    "merge_contexts",
    "render",
    "render_contexts",
]
