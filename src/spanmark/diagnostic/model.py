# topmark:header:start
#
#   project      : SpanMark
#   file         : model.py
#   file_relpath : src/spanmark/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Core diagnostic types and helpers for SpanMark.

A diagnostic is one logical error (or warning, or note) together with every
source context it was seen in. Diagnostics are immutable; adding contexts or
footers returns a new value.

Sections:
    * DiagnosticLevel: severity levels with associated terminal colors.
    * Diagnostic: immutable payload (level, message, contexts and footers).
    * DiagnosticStats: aggregated per-level counts.
    * DiagnosticLog: mutable collection that folds mergeable diagnostics
      together as they are added.
    * FrozenDiagnosticLog: immutable snapshot container for frozen objects
      such as `RenderConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import partial
from typing import TYPE_CHECKING

import click

from spanmark.config.logging import get_logger
from spanmark.layout.merge import merge_contexts
from spanmark.rendering.colored_enum import ColoredStrEnum

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from spanmark.config.logging import SpanmarkLogger
    from spanmark.layout.merge import Occurrence
    from spanmark.model.context import Context


logger: SpanmarkLogger = get_logger(__name__)


class DiagnosticLevel(ColoredStrEnum):
    """Severity levels, ordered by importance: ERROR > WARNING > INFO.

    The value is the word printed in front of the message; the colorizer is
    only applied by the color backend.
    """

    INFO = ("info", partial(click.style, fg="blue", bold=True))
    WARNING = ("warning", partial(click.style, fg="yellow", bold=True))
    ERROR = ("error", partial(click.style, fg="red", bold=True))


@dataclass(frozen=True)
class Diagnostic:
    """Structured diagnostic: a message plus the places it applies to.

    Attributes:
        level (DiagnosticLevel): Severity.
        message (str): Short, one-line description.
        contexts (tuple[Context, ...]): Source contexts, in display order.
        description (str): Longer explanation printed below the contexts.
        suggestions (tuple[str, ...]): Candidate fixes ("Did you mean ...").
        version (str | None): Version of the thing the diagnostic is about.
        underlying (tuple[Diagnostic, ...]): Causes, printed nested below.
    """

    level: DiagnosticLevel
    message: str
    contexts: tuple[Context, ...] = ()
    description: str = ""
    suggestions: tuple[str, ...] = ()
    version: str | None = None
    underlying: tuple[Diagnostic, ...] = ()

    @classmethod
    def error(cls, message: str, *contexts: Context) -> Diagnostic:
        """Create an ``error`` diagnostic shown in ``contexts``."""
        return cls(DiagnosticLevel.ERROR, message, contexts=tuple(contexts))

    @classmethod
    def warning(cls, message: str, *contexts: Context) -> Diagnostic:
        """Create a ``warning`` diagnostic shown in ``contexts``."""
        return cls(DiagnosticLevel.WARNING, message, contexts=tuple(contexts))

    @classmethod
    def info(cls, message: str, *contexts: Context) -> Diagnostic:
        """Create an ``info`` diagnostic shown in ``contexts``."""
        return cls(DiagnosticLevel.INFO, message, contexts=tuple(contexts))

    def with_description(self, description: str) -> Diagnostic:
        """Return a copy with the long description set."""
        return replace(self, description=description)

    def with_suggestions(self, *suggestions: str) -> Diagnostic:
        """Return a copy with the suggestions replaced."""
        return replace(self, suggestions=tuple(suggestions))

    def with_version(self, version: str | None) -> Diagnostic:
        """Return a copy with the version set."""
        return replace(self, version=version)

    def with_underlying(self, *underlying: Diagnostic) -> Diagnostic:
        """Return a copy with ``underlying`` appended to the underlying diagnostics."""
        return replace(self, underlying=self.underlying + tuple(underlying))

    def could_merge(self, other: Diagnostic) -> bool:
        """Return True if ``other`` describes the same error as this diagnostic.

        Two diagnostics are the same error when everything but their contexts
        matches, so they can be shown once with all contexts combined.
        """
        return (
            self.level == other.level
            and self.message == other.message
            and self.description == other.description
            and self.suggestions == other.suggestions
            and self.version == other.version
            and self.underlying == other.underlying
        )

    def add_contexts(self, contexts: Iterable[Occurrence]) -> Diagnostic:
        """Return a copy with ``contexts`` merged into the existing ones.

        Contexts showing the same lines of the same file collapse into one, with
        their highlights combined.
        """
        return replace(self, contexts=tuple(merge_contexts(self.contexts, contexts)))


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity level."""

    n_info: int
    n_warning: int
    n_error: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_info + self.n_warning + self.n_error


@dataclass
class DiagnosticLog:
    """Mutable collection of diagnostics.

    Diagnostics added through `add` (and the ``add_*`` helpers) are combined
    with an earlier mergeable diagnostic when there is one, so repeated
    errors are reported once with all their contexts.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, diagnostics: Iterable[Diagnostic]) -> DiagnosticLog:
        """Create a DiagnosticLog from an iterable of diagnostics.

        Args:
            diagnostics: Existing diagnostics (e.g., from a frozen snapshot).

        Returns:
            A new DiagnosticLog containing the provided diagnostics, uncombined.
        """
        return cls(items=list(diagnostics))

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def add(self, diagnostic: Diagnostic) -> None:
        """Add a diagnostic, combining it with an earlier mergeable one.

        Args:
            diagnostic: The diagnostic object.
        """
        logger.trace("Adding [%s]: %r", diagnostic.level.value, diagnostic.message)
        combine_diagnostic(self.items, diagnostic)

    def add_info(self, message: str, *contexts: Context) -> None:
        """Add an ``info`` diagnostic.

        Args:
            message: The diagnostic message.
            *contexts: Source contexts the message applies to.
        """
        self.add(Diagnostic.info(message, *contexts))

    def add_warning(self, message: str, *contexts: Context) -> None:
        """Add a ``warning`` diagnostic.

        Args:
            message: The diagnostic message.
            *contexts: Source contexts the message applies to.
        """
        self.add(Diagnostic.warning(message, *contexts))

    def add_error(self, message: str, *contexts: Context) -> None:
        """Add an ``error`` diagnostic.

        Args:
            message: The diagnostic message.
            *contexts: Source contexts the message applies to.
        """
        self.add(Diagnostic.error(message, *contexts))

    def stats(self) -> DiagnosticStats:
        """Return per-level counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def has_warning(self) -> bool:
        """Return True if the DiagnosticLog contains warning diagnostics."""
        return any(d.level == DiagnosticLevel.WARNING for d in self.items)

    def has_error(self) -> bool:
        """Return True if the DiagnosticLog contains error diagnostics."""
        return any(d.level == DiagnosticLevel.ERROR for d in self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"info"``, ``"warning"``, and ``"error"``
            reflecting the number of diagnostics at each level.
        """
        return diagnostics_counts_to_dict(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable counterpart to `DiagnosticLog`."""

    items: tuple[Diagnostic, ...] = ()

    def thaw(self) -> DiagnosticLog:
        """Return a mutable copy of this snapshot."""
        return DiagnosticLog.from_iterable(self.items)

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-level counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity."""
        return diagnostics_counts_to_dict(self.items)


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-level counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-level counts.
    """
    levels: list[DiagnosticLevel] = [d.level for d in diagnostics]
    return DiagnosticStats(
        n_info=levels.count(DiagnosticLevel.INFO),
        n_warning=levels.count(DiagnosticLevel.WARNING),
        n_error=levels.count(DiagnosticLevel.ERROR),
    )


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by severity for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        "info": stats.n_info,
        "warning": stats.n_warning,
        "error": stats.n_error,
    }


def combine_diagnostic(diagnostics: list[Diagnostic], new: Diagnostic) -> None:
    """Fold ``new`` into ``diagnostics`` in place.

    ``new`` is merged into the first diagnostic it `could_merge` with, or
    appended when there is none.

    Args:
        diagnostics: Already combined diagnostics, updated in place.
        new: The diagnostic to add.
    """
    for index, existing in enumerate(diagnostics):
        if existing.could_merge(new):
            diagnostics[index] = existing.add_contexts(new.contexts)
            logger.trace("Combined %r into an earlier diagnostic", new.message)
            return
    diagnostics.append(new)
