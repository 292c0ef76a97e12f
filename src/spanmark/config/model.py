# topmark:header:start
#
#   project      : SpanMark
#   file         : model.py
#   file_relpath : src/spanmark/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Render configuration: an immutable snapshot and its mutable builder.

`MutableRenderConfig` collects settings from config files, the environment
and explicit overrides, then produces a frozen `RenderConfig` via `freeze`.
Use `RenderConfig.thaw` to go back to a builder.

Recognized settings (``spanmark.toml`` top level, or ``[tool.spanmark]`` in
``pyproject.toml``):

```toml
mode = "plain"   # plain | ascii | color | html
color = "auto"   # auto | always | never
root = true      # stop upward discovery at this directory
```

Merge order (lowest to highest precedence):
    1) Built-in defaults
    2) Config files discovered upward, root-most first; within a directory
       `pyproject.toml` is merged first, then `spanmark.toml`
    3) Extra config files, in the order given
    4) ``SPANMARK_MODE`` from the environment
    5) Explicit arguments (`MutableRenderConfig.apply_args`)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Final

from spanmark.config.color import ColorMode, color_forced, resolve_color_mode
from spanmark.config.io import (
    extract_tool_table,
    get_bool_value,
    get_enum_value_checked,
    load_toml_dict,
    parse_enum_checked,
    warn_unknown_keys,
)
from spanmark.config.logging import get_logger
from spanmark.constants import MODE_ENV, PYPROJECT_TOML_NAME, SPANMARK_TOML_NAME
from spanmark.core.errors import ConfigError
from spanmark.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog
from spanmark.rendering.formats import RenderMode

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from spanmark.config.io import TomlTable
    from spanmark.config.logging import SpanmarkLogger

logger: SpanmarkLogger = get_logger(__name__)

KEY_MODE: Final[str] = "mode"
KEY_COLOR: Final[str] = "color"
KEY_ROOT: Final[str] = "root"
_KNOWN_KEYS: Final[frozenset[str]] = frozenset({KEY_MODE, KEY_COLOR, KEY_ROOT})


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        mode (RenderMode | None): Requested output encoding; None means plain.
        color (ColorMode | None): Color intent; None means auto.
        config_files (tuple[Path | str, ...]): Sources merged into this config.
        diagnostics (FrozenDiagnosticLog): Warnings collected while loading.
    """

    mode: RenderMode | None = None
    color: ColorMode | None = None
    config_files: tuple[Path | str, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def effective_mode(self, *, stdout_isatty: bool | None = None) -> RenderMode:
        """Resolve the render mode to use for output.

        ``COLOR`` falls back to ``PLAIN`` when color is disabled (``NEVER``,
        ``NO_COLOR`` or no TTY); ``PLAIN`` (also when unset) is upgraded to
        ``COLOR`` when color is forced (``ALWAYS`` or ``FORCE_COLOR``). ``ASCII``
        and ``HTML`` are never changed.

        Args:
            stdout_isatty (bool | None): Optional override for TTY detection.

        Returns:
            RenderMode: The mode to render with.
        """
        mode: RenderMode = self.mode or RenderMode.PLAIN
        if mode is RenderMode.COLOR:
            if not resolve_color_mode(color_mode=self.color, stdout_isatty=stdout_isatty):
                logger.debug("Color output disabled, rendering plain text")
                return RenderMode.PLAIN
        elif mode is RenderMode.PLAIN:
            auto: bool = self.color in (None, ColorMode.AUTO)
            if self.color == ColorMode.ALWAYS or (auto and color_forced()):
                logger.debug("Color output forced, rendering with color")
                return RenderMode.COLOR
        return mode

    def thaw(self) -> MutableRenderConfig:
        """Return a mutable copy of this frozen config."""
        return MutableRenderConfig(
            mode=self.mode,
            color=self.color,
            config_files=list(self.config_files),
            diagnostics=self.diagnostics.thaw(),
        )


@dataclass
class MutableRenderConfig:
    """Mutable configuration used during discovery and merging.

    Attributes:
        mode (RenderMode | None): Requested output encoding.
        color (ColorMode | None): Color intent.
        root (bool): True when the source declared ``root = true``.
        config_files (list[Path | str]): Sources merged into this draft.
        diagnostics (DiagnosticLog): Warnings collected while loading.
    """

    mode: RenderMode | None = None
    color: ColorMode | None = None
    root: bool = False
    config_files: list[Path | str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    def freeze(self) -> RenderConfig:
        """Freeze this builder into an immutable `RenderConfig`.

        Raises:
            ConfigError: If ``color = "always"`` is combined with HTML output,
                which never carries ANSI codes.
        """
        if self.mode is RenderMode.HTML and self.color is ColorMode.ALWAYS:
            raise ConfigError("Config invalid: `color = \"always\"` cannot apply to html output.")
        return RenderConfig(
            mode=self.mode,
            color=self.color,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableRenderConfig:
        """Return a draft holding the built-in defaults (everything unset)."""
        return cls(config_files=["<defaults>"])

    @classmethod
    def from_toml_dict(
        cls,
        data: TomlTable,
        *,
        config_file: Path | None = None,
    ) -> MutableRenderConfig:
        """Build a draft from a SpanMark TOML table.

        Unknown keys and invalid values are logged and recorded as warnings;
        they never abort loading.

        Args:
            data (TomlTable): The SpanMark table (already extracted from ``[tool.spanmark]``).
            config_file (Path | None): Source file, used in warning locations.

        Returns:
            MutableRenderConfig: The parsed draft.
        """
        draft = cls()
        where: str = str(config_file) if config_file is not None else "<config>"
        warn_unknown_keys(data, _KNOWN_KEYS, where=where, diagnostics=draft.diagnostics)
        draft.mode = get_enum_value_checked(
            data, KEY_MODE, RenderMode, where=where, diagnostics=draft.diagnostics
        )
        draft.color = get_enum_value_checked(
            data, KEY_COLOR, ColorMode, where=where, diagnostics=draft.diagnostics
        )
        draft.root = get_bool_value(data, KEY_ROOT)
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableRenderConfig | None:
        """Load configuration from a single TOML file.

        Supports both ``spanmark.toml`` and ``pyproject.toml`` files, extracting
        the ``[tool.spanmark]`` section from the latter.

        Args:
            path (Path): Path to the TOML file.

        Returns:
            MutableRenderConfig | None: The parsed draft, or None when a
            ``pyproject.toml`` has no ``[tool.spanmark]`` section.
        """
        logger.debug("Creating MutableRenderConfig from TOML config: %s", path)
        table: TomlTable | None = extract_tool_table(path, load_toml_dict(path))
        if table is None:
            logger.debug("[tool.spanmark] section missing in %s", path)
            return None
        draft: MutableRenderConfig = cls.from_toml_dict(table, config_file=path)
        draft.config_files = [path]
        return draft

    @classmethod
    def discover_config_files(cls, start: Path) -> list[Path]:
        """Return config files discovered by walking upward from ``start``.

        Files are collected in root-most to nearest order so a later merge
        (nearest last wins) gives precedence to nearer files. Within a
        directory ``pyproject.toml`` comes before ``spanmark.toml``. Traversal
        stops after a directory whose config declares ``root = true``.

        Args:
            start (Path): Directory (or file, whose parent is used) to start from.

        Returns:
            list[Path]: Discovered config file paths ordered for merging.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here: bool = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, SPANMARK_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                table: TomlTable | None = extract_tool_table(p, load_toml_dict(p))
                if table is None:
                    continue
                dir_entries.append(p)
                logger.debug("Discovered config file: %s", p)
                if get_bool_value(table, KEY_ROOT):
                    root_stop_here = True
            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur:
                break
            if root_stop_here:
                logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] | None = None,
        no_config: bool = False,
        environ: Mapping[str, str] | None = None,
    ) -> MutableRenderConfig:
        """Discover and merge configuration layers into a draft.

        Args:
            start (Path | None): Discovery anchor; defaults to the current directory.
            extra_config_files (Iterable[Path] | None): Files merged after discovery.
            no_config (bool): If True, skip discovery.
            environ (Mapping[str, str] | None): Environment to read ``SPANMARK_MODE``
                from; defaults to `os.environ`.

        Returns:
            MutableRenderConfig: A draft ready to be frozen or further edited.
        """
        draft: MutableRenderConfig = cls.from_defaults()
        if not no_config:
            for path in cls.discover_config_files(start or Path.cwd()):
                found: MutableRenderConfig | None = cls.from_toml_file(path)
                if found is not None:
                    draft = draft.merge_with(found)
        for extra in extra_config_files or ():
            found = cls.from_toml_file(Path(extra))
            if found is not None:
                draft = draft.merge_with(found)
        return draft.apply_env(environ)

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableRenderConfig) -> MutableRenderConfig:
        """Return a new draft where values set in ``other`` override this draft."""
        diagnostics = DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics])
        return MutableRenderConfig(
            mode=other.mode if other.mode is not None else self.mode,
            color=other.color if other.color is not None else self.color,
            root=other.root or self.root,
            config_files=[*self.config_files, *other.config_files],
            diagnostics=diagnostics,
        )

    def apply_env(self, environ: Mapping[str, str] | None = None) -> MutableRenderConfig:
        """Apply ``SPANMARK_MODE`` in place and return ``self``."""
        env: Mapping[str, str] = os.environ if environ is None else environ
        raw: str | None = env.get(MODE_ENV)
        if raw:
            mode: RenderMode | None = parse_enum_checked(
                raw, RenderMode, where=MODE_ENV, diagnostics=self.diagnostics
            )
            if mode is not None:
                logger.debug("%s overrides render mode: %s", MODE_ENV, mode.value)
                self.mode = mode
                self.config_files.append(f"<env:{MODE_ENV}>")
        return self

    def apply_args(
        self,
        *,
        mode: RenderMode | str | None = None,
        color: ColorMode | str | None = None,
    ) -> MutableRenderConfig:
        """Apply explicit overrides in place and return ``self``.

        String values are validated like config values; invalid ones are
        recorded as warnings and ignored.
        """
        if isinstance(mode, str) and not isinstance(mode, RenderMode):
            mode = parse_enum_checked(
                mode, RenderMode, where="args.mode", diagnostics=self.diagnostics
            )
        if isinstance(color, str) and not isinstance(color, ColorMode):
            color = parse_enum_checked(
                color, ColorMode, where="args.color", diagnostics=self.diagnostics
            )
        if mode is not None:
            self.mode = mode
        if color is not None:
            self.color = color
        return self
