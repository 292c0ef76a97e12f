# topmark:header:start
#
#   project      : SpanMark
#   file         : io.py
#   file_relpath : src/spanmark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 SpanMark contributors
#
# topmark:header:end

"""Load TOML configuration sources and extract values from them.

Parsing is done with `tomlkit` and returned as plain `dict` structures.

Two families of getters exist:
- *Unchecked* getters: return defaults and only emit **debug** logs.
- *Checked* getters: validate the expected shape and record **warnings** in a
  `DiagnosticLog` (and also log a warning).
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Final, TypeVar, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from spanmark.config.logging import get_logger
from spanmark.constants import PYPROJECT_TOML_NAME, TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from spanmark.config.logging import SpanmarkLogger
    from spanmark.diagnostic.model import DiagnosticLog

logger: SpanmarkLogger = get_logger(__name__)

TomlTable = dict[str, Any]

E = TypeVar("E", bound=Enum)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path: Path to a TOML document (e.g., ``spanmark.toml`` or ``pyproject.toml``).

    Returns:
        The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_tool_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the SpanMark table of a parsed config file.

    For ``pyproject.toml`` this is ``[tool.spanmark]`` (None when absent); any
    other file is a SpanMark file whose top level is the table itself.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    table: Any = tool.get(TOOL_SECTION) if isinstance(tool, dict) else None
    return cast("TomlTable", table) if isinstance(table, dict) else None


def get_bool_value(table: TomlTable, key: str, default: bool = False) -> bool:
    """Extract a boolean value from a TOML table.

    Integers are coerced via ``bool(value)``; anything else yields ``default``.
    """
    value: Any | None = table.get(key)
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    if value is not None:
        logger.debug("Cannot coerce %r to bool, returning default (%s)", value, default)
    return default


def get_enum_value_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Parse an enum value from TOML.

    Expected input is a `str` matching one of the Enum values.

    - Missing key -> None
    - Wrong type -> warning + None
    - Unknown enum value -> warning + None
    """
    raw: Any | None = table.get(key)
    if raw is None:
        return None

    loc: Final[str] = f"{where}.{key}"
    if not isinstance(raw, str):
        logger.warning(
            "Expected string enum value in %s, got %s: %r",
            loc,
            type(raw).__name__,
            raw,
        )
        diagnostics.add_warning(
            f"Expected string enum value in {loc}, got {type(raw).__name__}: {raw!r}"
        )
        return None

    return parse_enum_checked(raw, enum_cls, where=loc, diagnostics=diagnostics)


def parse_enum_checked(
    raw: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Return ``enum_cls(raw)`` (case-insensitive), or record a warning and return None."""
    try:
        return enum_cls(raw.strip().lower())
    except ValueError:
        allowed: str = ", ".join(str(e.value) for e in enum_cls)
        logger.warning("Invalid value for %s: %r (allowed: %s)", where, raw, allowed)
        diagnostics.add_warning(f"Invalid value for {where}: {raw!r} (allowed: {allowed})")
        return None


def warn_unknown_keys(
    table: TomlTable,
    known: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> None:
    """Record a warning for every key of ``table`` not in ``known``."""
    for key in sorted(set(table) - known):
        logger.warning("Unknown key in %s: %r", where, key)
        diagnostics.add_warning(f"Unknown key in {where}: {key!r}")
