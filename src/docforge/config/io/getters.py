# topmark:header:start
#
#   project      : DocForge
#   file         : getters.py
#   file_relpath : src/docforge/config/io/getters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value getters for TOML config tables.

Every getter returns ``None`` when the key is absent, so the config builder can
tell "unset" apart from an explicit value and merge layers non-destructively.
A value of the wrong shape is a user mistake: it is logged as a warning and
treated as unset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

from docforge.config.logging import get_logger

if TYPE_CHECKING:
    from docforge.config.logging import DocforgeLogger

    from .types import TomlTable

logger: DocforgeLogger = get_logger(__name__)


def get_table(table: TomlTable, key: str) -> TomlTable:
    """Return a sub-table, or an empty dict when absent or not a table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: The sub-table (possibly empty).
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent or not a string.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for %r, got %r; ignoring", key, value)
    return None


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Booleans are rejected even though ``bool`` subclasses ``int``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        int | None: The integer value, or ``None`` when absent or not an integer.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Expected an integer for %r, got %r; ignoring", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when absent or not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for %r, got %r; ignoring", key, value)
    return None


def get_string_list_map(table: TomlTable) -> dict[str, list[str]]:
    """Extract a ``name -> [spelling, ...]`` mapping such as ``[csv.aliases]``.

    A bare string value is accepted as a one-element list. Non-string items are
    dropped with a warning.

    Args:
        table (TomlTable): The table whose entries are lists of strings.

    Returns:
        dict[str, list[str]]: The extracted mapping, in document order.
    """
    out: dict[str, list[str]] = {}
    for name, value in table.items():
        if isinstance(value, str):
            out[name] = [value]
            continue
        if not isinstance(value, list):
            logger.warning("Expected a list of strings for %r, got %r; ignoring", name, value)
            continue
        items: list[str] = []
        for item in cast("list[object]", value):
            if isinstance(item, str):
                items.append(item)
            else:
                logger.warning("Ignoring non-string alias %r for %r", item, name)
        out[name] = items
    return out
