# topmark:header:start
#
#   project      : DocForge
#   file         : render.py
#   file_relpath : src/docforge/config/io/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration tables as TOML text for ``docforge config dump``.

Each top-level section becomes a ``[section]`` table and nested mappings become
sub-tables (``[csv.aliases]``). TOML has no ``null``, so ``None`` values are left
out of the output.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

import tomlkit

from docforge.config.logging import get_logger

if TYPE_CHECKING:
    from tomlkit.items import Table

    from docforge.config.logging import DocforgeLogger

    from .types import TomlTable

logger: DocforgeLogger = get_logger(__name__)


def _to_table(values: Mapping[str, object], path: str) -> Table:
    table: Table = tomlkit.table()
    for key, value in values.items():
        if value is None:
            logger.debug("Omitting unset key %s.%s", path, key)
        elif isinstance(value, Mapping):
            table.add(key, _to_table(value, f"{path}.{key}"))
        elif isinstance(value, (list, tuple)):
            table.add(key, [item for item in value if item is not None])
        else:
            table.add(key, value)
    return table


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a configuration mapping to TOML text.

    Args:
        toml_dict (TomlTable): Section name -> key/value mapping, as produced by
            `Config.to_toml_dict`.

    Returns:
        str: The TOML document.
    """
    document = tomlkit.document()
    for section, values in toml_dict.items():
        if isinstance(values, Mapping):
            document.add(section, _to_table(values, section))
        elif values is not None:
            document.add(section, values)
    return tomlkit.dumps(document)
