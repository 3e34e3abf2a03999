# topmark:header:start
#
#   project      : DocForge
#   file         : loaders.py
#   file_relpath : src/docforge/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading DocForge configuration from:
- the packaged default TOML resource, and
- on-disk TOML files (`docforge.toml` / `pyproject.toml`).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from importlib.resources import files
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from docforge.config.io.render import to_toml
from docforge.config.keys import Toml
from docforge.config.logging import get_logger
from docforge.constants import (
    DEFAULT_TOML_CONFIG_NAME,
    DEFAULT_TOML_CONFIG_PACKAGE,
    HEADER_END_MARKER,
)
from docforge.core.errors import ConfigError

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from docforge.config.logging import DocforgeLogger

    from .types import TomlTable

logger: DocforgeLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return DocForge's **runtime defaults** as a Python dict.

    This function intentionally performs **no I/O**. The bundled
    ``docforge-default.toml`` is an annotated copy of these values meant for
    ``docforge config init``.

    Returns:
        A TOML-table-compatible dict containing the runtime defaults.
    """
    return {
        Toml.SECTION_LAYOUT: {
            Toml.KEY_WRAP_WIDTH: 92,
        },
        Toml.SECTION_DOCUMENT: {
            Toml.KEY_TITLE_FALLBACK: "Document",
            Toml.KEY_MAX_LINES: 46,
            Toml.KEY_OVERFLOW: "truncate",
            # A4 portrait, in points
            Toml.KEY_PAGE_WIDTH: 595,
            Toml.KEY_PAGE_HEIGHT: 842,
            Toml.KEY_MARGIN_LEFT: 50,
            Toml.KEY_TITLE_Y: 800,
            Toml.KEY_TITLE_FONT_SIZE: 16,
            Toml.KEY_BODY_FONT_SIZE: 10,
            Toml.KEY_BODY_TOP: 776,
            Toml.KEY_LINE_HEIGHT: 14,
            Toml.KEY_BASE_FONT: "Helvetica",
        },
        Toml.SECTION_CSV: {
            Toml.KEY_DELIMITER: ",",
            Toml.KEY_STRIP_BACKTICKS: True,
            Toml.KEY_ALIASES: {},
        },
    }


def load_default_config_template_toml_text() -> str:
    """Load the bundled default TOML config *template* as text.

    The license header block at the top of the resource is removed so the output
    starts at the actual template content. If the packaged template cannot be
    read, a document generated from `load_defaults_dict` is returned instead.

    Returns:
        str: The TOML document text.
    """
    resource: Traversable = files(DEFAULT_TOML_CONFIG_PACKAGE).joinpath(DEFAULT_TOML_CONFIG_NAME)
    try:
        toml_text: str = resource.read_text(encoding="utf8")
    except OSError as exc:
        logger.warning("Cannot read packaged default config template %s: %s", resource, exc)
        return to_toml(load_defaults_dict())

    lines: list[str] = toml_text.splitlines(keepends=True)
    for i, line in enumerate(lines):
        if line.strip() == f"# {HEADER_END_MARKER}":
            return "".join(lines[i + 1 :]).lstrip("\n")
    return toml_text


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a DocForge TOML file from the filesystem.

    For a ``pyproject.toml`` only the ``[tool.docforge]`` table is returned.

    Args:
        path: Path to a TOML document (``docforge.toml`` or ``pyproject.toml``).

    Returns:
        The parsed DocForge configuration table.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e

    data_any: Any = doc.unwrap()
    data: TomlTable = cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    if path.name == "pyproject.toml":
        tool: Any = data.get(Toml.PYPROJECT_TOOL, {})
        section: Any = tool.get(Toml.PYPROJECT_SECTION, {}) if isinstance(tool, dict) else {}
        if not section:
            logger.info("No [tool.docforge] table in %s", path)
        return cast("TomlTable", section) if isinstance(section, dict) else {}
    return data
