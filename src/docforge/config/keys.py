# topmark:header:start
#
#   project      : DocForge
#   file         : keys.py
#   file_relpath : src/docforge/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DocForge configuration.

This module defines the authoritative string constants used when reading,
writing, and validating DocForge configuration from TOML sources
(``docforge.toml`` and ``[tool.docforge]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DocForge configuration.

    The ordering of constants mirrors ``docforge-default.toml`` to make it easy to
    audit schema changes and keep defaults/docs/parsing aligned.
    """

    # [layout]
    SECTION_LAYOUT: Final[str] = "layout"

    KEY_WRAP_WIDTH: Final[str] = "wrap_width"

    # [document]
    SECTION_DOCUMENT: Final[str] = "document"

    KEY_TITLE_FALLBACK: Final[str] = "title_fallback"
    KEY_MAX_LINES: Final[str] = "max_lines"
    KEY_OVERFLOW: Final[str] = "overflow"
    KEY_PAGE_WIDTH: Final[str] = "page_width"
    KEY_PAGE_HEIGHT: Final[str] = "page_height"
    KEY_MARGIN_LEFT: Final[str] = "margin_left"
    KEY_TITLE_Y: Final[str] = "title_y"
    KEY_TITLE_FONT_SIZE: Final[str] = "title_font_size"
    KEY_BODY_FONT_SIZE: Final[str] = "body_font_size"
    KEY_BODY_TOP: Final[str] = "body_top"
    KEY_LINE_HEIGHT: Final[str] = "line_height"
    KEY_BASE_FONT: Final[str] = "base_font"

    # [csv] and [csv.aliases]
    SECTION_CSV: Final[str] = "csv"

    KEY_DELIMITER: Final[str] = "delimiter"
    KEY_STRIP_BACKTICKS: Final[str] = "strip_backticks"
    KEY_ALIASES: Final[str] = "aliases"

    # pyproject.toml nesting
    PYPROJECT_TOOL: Final[str] = "tool"
    PYPROJECT_SECTION: Final[str] = "docforge"

    # ---------------------------- Schema helpers ----------------------------

    ALLOWED_TOP_LEVEL_KEYS: Final[frozenset[str]] = frozenset(
        {
            SECTION_LAYOUT,
            SECTION_DOCUMENT,
            SECTION_CSV,
        }
    )

    # Note: [csv.aliases] holds arbitrary canonical field names and is not listed.
    ALLOWED_SECTION_KEYS: Final[dict[str, frozenset[str]]] = {
        SECTION_LAYOUT: frozenset({KEY_WRAP_WIDTH}),
        SECTION_DOCUMENT: frozenset(
            {
                KEY_TITLE_FALLBACK,
                KEY_MAX_LINES,
                KEY_OVERFLOW,
                KEY_PAGE_WIDTH,
                KEY_PAGE_HEIGHT,
                KEY_MARGIN_LEFT,
                KEY_TITLE_Y,
                KEY_TITLE_FONT_SIZE,
                KEY_BODY_FONT_SIZE,
                KEY_BODY_TOP,
                KEY_LINE_HEIGHT,
                KEY_BASE_FONT,
            }
        ),
        SECTION_CSV: frozenset(
            {
                KEY_DELIMITER,
                KEY_STRIP_BACKTICKS,
                KEY_ALIASES,
            }
        ),
    }
