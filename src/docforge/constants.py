# topmark:header:start
#
#   project      : DocForge
#   file         : constants.py
#   file_relpath : src/docforge/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

DOCFORGE_VERSION: str = get_version("docforge")

# Name of the bundled default config inside the package `docforge.config`:
DEFAULT_TOML_CONFIG_PACKAGE: str = "docforge.config"
DEFAULT_TOML_CONFIG_NAME: str = "docforge-default.toml"

# Marker closing the license header block of bundled resources.
HEADER_END_MARKER: str = "topmark:header:end"

VALUE_NOT_SET: str = "<not set>"

# The 14 standard Type 1 fonts every PDF reader provides without embedding.
PDF_STANDARD_FONTS: frozenset[str] = frozenset(
    {
        "Courier",
        "Courier-Bold",
        "Courier-BoldOblique",
        "Courier-Oblique",
        "Helvetica",
        "Helvetica-Bold",
        "Helvetica-BoldOblique",
        "Helvetica-Oblique",
        "Symbol",
        "Times-Bold",
        "Times-BoldItalic",
        "Times-Italic",
        "Times-Roman",
        "ZapfDingbats",
    }
)
