# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O for DocForge configuration: loading, value getters and rendering."""

from __future__ import annotations

from docforge.config.io.getters import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_map,
    get_string_value_or_none,
    get_table,
)
from docforge.config.io.loaders import (
    load_default_config_template_toml_text,
    load_defaults_dict,
    load_toml_dict,
)
from docforge.config.io.render import to_toml

__all__ = [
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_list_map",
    "get_string_value_or_none",
    "get_table",
    "load_default_config_template_toml_text",
    "load_defaults_dict",
    "load_toml_dict",
    "to_toml",
]
