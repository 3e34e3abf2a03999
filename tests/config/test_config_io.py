# topmark:header:start
#
#   project      : DocForge
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `docforge.config.io`: defaults, template and TOML rendering."""

from __future__ import annotations

import tomlkit

from docforge.config import Config, MutableConfig
from docforge.config.io import (
    get_int_value_or_none,
    get_string_list_map,
    load_default_config_template_toml_text,
    load_defaults_dict,
    to_toml,
)


def test_template_matches_runtime_defaults() -> None:
    text = load_default_config_template_toml_text()

    assert "topmark:header" not in text
    assert text.lstrip().startswith("#")
    parsed = tomlkit.parse(text).unwrap()
    assert MutableConfig.from_toml_dict(parsed).freeze() == Config.from_defaults()


def test_defaults_dict_has_every_section() -> None:
    defaults = load_defaults_dict()
    assert set(defaults) == {"layout", "document", "csv"}
    assert defaults["layout"]["wrap_width"] == 92


def test_to_toml_round_trips_config() -> None:
    config = MutableConfig.from_toml_dict(
        {"csv": {"delimiter": ";", "aliases": {"phone_number": ["cell"]}}}
    ).freeze()
    text = to_toml(config.to_toml_dict())

    assert 'delimiter = ";"' in text
    reparsed = MutableConfig.from_toml_dict(tomlkit.parse(text).unwrap()).freeze()
    assert reparsed == config


def test_getters_tolerate_bad_shapes() -> None:
    assert get_int_value_or_none({"n": 3}, "n") == 3
    assert get_int_value_or_none({"n": False}, "n") is None
    assert get_int_value_or_none({}, "n") is None
    assert get_string_list_map({"a": ["x", 1, "y"], "b": "z", "c": 3}) == {
        "a": ["x", "y"],
        "b": ["z"],
    }
