# topmark:header:start
#
#   project      : DocForge
#   file         : test_api_facade.py
#   file_relpath : tests/api/test_api_facade.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public `docforge.api` surface."""

from __future__ import annotations

import logging

import pytest

from docforge import api
from docforge.config.model import Config
from docforge.constants import DOCFORGE_VERSION
from docforge.core.errors import ConfigError, ContentContractError, ContentOverflowError
from tests.conftest import make_config


def test_version_matches_constant() -> None:
    assert api.version() == DOCFORGE_VERSION


def test_public_names_are_exported() -> None:
    for name in api.__all__:
        assert callable(getattr(api, name))


def test_render_pdf_round_trips_through_inspect() -> None:
    data = api.render_pdf("Group Profile", ["Members: 12", "Treasurer: Jane Doe"])

    scan = api.inspect_pdf(data)
    assert scan.is_consistent
    assert scan.obj_count == 5
    assert b"(Treasurer: Jane Doe) Tj" in data


def test_render_pdf_accepts_mapping_config() -> None:
    with pytest.raises(ContentOverflowError):
        api.render_pdf(
            "T", ["a", "b", "c"], config={"document": {"overflow": "error", "max_lines": 2}}
        )


def test_invalid_mapping_config_raises() -> None:
    with pytest.raises(ConfigError):
        api.render_pdf("T", ["a"], config={"layout": {"wrap_width": 1}})


def test_assemble_pdf_rejects_unsanitized_lines() -> None:
    with pytest.raises(ContentContractError):
        api.assemble_pdf("Title", ["café"])


def test_assemble_pdf_accepts_frozen_config() -> None:
    config: Config = make_config({"document": {"base_font": "Courier"}})
    data = api.assemble_pdf("Title", ["one", "two"], config=config)
    assert b"/BaseFont /Courier" in data


def test_parse_csv_with_configured_aliases() -> None:
    document = api.parse_csv(
        "Name,MSISDN\nJane,0700\n",
        config={"csv": {"aliases": {"phone_number": ["msisdn"]}}},
    )
    assert document.header == ("name", "phone_number")
    assert document.rows == ({"name": "Jane", "phone_number": "0700"},)


def test_serialize_csv_uses_configured_delimiter() -> None:
    document = api.parse_csv("name,email\nJane,jane@example.com\n")
    text = api.serialize_csv(document, config={"csv": {"delimiter": ";"}})
    assert text == "name;email\nJane;jane@example.com\n"


def test_member_template_csv_parses_back() -> None:
    document = api.parse_csv(api.member_template_csv())
    assert document.rows[0]["name"] == "Jane Doe"
    assert document.skipped == ()


def test_mapping_config_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="docforge.api"):
        api.parse_csv("name\nJane\n", config={"csv": {"delimiter": ","}})

    assert "sections ['csv']" in caplog.text
