# topmark:header:start
#
#   project      : DocForge
#   file         : test_aliases.py
#   file_relpath : tests/tabular/test_aliases.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for header normalization and `FieldAliasTable`."""

from __future__ import annotations

import pytest

from docforge.tabular import MEMBER_ALIAS_TABLE, MEMBER_COLUMNS, FieldAliasTable, normalize_header
from docforge.tabular.schema import build_alias_table
from tests.conftest import make_config


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Full Name ", "full_name"),
        ("  PHONE-number", "phone_number"),
        ("__E-mail__", "e_mail"),
        ("Next of Kin (Name)", "next_of_kin_name"),
        ("Sub.County", "sub_county"),
        ("***", ""),
        (None, ""),
        ("Jméno", "jm_no"),
    ],
)
def test_normalize_header(raw: object, expected: str) -> None:
    assert normalize_header(raw) == expected


@pytest.mark.parametrize(
    ("header", "canonical"),
    [
        ("Phone", "phone_number"),
        ("Full Name", "name"),
        ("Favorite Color", "favorite_color"),
        ("Mobile", "phone_number"),
        ("Email Address", "email"),
        ("Date Joined", "join_date"),
        ("Sex", "gender"),
        ("Next of Kin", "emergency_contact_name"),
        ("Next of Kin Phone", "emergency_contact_phone"),
        ("Photo URL", "avatar_url"),
        ("name", "name"),
    ],
)
def test_member_alias_resolution(header: str, canonical: str) -> None:
    assert MEMBER_ALIAS_TABLE.resolve(header) == canonical


def test_every_canonical_column_resolves_to_itself() -> None:
    assert MEMBER_ALIAS_TABLE.canonical_fields == MEMBER_COLUMNS
    for column in MEMBER_COLUMNS:
        assert MEMBER_ALIAS_TABLE.resolve(column) == column
        assert MEMBER_ALIAS_TABLE.spellings(column)[0] == column


def test_first_declared_field_claims_shared_spelling() -> None:
    table = FieldAliasTable({"home_phone": ["phone"], "work_phone": ["Phone", "office"]})
    assert table.resolve("PHONE") == "home_phone"
    assert table.resolve("office") == "work_phone"
    assert table.spellings("work_phone") == ("work_phone", "phone", "office")


def test_merged_with_appends_without_overriding() -> None:
    table = MEMBER_ALIAS_TABLE.merged_with({"phone_number": ["cell"], "name": ["phone"], "team": ["squad"]})

    assert table.resolve("Cell") == "phone_number"
    assert table.resolve("phone") == "phone_number"
    assert table.resolve("Squad") == "team"
    assert "team" in table
    assert "team" not in MEMBER_ALIAS_TABLE
    assert MEMBER_ALIAS_TABLE.resolve("cell") == "cell"


def test_build_alias_table_uses_configured_spellings() -> None:
    assert build_alias_table(None) is MEMBER_ALIAS_TABLE
    assert build_alias_table(make_config()) is MEMBER_ALIAS_TABLE

    config = make_config({"csv": {"aliases": {"national_id": ["Passport No"]}}})
    assert build_alias_table(config).resolve("passport no") == "national_id"
