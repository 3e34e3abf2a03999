# topmark:header:start
#
#   project      : DocForge
#   file         : schema.py
#   file_relpath : src/docforge/tabular/schema.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Member record schema: canonical columns, accepted spellings and the import template."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from docforge.tabular.aliases import FieldAliasTable

if TYPE_CHECKING:
    from collections.abc import Mapping

    from docforge.config.model import Config

# Column order used by the import template and by exports.
MEMBER_COLUMNS: Final[tuple[str, ...]] = (
    "name",
    "phone_number",
    "email",
    "role",
    "status",
    "join_date",
    "bio",
    "gender",
    "occupation",
    "national_id",
    "county",
    "sub_county",
    "address",
    "emergency_contact_name",
    "emergency_contact_phone",
    "emergency_contact_relationship",
    "avatar_url",
)

MEMBER_FIELD_ALIASES: Final[Mapping[str, tuple[str, ...]]] = MappingProxyType(
    {
        "name": ("full_name", "full_names", "fullname"),
        "phone_number": ("phone", "telephone", "tel", "mobile"),
        "email": ("email_address", "mail"),
        "role": (),
        "status": (),
        "join_date": ("joined_date", "date_joined"),
        "bio": ("member_bio",),
        "gender": ("sex",),
        "occupation": ("job", "profession"),
        "national_id": ("id_number", "nationalid"),
        "county": (),
        "sub_county": ("subcounty", "sub_county_name"),
        "address": (),
        "emergency_contact_name": ("emergency_name", "next_of_kin_name", "next_of_kin"),
        "emergency_contact_phone": ("emergency_phone", "next_of_kin_phone"),
        "emergency_contact_relationship": (
            "emergency_relationship",
            "next_of_kin_relationship",
        ),
        "avatar_url": ("photo_url", "image_url"),
    }
)

MEMBER_TEMPLATE_ROW: Final[Mapping[str, str]] = MappingProxyType(
    {
        "name": "Jane Doe",
        "phone_number": "+254700000000",
        "email": "jane@example.com",
        "role": "member",
        "status": "active",
        "join_date": "2026-01-15",
        "bio": "Community mobilizer and savings champion.",
        "gender": "female",
        "occupation": "Farmer",
        "national_id": "12345678",
        "county": "Nairobi",
        "sub_county": "Kasarani",
        "address": "Kasarani, Nairobi",
        "emergency_contact_name": "John Doe",
        "emergency_contact_phone": "+254711111111",
        "emergency_contact_relationship": "Spouse",
        "avatar_url": "",
    }
)

MEMBER_ALIAS_TABLE: Final[FieldAliasTable] = FieldAliasTable(MEMBER_FIELD_ALIASES)


def build_alias_table(config: Config | None = None) -> FieldAliasTable:
    """Return the member alias table extended with configured spellings.

    Args:
        config (Config | None): Configuration whose ``extra_aliases`` are appended;
            ``None`` returns the built-in table.

    Returns:
        FieldAliasTable: The table to resolve import headers with.
    """
    if config is None or not config.extra_aliases:
        return MEMBER_ALIAS_TABLE
    return MEMBER_ALIAS_TABLE.merged_with(config.extra_aliases)
