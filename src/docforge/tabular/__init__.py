# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/tabular/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tabular record exchange: CSV decoding, encoding and header alias resolution."""

from __future__ import annotations

from docforge.tabular.aliases import FieldAliasTable, normalize_header
from docforge.tabular.model import CsvDocument, CsvRecord, SkippedRow, SkipReason
from docforge.tabular.schema import (
    MEMBER_ALIAS_TABLE,
    MEMBER_COLUMNS,
    MEMBER_FIELD_ALIASES,
    MEMBER_TEMPLATE_ROW,
    build_alias_table,
)
from docforge.tabular.serializer import member_template, quote_cell, serialize
from docforge.tabular.tokenizer import iter_rows, parse

__all__ = [
    "CsvDocument",
    "CsvRecord",
    "FieldAliasTable",
    "MEMBER_ALIAS_TABLE",
    "MEMBER_COLUMNS",
    "MEMBER_FIELD_ALIASES",
    "MEMBER_TEMPLATE_ROW",
    "SkipReason",
    "SkippedRow",
    "build_alias_table",
    "iter_rows",
    "member_template",
    "normalize_header",
    "parse",
    "quote_cell",
    "serialize",
]
