# topmark:header:start
#
#   project      : DocForge
#   file         : test_model.py
#   file_relpath : tests/tabular/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the `CsvDocument` data model."""

from __future__ import annotations

import pytest

from docforge.tabular import CsvDocument, SkippedRow, SkipReason


def test_rows_must_match_header() -> None:
    with pytest.raises(ValueError, match="missing"):
        CsvDocument(header=("name", "email"), rows=({"name": "Jane"},))
    with pytest.raises(ValueError, match="extra"):
        CsvDocument(header=("name",), rows=({"name": "Jane", "email": "x"},))


def test_header_must_be_unique() -> None:
    with pytest.raises(ValueError, match="Duplicate"):
        CsvDocument(header=("name", "name"))


def test_from_records_projects_onto_header() -> None:
    doc = CsvDocument.from_records(
        ["name", "phone_number", "status"],
        [
            {"name": "Jane", "phone_number": None, "internal_id": 7},
            {"name": "John", "phone_number": 254700000000, "status": "active"},
        ],
    )
    assert doc.rows == (
        {"name": "Jane", "phone_number": "", "status": ""},
        {"name": "John", "phone_number": "254700000000", "status": "active"},
    )


def test_skipped_rows_do_not_affect_equality() -> None:
    rows = ({"name": "Jane"},)
    a = CsvDocument(header=("name",), rows=rows)
    b = CsvDocument(header=("name",), rows=rows, skipped=(SkippedRow(3, SkipReason.BLANK),))
    assert a == b
    assert a.column("name") == ["Jane"]
