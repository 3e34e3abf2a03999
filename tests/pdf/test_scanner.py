# topmark:header:start
#
#   project      : DocForge
#   file         : test_scanner.py
#   file_relpath : tests/pdf/test_scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `docforge.pdf.scanner` and the offset bookkeeping it verifies."""

from __future__ import annotations

import re

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from docforge.core.errors import DocumentScanError
from docforge.pdf import assemble, scan_document
from tests.strategies_docforge import printable_ascii


def test_xref_offsets_point_at_object_definitions() -> None:
    data = assemble("Group Profile", ["Members: 12", "Projects: 3 (2 active)"])
    scan = scan_document(data)

    for object_id, entry in enumerate(scan.xref_entries[1:], start=1):
        assert data[entry.offset :].startswith(b"%d 0 obj " % object_id)
    assert data[scan.startxref :].startswith(b"xref\n")
    assert scan.root_id == 1
    assert scan.version == "1.4"


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=100)
@given(title=printable_ascii, lines=st.lists(printable_ascii, max_size=60))
def test_offsets_are_consistent_for_any_content(title: str, lines: list[str]) -> None:
    data = assemble(title, lines)
    scan = scan_document(data)
    assert scan.problems() == []
    assert scan.obj_count == 5
    assert scan.size == 6


def test_shifted_objects_are_reported() -> None:
    data = assemble("Shifted", ["x"])
    header = b"%PDF-1.4\n"
    tampered = header + b"\n" + data[len(header) :]

    scan = scan_document(tampered)
    problems = scan.problems()
    assert not scan.is_consistent
    assert any(p.startswith("object 1: xref offset") for p in problems)
    assert any(p.startswith("startxref") for p in problems)


def test_wrong_size_is_reported() -> None:
    data = assemble("Size", ["x"]).replace(b"/Size 6", b"/Size 7")
    assert any("/Size 7" in p for p in scan_document(data).problems())


def test_missing_root_object_is_reported() -> None:
    data = assemble("Root", ["x"]).replace(b"/Root 1 0 R", b"/Root 9 0 R")
    assert "/Root object 9 not found" in scan_document(data).problems()


@pytest.mark.parametrize(
    "mangle",
    [
        lambda d: d.replace(b"%PDF-1.4", b"%XYZ-1.4"),
        lambda d: d.replace(b"xref\n", b"xrof\n"),
        lambda d: d.replace(b"%%EOF", b"%%EOX"),
        lambda d: re.sub(rb"/Length \d+", b"/Length 3", d),
        lambda d: d[: d.index(b"trailer")],
    ],
    ids=["header", "xref", "eof", "length", "truncated"],
)
def test_malformed_buffers_raise(mangle) -> None:  # type: ignore[no-untyped-def]
    with pytest.raises(DocumentScanError):
        scan_document(mangle(assemble("Broken", ["a line"])))
