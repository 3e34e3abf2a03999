# topmark:header:start
#
#   project      : DocForge
#   file         : test_pdf_reader.py
#   file_relpath : tests/pdf/test_pdf_reader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Open DocForge output with a third-party reader (pdfplumber)."""

from __future__ import annotations

import io

import pdfplumber

from docforge.pdf import assemble, render_document


def test_pdfplumber_extracts_title_and_lines() -> None:
    data = assemble("Group Profile", ["Members: 12", "Projects: 3 (2 active)"])

    with pdfplumber.open(io.BytesIO(data)) as pdf:
        assert len(pdf.pages) == 1
        page = pdf.pages[0]
        assert (page.width, page.height) == (595, 842)
        text = page.extract_text() or ""

    assert "Group Profile" in text
    assert "Members: 12" in text
    assert "Projects: 3 (2 active)" in text


def test_pdfplumber_reads_escaped_delimiters() -> None:
    data = render_document("Paths", ["C:\\tmp (unclosed"])
    with pdfplumber.open(io.BytesIO(data)) as pdf:
        text = pdf.pages[0].extract_text() or ""
    assert "C:\\tmp (unclosed" in text
