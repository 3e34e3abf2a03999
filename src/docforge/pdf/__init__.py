# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/pdf/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Minimal single-page PDF synthesis and verification."""

from __future__ import annotations

from docforge.pdf.assembler import DocumentRequest, assemble, assemble_request, render_document
from docforge.pdf.content import escape_pdf_string
from docforge.pdf.scanner import DocumentScan, scan_document

__all__ = [
    "DocumentRequest",
    "DocumentScan",
    "assemble",
    "assemble_request",
    "escape_pdf_string",
    "render_document",
    "scan_document",
]
