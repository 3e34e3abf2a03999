# topmark:header:start
#
#   project      : DocForge
#   file         : __init__.py
#   file_relpath : src/docforge/layout/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text layout: character-set sanitizing and greedy word wrapping."""

from __future__ import annotations

from docforge.layout.text import (
    append_wrapped,
    is_text_line,
    layout_paragraphs,
    sanitize,
    wrap,
)

__all__ = [
    "append_wrapped",
    "is_text_line",
    "layout_paragraphs",
    "sanitize",
    "wrap",
]
