# topmark:header:start
#
#   project      : DocForge
#   file         : content.py
#   file_relpath : src/docforge/pdf/content.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content stream construction.

Every text line is drawn inside its own ``BT ... ET`` block with an absolute
text matrix (``1 0 0 1 x y Tm``), so the vertical position of line *n* depends
only on *n* and never on the instructions written before it.

PDF literal strings are delimited by parentheses; `escape_pdf_string` makes any
TextLine safe to embed. It runs after layout and does not sanitize: it assumes
its input already is printable ASCII.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


FONT_RESOURCE_NAME = "F1"

_PDF_STRING_ESCAPES = str.maketrans({"\\": "\\\\", "(": "\\(", ")": "\\)"})


def escape_pdf_string(text: str) -> str:
    r"""Backslash-escape the literal-string delimiters ``\``, ``(`` and ``)``.

    Args:
        text (str): A printable-ASCII line.

    Returns:
        str: Text safe to place between ``(`` and ``)`` in a content stream.
    """
    return text.translate(_PDF_STRING_ESCAPES)


class ContentStream:
    """Accumulates text-showing instructions for one page."""

    def __init__(self) -> None:
        self._ops: list[str] = []

    def show_title(self, text: str, *, x: int, y: int, size: int) -> None:
        """Place ``text`` with its baseline origin at ``(x, y)``."""
        self._ops.extend(
            [
                "BT",
                f"/{FONT_RESOURCE_NAME} {size} Tf",
                f"{x} {y} Td",
                f"({escape_pdf_string(text)}) Tj",
                "ET",
            ]
        )

    def show_line(self, text: str, *, x: int, y: int, size: int) -> None:
        """Place ``text`` using an absolute text matrix at ``(x, y)``."""
        self._ops.extend(
            [
                "BT",
                f"/{FONT_RESOURCE_NAME} {size} Tf",
                f"1 0 0 1 {x} {y} Tm",
                f"({escape_pdf_string(text)}) Tj",
                "ET",
            ]
        )

    def show_lines(
        self, lines: Iterable[str], *, x: int, top: int, line_height: int, size: int
    ) -> None:
        """Place ``lines`` top-down, ``line_height`` points apart, starting at ``top``."""
        for index, line in enumerate(lines):
            self.show_line(line, x=x, y=top - index * line_height, size=size)

    def to_bytes(self) -> bytes:
        """Return the instructions joined by newlines, ASCII encoded."""
        return "\n".join(self._ops).encode("ascii")
