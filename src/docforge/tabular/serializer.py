# topmark:header:start
#
#   project      : DocForge
#   file         : serializer.py
#   file_relpath : src/docforge/tabular/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSV encoder.

Output is always ``\\n``-separated and ``\\n``-terminated. A cell is wrapped in
double quotes (inner quotes doubled) exactly when it contains the delimiter, a
double quote or a line break, or when it is wrapped in backticks (the decoder
strips backticks from unquoted cells); every other cell is written verbatim.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from docforge.config.logging import get_logger
from docforge.tabular.model import CsvDocument
from docforge.tabular.schema import MEMBER_COLUMNS, MEMBER_TEMPLATE_ROW
from docforge.tabular.tokenizer import BACKTICK

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)


def quote_cell(value: object, delimiter: str = ",") -> str:
    """Render one cell, quoting it only when needed.

    Args:
        value (object): Cell value; ``None`` becomes ``""``.
        delimiter (str): Field delimiter in use.

    Returns:
        str: The cell as it appears in the output line.
    """
    text = "" if value is None else str(value)
    wrapped = len(text) >= 2 and text[0] == BACKTICK and text[-1] == BACKTICK
    if wrapped or any(ch in text for ch in (delimiter, '"', "\n", "\r")):
        return '"' + text.replace('"', '""') + '"'
    return text


def _render_line(cells: Iterable[object], delimiter: str) -> str:
    return delimiter.join(quote_cell(cell, delimiter) for cell in cells)


def serialize(document: CsvDocument, *, delimiter: str = ",") -> str:
    """Encode a document as CSV text.

    Args:
        document (CsvDocument): Header and records to write.
        delimiter (str): Single-character field delimiter.

    Returns:
        str: The header line followed by one line per record.

    Raises:
        ValueError: If ``delimiter`` is not a single character, or is a quote or
            line break.
    """
    if len(delimiter) != 1 or delimiter in ('"', "\n", "\r"):
        raise ValueError(f"Invalid CSV delimiter: {delimiter!r}")
    lines = [_render_line(document.header, delimiter)]
    lines.extend(
        _render_line((row[name] for name in document.header), delimiter)
        for row in document.rows
    )
    logger.debug("Serialized %d record(s) over %d column(s)", len(document.rows), len(document.header))
    return "\n".join(lines) + "\n"


def member_template() -> CsvDocument:
    """Return the downloadable member import template (header plus one sample row)."""
    return CsvDocument.from_records(MEMBER_COLUMNS, [MEMBER_TEMPLATE_ROW])
