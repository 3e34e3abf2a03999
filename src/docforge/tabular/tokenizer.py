# topmark:header:start
#
#   project      : DocForge
#   file         : tokenizer.py
#   file_relpath : src/docforge/tabular/tokenizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CSV decoder for human-edited member import files.

Decoding happens in two stages:

1. `iter_rows` splits normalized text into physical rows of raw cells. It is
   quote-aware: a field whose first non-blank character is ``"`` is quoted and
   may span delimiters and line breaks until the closing quote; ``""`` inside a
   quoted field is a literal quote. Characters following a closing quote are
   kept literally, as is a ``"`` appearing in the middle of an unquoted field.
2. `parse` picks the header, resolves header cells through a field alias
   resolver, cleans the cells, and builds a `CsvDocument`. Backticks around a
   value are removed only from unquoted cells, so ``"`x`"`` keeps them.

Rejection of the whole input (`EmptyInputError`, `MissingDataRowsError`,
`InvalidHeaderError`) is reserved for files that cannot be imported at all.
Individual bad rows are skipped and reported in `CsvDocument.skipped`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Protocol

from docforge.config.logging import get_logger
from docforge.core.errors import EmptyInputError, InvalidHeaderError, MissingDataRowsError
from docforge.tabular.aliases import normalize_header
from docforge.tabular.model import CsvDocument, CsvRecord, SkippedRow, SkipReason
from docforge.tabular.schema import MEMBER_ALIAS_TABLE

if TYPE_CHECKING:
    from collections.abc import Iterator

    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)

BYTE_ORDER_MARK: Final[str] = "\ufeff"
QUOTE: Final[str] = '"'
BACKTICK: Final[str] = "`"


class HeaderResolver(Protocol):
    """Anything that maps a raw header cell to a record key."""

    def resolve(self, header_cell: object) -> str:
        """Return the record key for ``header_cell`` (``""`` to ignore the column)."""
        ...


@dataclass(frozen=True)
class RawRow:
    """One physical CSV row before header mapping.

    Attributes:
        line_number (int): 1-based line on which the row starts.
        cells (tuple[str, ...]): Unquoted but otherwise untouched cell text.
        quoted (tuple[bool, ...]): Per cell, whether it was written as a quoted field.
    """

    line_number: int
    cells: tuple[str, ...]
    quoted: tuple[bool, ...] = ()

    def was_quoted(self, index: int) -> bool:
        """True if cell ``index`` was a quoted field."""
        return index < len(self.quoted) and self.quoted[index]

    @property
    def is_empty_line(self) -> bool:
        """True for a line holding nothing but whitespace."""
        return len(self.cells) == 1 and not self.cells[0].strip()


def normalize_text(raw_text: object) -> str:
    """Drop one leading byte-order mark and convert ``\\r\\n`` / ``\\r`` to ``\\n``."""
    text = "" if raw_text is None else str(raw_text)
    if text.startswith(BYTE_ORDER_MARK):
        text = text[len(BYTE_ORDER_MARK) :]
    return text.replace("\r\n", "\n").replace("\r", "\n")


def iter_rows(text: str, delimiter: str = ",") -> Iterator[RawRow]:
    """Split normalized text into rows of raw cells.

    Args:
        text (str): Input with ``\\n`` line endings (see `normalize_text`).
        delimiter (str): Single-character field separator.

    Yields:
        RawRow: Rows in input order. A trailing line break does not produce an
            extra row. An unterminated quoted field runs to the end of the input.
    """
    cells: list[str] = []
    quoted: list[bool] = []
    buf: list[str] = []
    in_quotes = False
    cell_quoted = False
    field_blank = True  # nothing but whitespace seen in the current field
    quote_closed = False
    line = 1
    row_line = 1
    row_start = 0
    i = 0
    size = len(text)

    while i < size:
        ch = text[i]
        if in_quotes:
            if ch == QUOTE:
                if i + 1 < size and text[i + 1] == QUOTE:
                    buf.append(QUOTE)
                    i += 2
                    continue
                in_quotes = False
                quote_closed = True
            else:
                if ch == "\n":
                    line += 1
                buf.append(ch)
            i += 1
            continue

        if ch == QUOTE and field_blank and not quote_closed:
            buf.clear()
            in_quotes = True
            cell_quoted = True
            field_blank = False
        elif ch == delimiter:
            cells.append("".join(buf))
            quoted.append(cell_quoted)
            buf = []
            cell_quoted = False
            field_blank = True
            quote_closed = False
        elif ch == "\n":
            cells.append("".join(buf))
            quoted.append(cell_quoted)
            yield RawRow(row_line, tuple(cells), tuple(quoted))
            cells = []
            quoted = []
            buf = []
            cell_quoted = False
            field_blank = True
            quote_closed = False
            line += 1
            row_line = line
            row_start = i + 1
        else:
            buf.append(ch)
            if not ch.isspace():
                field_blank = False
        i += 1

    if in_quotes:
        logger.warning("Unterminated quoted field starting on line %d; read to end of input", row_line)
    if row_start < size:
        cells.append("".join(buf))
        quoted.append(cell_quoted)
        yield RawRow(row_line, tuple(cells), tuple(quoted))


def clean_cell(value: str, *, strip_backticks: bool = True) -> str:
    """Trim a data cell and remove one pair of surrounding backticks."""
    text = value.strip()
    if strip_backticks and len(text) >= 2 and text[0] == BACKTICK and text[-1] == BACKTICK:
        text = text[1:-1].strip()
    return text


def parse(
    raw_text: object,
    *,
    resolver: HeaderResolver | None = None,
    delimiter: str = ",",
    strip_backticks: bool = True,
) -> CsvDocument:
    """Decode CSV text into a `CsvDocument`.

    Args:
        raw_text (object): The file content; ``None`` is treated as empty.
        resolver (HeaderResolver | None): Maps header cells to record keys.
            Defaults to the member alias table.
        delimiter (str): Single-character field separator.
        strip_backticks (bool): Remove one pair of backticks around unquoted data
            cells. Quoted cells keep their backticks.

    Returns:
        CsvDocument: Header in first-appearance order, the accepted records,
            and the rows that were skipped.

    Raises:
        ValueError: If ``delimiter`` is not a single character, or is a quote or
            line break.
        EmptyInputError: If nothing but whitespace remains after normalization.
        MissingDataRowsError: If there is no data row, or every data row was skipped.
        InvalidHeaderError: If no header cell yields a usable column name.
    """
    if len(delimiter) != 1 or delimiter in (QUOTE, "\n", "\r"):
        raise ValueError(f"Invalid CSV delimiter: {delimiter!r}")
    table: HeaderResolver = MEMBER_ALIAS_TABLE if resolver is None else resolver

    text = normalize_text(raw_text)
    if not text.strip():
        raise EmptyInputError()

    rows = [row for row in iter_rows(text, delimiter) if not row.is_empty_line]
    if len(rows) < 2:
        raise MissingDataRowsError()

    header_row, data_rows = rows[0], rows[1:]
    column_names = [
        table.resolve(cell) if normalize_header(cell) else "" for cell in header_row.cells
    ]
    header = tuple(dict.fromkeys(name for name in column_names if name))
    if not header:
        raise InvalidHeaderError()
    logger.debug("Header on line %d resolved to %s", header_row.line_number, header)

    records: list[CsvRecord] = []
    skipped: list[SkippedRow] = []
    width = len(column_names)
    for row in data_rows:
        cells = [
            clean_cell(cell, strip_backticks=strip_backticks and not row.was_quoted(index))
            for index, cell in enumerate(row.cells)
        ]
        if any(cells[width:]):
            skipped.append(SkippedRow(row.line_number, SkipReason.TOO_MANY_CELLS, tuple(cells)))
            logger.debug("Skipping line %d: %d cells for %d columns", row.line_number, len(cells), width)
            continue
        cells.extend([""] * (width - len(cells)))

        record: CsvRecord = dict.fromkeys(header, "")
        for name, value in zip(column_names, cells):
            if name and not record[name]:
                record[name] = value
        if not any(record.values()):
            skipped.append(SkippedRow(row.line_number, SkipReason.BLANK, tuple(cells)))
            logger.trace("Skipping blank line %d", row.line_number)
            continue
        records.append(record)

    if not records:
        raise MissingDataRowsError("CSV has no valid data rows.")
    if skipped:
        logger.info("Parsed %d record(s), skipped %d row(s)", len(records), len(skipped))
    return CsvDocument(header=header, rows=tuple(records), skipped=tuple(skipped))
