# topmark:header:start
#
#   project      : DocForge
#   file         : model.py
#   file_relpath : src/docforge/tabular/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data model for tabular record exchange.

A `CsvDocument` is an ordered header plus records keyed by exactly the header
names. Rows the tokenizer had to drop are reported alongside as `SkippedRow`
entries, so a bulk-import screen can say "imported X, skipped Y" without the
codec deciding how to surface it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

CsvRecord = dict[str, str]


class SkipReason(str, Enum):
    """Why the tokenizer dropped a data row."""

    BLANK = "blank"
    TOO_MANY_CELLS = "too_many_cells"


@dataclass(frozen=True)
class SkippedRow:
    """A data row that did not become a record.

    Attributes:
        line_number (int): 1-based physical line where the row starts.
        reason (SkipReason): Why it was dropped.
        cells (tuple[str, ...]): The cleaned cells, for diagnostics.
    """

    line_number: int
    reason: SkipReason
    cells: tuple[str, ...] = ()


@dataclass(frozen=True)
class CsvDocument:
    """Header plus records.

    Attributes:
        header (tuple[str, ...]): Column names in output order; unique.
        rows (tuple[CsvRecord, ...]): Records; each has exactly the header keys.
        skipped (tuple[SkippedRow, ...]): Rows dropped while decoding. Not part
            of equality, so decoded and hand-built documents compare by content.

    Raises:
        ValueError: If the header has duplicates or a record's keys differ from it.
    """

    header: tuple[str, ...]
    rows: tuple[CsvRecord, ...] = ()
    skipped: tuple[SkippedRow, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if len(set(self.header)) != len(self.header):
            raise ValueError(f"Duplicate column names in header: {self.header!r}")
        expected = set(self.header)
        for index, row in enumerate(self.rows):
            if set(row) != expected:
                missing = sorted(expected - set(row))
                extra = sorted(set(row) - expected)
                raise ValueError(
                    f"Record {index} keys do not match the header "
                    f"(missing: {missing}, extra: {extra})"
                )

    @classmethod
    def from_records(
        cls, header: Iterable[str], records: Iterable[Mapping[str, object]]
    ) -> CsvDocument:
        """Project arbitrary mappings onto ``header``.

        Missing keys and ``None`` values become ``""``; other values are converted
        with ``str()``; keys outside the header are dropped.

        Args:
            header (Iterable[str]): Column names in output order.
            records (Iterable[Mapping[str, object]]): Source records, e.g. database rows.

        Returns:
            CsvDocument: A document satisfying the header/key invariant.
        """
        columns = tuple(header)
        rows = tuple(
            {name: "" if record.get(name) is None else str(record.get(name)) for name in columns}
            for record in records
        )
        return cls(header=columns, rows=rows)

    def column(self, name: str) -> list[str]:
        """Return the values of column ``name`` in row order."""
        return [row[name] for row in self.rows]
