# topmark:header:start
#
#   project      : DocForge
#   file         : scanner.py
#   file_relpath : src/docforge/pdf/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte-offset scanner for the PDF subset DocForge writes.

The scanner walks a buffer front to back without trusting the cross-reference
table: it finds every ``<id> <gen> obj`` definition itself, skips stream data by
its ``/Length``, and only then reads the ``xref`` section and trailer. Comparing
the two views (`DocumentScan.problems`) shows whether the recorded offsets match
where the objects really are.

Supported structure: a ``%PDF-x.y`` header, indirect objects whose value is a
dictionary (nested ``<< >>`` allowed, no literal strings inside dictionaries),
an optional stream after the dictionary, one xref subsection starting at 0, a
trailer dictionary, ``startxref`` and ``%%EOF``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final

from docforge.config.logging import get_logger
from docforge.core.errors import DocumentScanError

if TYPE_CHECKING:
    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)

_HEADER_RE: Final[re.Pattern[bytes]] = re.compile(rb"%PDF-(\d+\.\d+)\r?\n")
_OBJ_RE: Final[re.Pattern[bytes]] = re.compile(rb"(\d+) (\d+) obj\b")
_LENGTH_RE: Final[re.Pattern[bytes]] = re.compile(rb"/Length (\d+)")
_XREF_HEADER_RE: Final[re.Pattern[bytes]] = re.compile(rb"xref\r?\n(\d+) (\d+)\r?\n")
_XREF_ENTRY_RE: Final[re.Pattern[bytes]] = re.compile(rb"(\d{10}) (\d{5}) ([nf])(?: \r?\n|\r\n)")
_TRAILER_RE: Final[re.Pattern[bytes]] = re.compile(rb"trailer\s*")
_SIZE_RE: Final[re.Pattern[bytes]] = re.compile(rb"/Size (\d+)")
_ROOT_RE: Final[re.Pattern[bytes]] = re.compile(rb"/Root (\d+) (\d+) R")
_STARTXREF_RE: Final[re.Pattern[bytes]] = re.compile(rb"startxref\r?\n(\d+)\r?\n%%EOF")
_WHITESPACE: Final[bytes] = b" \t\r\n\f\x00"


@dataclass(frozen=True)
class ObjectSpan:
    """Where one indirect object was found.

    Attributes:
        object_id (int): Object number.
        generation (int): Generation number.
        offset (int): Byte position of the first digit of ``<id> <gen> obj``.
        end (int): Byte position just past ``endobj``.
        has_stream (bool): True if the object carries a stream.
        dictionary (bytes): The object's dictionary, ``<<`` to ``>>`` inclusive.
    """

    object_id: int
    generation: int
    offset: int
    end: int
    has_stream: bool
    dictionary: bytes


@dataclass(frozen=True)
class ScannedXrefEntry:
    """One cross-reference entry as written in the file."""

    offset: int
    generation: int
    in_use: bool


@dataclass(frozen=True)
class DocumentScan:
    """Result of `scan_document`.

    Attributes:
        version (str): Version from the ``%PDF-`` header.
        objects (tuple[ObjectSpan, ...]): Objects in file order.
        xref_position (int): Real byte position of the ``xref`` keyword.
        xref_entries (tuple[ScannedXrefEntry, ...]): Entries, index = object id.
        size (int): Trailer ``/Size``.
        root_id (int): Object id named by trailer ``/Root``.
        startxref (int): Offset stated after ``startxref``.
    """

    version: str
    objects: tuple[ObjectSpan, ...]
    xref_position: int
    xref_entries: tuple[ScannedXrefEntry, ...]
    size: int
    root_id: int
    startxref: int
    _by_id: dict[int, ObjectSpan] = field(default_factory=lambda: {}, repr=False, compare=False)

    def __post_init__(self) -> None:
        self._by_id.update({span.object_id: span for span in self.objects})

    def object(self, object_id: int) -> ObjectSpan | None:
        """Return the span of ``object_id``, if present."""
        return self._by_id.get(object_id)

    @property
    def obj_count(self) -> int:
        """Number of ``obj`` keywords found (each closed by ``endobj``)."""
        return len(self.objects)

    def problems(self) -> list[str]:
        """Describe every disagreement between the xref data and the real layout.

        Returns:
            list[str]: Human-readable problems; empty for a consistent document.
        """
        issues: list[str] = []
        live = self.xref_entries[1:]
        if not self.xref_entries or self.xref_entries[0].in_use:
            issues.append("xref entry 0 is not the free-list head")
        if len(live) != self.obj_count:
            issues.append(
                f"xref lists {len(live)} object(s) but {self.obj_count} were found"
            )
        if self.size != len(self.xref_entries):
            issues.append(
                f"trailer /Size {self.size} != xref entry count {len(self.xref_entries)}"
            )
        if self.startxref != self.xref_position:
            issues.append(
                f"startxref {self.startxref} != real xref position {self.xref_position}"
            )
        for object_id, entry in enumerate(live, start=1):
            span = self.object(object_id)
            if span is None:
                issues.append(f"object {object_id} listed in xref but not found")
            elif span.offset != entry.offset:
                issues.append(
                    f"object {object_id}: xref offset {entry.offset} != real offset {span.offset}"
                )
        if self.object(self.root_id) is None:
            issues.append(f"/Root object {self.root_id} not found")
        return issues

    @property
    def is_consistent(self) -> bool:
        """True when `problems` finds nothing."""
        return not self.problems()


def _skip_whitespace(data: bytes, pos: int) -> int:
    while pos < len(data) and data[pos] in _WHITESPACE:
        pos += 1
    return pos


def _dictionary_end(data: bytes, pos: int) -> int:
    """Return the position just past the ``>>`` closing the dictionary at ``pos``."""
    if not data.startswith(b"<<", pos):
        raise DocumentScanError("Expected '<<'", pos)
    depth = 0
    i = pos
    while i < len(data) - 1:
        pair = data[i : i + 2]
        if pair == b"<<":
            depth += 1
            i += 2
        elif pair == b">>":
            depth -= 1
            i += 2
            if depth == 0:
                return i
        else:
            i += 1
    raise DocumentScanError("Unterminated dictionary", pos)


def _scan_object(data: bytes, pos: int) -> ObjectSpan | None:
    m = _OBJ_RE.match(data, pos)
    if m is None:
        return None
    object_id, generation = int(m.group(1)), int(m.group(2))
    dict_start = _skip_whitespace(data, m.end())
    dict_end = _dictionary_end(data, dict_start)
    dictionary = data[dict_start:dict_end]

    cursor = _skip_whitespace(data, dict_end)
    has_stream = data.startswith(b"stream", cursor)
    if has_stream:
        length_m = _LENGTH_RE.search(dictionary)
        if length_m is None:
            raise DocumentScanError(f"Stream of object {object_id} has no /Length", dict_start)
        cursor += len(b"stream")
        if data.startswith(b"\r\n", cursor):
            cursor += 2
        elif data.startswith(b"\n", cursor):
            cursor += 1
        else:
            raise DocumentScanError("'stream' must be followed by an end of line", cursor)
        cursor += int(length_m.group(1))
        cursor = _skip_whitespace(data, cursor)
        if not data.startswith(b"endstream", cursor):
            raise DocumentScanError(
                f"Object {object_id}: /Length does not end at 'endstream'", cursor
            )
        cursor = _skip_whitespace(data, cursor + len(b"endstream"))

    if not data.startswith(b"endobj", cursor):
        raise DocumentScanError(f"Object {object_id} is not closed by 'endobj'", cursor)
    end = cursor + len(b"endobj")
    return ObjectSpan(
        object_id=object_id,
        generation=generation,
        offset=pos,
        end=end,
        has_stream=has_stream,
        dictionary=dictionary,
    )


def scan_document(data: bytes) -> DocumentScan:
    """Re-parse ``data`` and report real object offsets next to the xref table.

    Args:
        data (bytes): A PDF buffer in the supported subset.

    Returns:
        DocumentScan: What was found; check `DocumentScan.problems`.

    Raises:
        DocumentScanError: If the buffer is not structurally parseable.
    """
    header = _HEADER_RE.match(data)
    if header is None:
        raise DocumentScanError("Missing %PDF- header", 0)
    version = header.group(1).decode("ascii")

    pos = _skip_whitespace(data, header.end())
    objects: list[ObjectSpan] = []
    while True:
        span = _scan_object(data, pos)
        if span is None:
            break
        objects.append(span)
        pos = _skip_whitespace(data, span.end)

    xref_position = pos
    xref_m = _XREF_HEADER_RE.match(data, pos)
    if xref_m is None:
        raise DocumentScanError("Expected 'xref' section", pos)
    first, count = int(xref_m.group(1)), int(xref_m.group(2))
    if first != 0:
        raise DocumentScanError(f"xref subsection must start at 0, got {first}", pos)
    pos = xref_m.end()
    entries: list[ScannedXrefEntry] = []
    for _ in range(count):
        entry_m = _XREF_ENTRY_RE.match(data, pos)
        if entry_m is None:
            raise DocumentScanError("Malformed xref entry", pos)
        entries.append(
            ScannedXrefEntry(
                offset=int(entry_m.group(1)),
                generation=int(entry_m.group(2)),
                in_use=entry_m.group(3) == b"n",
            )
        )
        pos = entry_m.end()

    trailer_m = _TRAILER_RE.match(data, pos)
    if trailer_m is None:
        raise DocumentScanError("Expected 'trailer'", pos)
    trailer_start = trailer_m.end()
    trailer_end = _dictionary_end(data, trailer_start)
    trailer = data[trailer_start:trailer_end]
    size_m = _SIZE_RE.search(trailer)
    root_m = _ROOT_RE.search(trailer)
    if size_m is None or root_m is None:
        raise DocumentScanError("Trailer lacks /Size or /Root", trailer_start)

    pos = _skip_whitespace(data, trailer_end)
    startxref_m = _STARTXREF_RE.match(data, pos)
    if startxref_m is None:
        raise DocumentScanError("Expected 'startxref' and '%%EOF'", pos)

    scan = DocumentScan(
        version=version,
        objects=tuple(objects),
        xref_position=xref_position,
        xref_entries=tuple(entries),
        size=int(size_m.group(1)),
        root_id=int(root_m.group(1)),
        startxref=int(startxref_m.group(1)),
    )
    logger.debug("Scanned %d object(s); xref at %d", scan.obj_count, xref_position)
    return scan
