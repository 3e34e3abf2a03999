# topmark:header:start
#
#   project      : DocForge
#   file         : objects.py
#   file_relpath : src/docforge/pdf/objects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""PDF object and cross-reference table models.

Only the tiny subset of the PDF 1.4 file structure DocForge writes is modelled:
indirect objects with generation 0, and a single-section cross-reference table
whose entries are all in use apart from the free-list head for object 0.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final

# Every xref entry is exactly 20 bytes: 10-digit offset, space, 5-digit
# generation, space, type keyword, two-byte end of line.
XREF_ENTRY_WIDTH: Final[int] = 20
FREE_LIST_HEAD: Final[bytes] = b"0000000000 65535 f \n"


@dataclass(frozen=True)
class PdfObject:
    """An indirect object awaiting serialization.

    Attributes:
        object_id (int): Object number, starting at 1.
        body (bytes): Everything between ``<id> 0 obj `` and `` endobj``.
    """

    object_id: int
    body: bytes

    def __post_init__(self) -> None:
        if self.object_id < 1:
            raise ValueError(f"PDF object ids start at 1, got {self.object_id}")

    @property
    def reference(self) -> str:
        """Indirect reference to this object (``"<id> 0 R"``)."""
        return f"{self.object_id} 0 R"

    def to_bytes(self) -> bytes:
        """Return the full ``<id> 0 obj ... endobj`` definition, newline terminated."""
        return b"%d 0 obj " % self.object_id + self.body + b" endobj\n"


@dataclass(frozen=True)
class XrefEntry:
    """One in-use entry of the cross-reference table.

    Attributes:
        offset (int): Absolute byte position of the object definition.
        generation (int): Always 0 for freshly written objects.
    """

    offset: int
    generation: int = 0

    def to_bytes(self) -> bytes:
        """Render the fixed-width 20-byte entry."""
        return b"%010d %05d n \n" % (self.offset, self.generation)


@dataclass
class CrossReferenceTable:
    """Index-aligned offsets: ``entries[i]`` belongs to object ``i + 1``.

    Attributes:
        entries (list[XrefEntry]): In-use entries in object-id order.
    """

    entries: list[XrefEntry] = field(default_factory=lambda: [])

    def record(self, object_id: int, offset: int) -> None:
        """Record the offset of the next object.

        Args:
            object_id (int): The object's id; must be exactly the next id in sequence.
            offset (int): Byte position where the object's definition begins.

        Raises:
            ValueError: If ids are not assigned in strictly increasing order from 1.
        """
        expected = len(self.entries) + 1
        if object_id != expected:
            raise ValueError(f"Expected object id {expected}, got {object_id}")
        self.entries.append(XrefEntry(offset=offset))

    @property
    def size(self) -> int:
        """Trailer ``/Size``: the object count plus the free-list head."""
        return len(self.entries) + 1

    def to_bytes(self) -> bytes:
        """Render the ``xref`` section: keyword, subsection header and all entries."""
        parts = [b"xref\n", b"0 %d\n" % self.size, FREE_LIST_HEAD]
        parts.extend(entry.to_bytes() for entry in self.entries)
        return b"".join(parts)
