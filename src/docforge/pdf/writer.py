# topmark:header:start
#
#   project      : DocForge
#   file         : writer.py
#   file_relpath : src/docforge/pdf/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Incremental PDF byte writer with offset bookkeeping.

`PdfWriter` appends to a growable byte buffer and records the buffer length
right before each object is written. Because the recorded value *is* the
position of the first byte of the object, cross-reference offsets cannot drift
from the real layout.

A writer instance belongs to a single assembly; never share one between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from docforge.config.logging import get_logger
from docforge.pdf.objects import CrossReferenceTable

if TYPE_CHECKING:
    from docforge.config.logging import DocforgeLogger
    from docforge.pdf.objects import PdfObject

logger: DocforgeLogger = get_logger(__name__)

PDF_VERSION: Final[str] = "1.4"
PDF_SIGNATURE: Final[bytes] = b"%PDF-" + PDF_VERSION.encode("ascii") + b"\n"
EOF_MARKER: Final[bytes] = b"%%EOF\n"


class PdfWriter:
    """Single-use writer producing one PDF byte buffer.

    Usage:

    ```python
    writer = PdfWriter()
    writer.add_object(catalog)
    ...
    data = writer.finish(root_id=1)
    ```
    """

    def __init__(self) -> None:
        self._buffer = bytearray(PDF_SIGNATURE)
        self._xref = CrossReferenceTable()
        self._finished = False

    @property
    def position(self) -> int:
        """Number of bytes written so far."""
        return len(self._buffer)

    @property
    def xref(self) -> CrossReferenceTable:
        """Cross-reference entries recorded so far."""
        return self._xref

    def add_object(self, obj: PdfObject) -> int:
        """Write ``obj`` and record where it starts.

        Args:
            obj (PdfObject): The next object; ids must be consecutive from 1.

        Returns:
            int: The byte offset at which the object's definition begins.

        Raises:
            RuntimeError: If the writer has already been finished.
        """
        if self._finished:
            raise RuntimeError("PdfWriter.add_object() called after finish()")
        offset = self.position
        self._xref.record(obj.object_id, offset)
        self._buffer += obj.to_bytes()
        logger.trace("object %d at offset %d", obj.object_id, offset)
        return offset

    def finish(self, *, root_id: int) -> bytes:
        """Append the cross-reference section and trailer and return the buffer.

        Args:
            root_id (int): Object id of the document Catalog.

        Returns:
            bytes: The complete document.

        Raises:
            RuntimeError: If called twice.
        """
        if self._finished:
            raise RuntimeError("PdfWriter.finish() called twice")
        self._finished = True

        xref_offset = self.position
        self._buffer += self._xref.to_bytes()
        self._buffer += b"trailer << /Size %d /Root %d 0 R >>\n" % (self._xref.size, root_id)
        self._buffer += b"startxref\n%d\n" % xref_offset
        self._buffer += EOF_MARKER
        logger.debug(
            "PDF finished: %d objects, xref at %d, %d bytes",
            len(self._xref.entries),
            xref_offset,
            len(self._buffer),
        )
        return bytes(self._buffer)
