# topmark:header:start
#
#   project      : DocForge
#   file         : errors.py
#   file_relpath : src/docforge/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain exceptions raised by the DocForge library.

Hierarchy:
    - `DocforgeError`: base class for everything below.
    - `CsvDecodeError`: the input text cannot yield any record
      (`EmptyInputError`, `MissingDataRowsError`, `InvalidHeaderError`).
      Reported synchronously, never retried.
    - `ContentContractError`: text that violates the TextLine contract reached the
      PDF assembler. This is a programming error in the caller, not bad user data.
    - `ContentOverflowError`: more content lines than fit on the page while the
      overflow policy is ``error``.
    - `DocumentScanError`: a buffer handed to the scanner is not in the PDF subset
      DocForge writes.
    - `ConfigError`: a configuration value is missing or invalid.

The CLI maps these to exit codes in `docforge.cli.errors`.
"""

from __future__ import annotations


class DocforgeError(Exception):
    """Base class for all DocForge library errors."""


class CsvDecodeError(DocforgeError, ValueError):
    """Base class for CSV decode failures that reject the whole input."""


class EmptyInputError(CsvDecodeError):
    """No content remains after BOM stripping and newline normalization."""

    def __init__(self, message: str = "The CSV file is empty.") -> None:
        super().__init__(message)


class MissingDataRowsError(CsvDecodeError):
    """A header row exists but no usable data row follows it."""

    def __init__(
        self, message: str = "CSV must include a header row and at least one data row."
    ) -> None:
        super().__init__(message)


class InvalidHeaderError(CsvDecodeError):
    """The header row produces no non-empty normalized column name."""

    def __init__(self, message: str = "CSV header row is invalid.") -> None:
        super().__init__(message)


class ContentContractError(DocforgeError, ValueError):
    """Text outside printable ASCII reached the PDF assembler.

    Attributes:
        text (str): The offending title or line.
    """

    def __init__(self, text: str, *, what: str = "line") -> None:
        self.text = text
        super().__init__(
            f"Document {what} contains characters outside printable ASCII: {text!r}. "
            "Run it through docforge.layout.text.sanitize() first."
        )


class ContentOverflowError(DocforgeError):
    """More content lines than the page holds under the ``error`` overflow policy.

    Attributes:
        line_count (int): Number of content lines requested.
        max_lines (int): Number of lines that fit on the page.
    """

    def __init__(self, line_count: int, max_lines: int) -> None:
        self.line_count = line_count
        self.max_lines = max_lines
        super().__init__(
            f"Document has {line_count} content lines but a single page holds {max_lines}."
        )


class DocumentScanError(DocforgeError, ValueError):
    """The scanned buffer is not structurally parseable.

    Attributes:
        offset (int): Byte position where scanning failed.
    """

    def __init__(self, message: str, offset: int) -> None:
        self.offset = offset
        super().__init__(f"{message} (at byte {offset})")


class ConfigError(DocforgeError):
    """A configuration value is missing or invalid."""
