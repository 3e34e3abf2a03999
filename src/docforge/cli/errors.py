# topmark:header:start
#
#   project      : DocForge
#   file         : errors.py
#   file_relpath : src/docforge/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DocForge CLI.

Raise these in CLI commands to signal errors with standardized messages and
exit codes (see `docforge.core.exit_codes.ExitCode`). Library errors
(`docforge.core.errors`) are translated with `from_library_error`.

Exceptions prefer the project console if available (see `show()`); if no
console is present in the Click context, they fall back to Click's default
styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from docforge.core.errors import (
    ConfigError,
    ContentContractError,
    ContentOverflowError,
    CsvDecodeError,
    DocforgeError,
    DocumentScanError,
)
from docforge.core.exit_codes import ExitCode


class DocforgeCliError(click.ClickException):
    """Base class for all DocForge CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class DocforgeUsageError(DocforgeCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class DocforgeDataError(DocforgeCliError):
    """Error for input that cannot be decoded or rendered."""

    exit_code = ExitCode.DATA_ERROR


class DocforgeConfigError(DocforgeCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class DocforgeFileNotFoundError(DocforgeCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DocforgeIOError(DocforgeCliError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class DocforgeUnexpectedError(DocforgeCliError):
    """Error for internal contract violations (last resort)."""

    exit_code = ExitCode.UNEXPECTED_ERROR


def from_library_error(exc: DocforgeError) -> DocforgeCliError:
    """Map a library exception onto the CLI error carrying the right exit code.

    Args:
        exc (DocforgeError): The exception raised by a library call.

    Returns:
        DocforgeCliError: The CLI error to raise in its place.
    """
    if isinstance(exc, ConfigError):
        return DocforgeConfigError(str(exc))
    if isinstance(exc, (CsvDecodeError, ContentOverflowError, DocumentScanError)):
        return DocforgeDataError(str(exc))
    if isinstance(exc, ContentContractError):
        return DocforgeUnexpectedError(str(exc))
    return DocforgeCliError(str(exc))
