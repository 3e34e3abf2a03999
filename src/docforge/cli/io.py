# topmark:header:start
#
#   project      : DocForge
#   file         : io.py
#   file_relpath : src/docforge/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input/output helpers for CLI commands.

Inputs are a path or ``-`` for STDIN; outputs are a path or stdout. All errors
surface as `docforge.cli.errors` exceptions with the matching exit code.
"""

from __future__ import annotations

from pathlib import Path

import click

from docforge.cli.errors import DocforgeDataError, DocforgeFileNotFoundError, DocforgeIOError
from docforge.config.logging import DocforgeLogger, get_logger

logger: DocforgeLogger = get_logger(__name__)

STDIO_SENTINEL = "-"


def read_input_bytes(path: str | None) -> bytes:
    """Read raw bytes from ``path``, or from STDIN when ``path`` is ``None`` or ``-``.

    Raises:
        DocforgeFileNotFoundError: If the file does not exist.
        DocforgeIOError: If it cannot be read.
    """
    if path is None or path == STDIO_SENTINEL:
        logger.debug("Reading input from STDIN")
        return click.get_binary_stream("stdin").read()
    p = Path(path)
    if not p.is_file():
        raise DocforgeFileNotFoundError(f"No such file: {path}")
    try:
        return p.read_bytes()
    except OSError as exc:
        raise DocforgeIOError(f"Cannot read {path}: {exc}") from exc


def read_input_text(path: str | None) -> str:
    """Read UTF-8 text from ``path`` or STDIN (see `read_input_bytes`).

    Raises:
        DocforgeDataError: If the content is not valid UTF-8.
    """
    data = read_input_bytes(path)
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DocforgeDataError(f"Input is not valid UTF-8: {exc}") from exc


def write_output(data: bytes | str, path: str | None) -> None:
    """Write ``data`` to ``path``, or to stdout when ``path`` is ``None`` or ``-``.

    Text is encoded as UTF-8. Binary data written to stdout bypasses the console.

    Raises:
        DocforgeIOError: If the file cannot be written.
    """
    payload = data.encode("utf-8") if isinstance(data, str) else data
    if path is None or path == STDIO_SENTINEL:
        stream = click.get_binary_stream("stdout")
        stream.write(payload)
        stream.flush()
        return
    try:
        Path(path).write_bytes(payload)
    except OSError as exc:
        raise DocforgeIOError(f"Cannot write {path}: {exc}") from exc
    logger.info("Wrote %d bytes to %s", len(payload), path)
