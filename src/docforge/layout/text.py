# topmark:header:start
#
#   project      : DocForge
#   file         : text.py
#   file_relpath : src/docforge/layout/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text layout engine feeding the PDF assembler.

The PDF content stream DocForge writes has no escape mechanism for arbitrary
bytes, so every line placed on a page must be a *TextLine*:

* only printable ASCII characters (``0x20``-``0x7E``), and
* no longer than the configured wrap width.

`sanitize` enforces the first property, `wrap` the second. Both are total
functions over strings: there is no input they reject.
"""

from __future__ import annotations

import re
import unicodedata
from typing import TYPE_CHECKING, Final

from docforge.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)

PRINTABLE_MIN: Final[str] = "\x20"
PRINTABLE_MAX: Final[str] = "\x7e"

_WHITESPACE_RE: Final[re.Pattern[str]] = re.compile(r"\s+")
_NON_PRINTABLE_RE: Final[re.Pattern[str]] = re.compile(r"[^\x20-\x7E]")


def sanitize(text: object) -> str:
    """Reduce arbitrary text to a single line of printable ASCII.

    Steps, in order:

    1. ``None`` becomes ``""``; anything else is converted with ``str()``.
    2. Compatibility decomposition (NFKD) so that accented Latin letters keep
       their base letter (``"Café"`` -> ``"Cafe"``).
    3. Every whitespace character (tab, newline, no-break space, ...) becomes a space.
    4. Remaining characters outside ``0x20``-``0x7E`` are dropped.
    5. Whitespace runs collapse to one space; the ends are trimmed.

    Args:
        text (object): Any value; usually a ``str``.

    Returns:
        str: Printable ASCII text without leading, trailing or repeated spaces.
    """
    raw = "" if text is None else str(text)
    decomposed = unicodedata.normalize("NFKD", raw)
    spaced = _WHITESPACE_RE.sub(" ", decomposed)
    ascii_only = _NON_PRINTABLE_RE.sub("", spaced)
    return _WHITESPACE_RE.sub(" ", ascii_only).strip()


def wrap(text: object, max_width: int) -> list[str]:
    """Greedy word-wrap ``text`` into lines of at most ``max_width`` characters.

    The text is sanitized first. Words are packed onto a line, separated by one
    space, as long as the line stays within ``max_width``. A single word longer
    than ``max_width`` is hard-split into chunks of ``max_width - 1`` characters,
    each followed by ``-``, until the remainder fits; the remainder then starts
    the next line.

    Empty input yields ``[""]``, never an empty list, so callers can always
    address a current line.

    Args:
        text (object): Text to wrap; see `sanitize`.
        max_width (int): Maximum line length; at least 2.

    Returns:
        list[str]: The wrapped lines, each a valid TextLine.

    Raises:
        ValueError: If ``max_width`` is smaller than 2 (a hyphenated chunk needs
            at least one character plus the hyphen).
    """
    if max_width < 2:
        raise ValueError(f"max_width must be >= 2, got {max_width}")

    clean = sanitize(text)
    if not clean:
        return [""]

    lines: list[str] = []
    current = ""
    for word in clean.split(" "):
        candidate = f"{current} {word}" if current else word
        if len(candidate) <= max_width:
            current = candidate
            continue
        if current:
            lines.append(current)
        remaining = word
        while len(remaining) > max_width:
            lines.append(f"{remaining[: max_width - 1]}-")
            remaining = remaining[max_width - 1 :]
        current = remaining
    if current:
        lines.append(current)

    logger.trace("Wrapped %d chars into %d line(s) at width %d", len(clean), len(lines), max_width)
    return lines or [""]


def append_wrapped(collector: list[str], text: object, max_width: int) -> None:
    """Append the wrapped lines of ``text`` to ``collector``.

    Empty (or all-whitespace) text appends exactly one blank line, which report
    builders use as a paragraph spacer.

    Args:
        collector (list[str]): Lines collected so far; modified in place.
        text (object): Paragraph text.
        max_width (int): Maximum line length.
    """
    collector.extend(wrap(text, max_width))


def layout_paragraphs(paragraphs: Iterable[object], max_width: int) -> list[str]:
    """Wrap every paragraph and concatenate the resulting lines.

    Args:
        paragraphs (Iterable[object]): Paragraph texts; empty ones become blank lines.
        max_width (int): Maximum line length.

    Returns:
        list[str]: TextLines ready for `docforge.pdf.assembler.assemble`.
    """
    lines: list[str] = []
    for paragraph in paragraphs:
        append_wrapped(lines, paragraph, max_width)
    return lines


def is_text_line(value: str, max_width: int | None = None) -> bool:
    """Return True if ``value`` satisfies the TextLine contract.

    Args:
        value (str): Candidate line.
        max_width (int | None): Width limit to check as well, if given.

    Returns:
        bool: True when every character is printable ASCII (and the width fits).
    """
    if max_width is not None and len(value) > max_width:
        return False
    return all(PRINTABLE_MIN <= ch <= PRINTABLE_MAX for ch in value)
