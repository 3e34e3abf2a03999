# topmark:header:start
#
#   project      : DocForge
#   file         : policy.py
#   file_relpath : src/docforge/config/policy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Overflow policy for single-page documents.

A DocForge document is one page. When a caller hands the assembler more content
lines than ``[document] max_lines`` allows, the policy decides what happens:

    [document]
    overflow = "truncate"   # drop the extra lines and log a warning (default)
    # overflow = "error"    # raise ContentOverflowError
"""

from __future__ import annotations

from enum import Enum


class OverflowPolicy(str, Enum):
    """What the assembler does with content lines beyond the page capacity."""

    TRUNCATE = "truncate"
    ERROR = "error"

    @classmethod
    def parse(cls, value: str) -> OverflowPolicy:
        """Return the member for a case-insensitive TOML/CLI value.

        Args:
            value (str): Raw value such as ``"Truncate"``.

        Returns:
            OverflowPolicy: The matching member.

        Raises:
            ValueError: If ``value`` names no member.
        """
        key = value.strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(
            f"Invalid overflow policy {value!r}; expected one of: "
            + ", ".join(m.value for m in cls)
        )
