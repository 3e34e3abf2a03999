# topmark:header:start
#
#   project      : DocForge
#   file         : aliases.py
#   file_relpath : src/docforge/tabular/aliases.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header normalization and field alias resolution.

Bulk-import files are authored by people and by other tools, so the same field
turns up as ``Phone``, ``phone number`` or ``Mobile``. `normalize_header` folds
each spelling to ``lower_snake`` form and a `FieldAliasTable` maps the folded
form to the canonical field name the record store expects.

Normalization is ASCII-only: letters outside ``a-z`` are treated as separators.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

_NON_ALNUM_RE: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")


def normalize_header(value: object) -> str:
    """Fold a header cell to its canonical spelling form.

    Trim, lowercase, replace each run of non-alphanumeric characters with one
    underscore, and strip leading/trailing underscores.

    Args:
        value (object): Raw header cell; ``None`` becomes ``""``.

    Returns:
        str: e.g. ``"Full Name "`` -> ``"full_name"``.
    """
    text = "" if value is None else str(value)
    return _NON_ALNUM_RE.sub("_", text.strip().lower()).strip("_")


class FieldAliasTable:
    """Static mapping from canonical field names to accepted header spellings.

    Each canonical name always matches itself. Lookups are first-match in
    declaration order: if two fields list the same spelling, the field declared
    first claims it.

    Args:
        aliases (Mapping[str, Iterable[str]]): Canonical name -> alternate
            spellings. Spellings are normalized with `normalize_header`.
    """

    def __init__(self, aliases: Mapping[str, Iterable[str]]) -> None:
        spellings: dict[str, tuple[str, ...]] = {}
        lookup: dict[str, str] = {}
        for canonical, alternates in aliases.items():
            names: list[str] = []
            for raw in (canonical, *alternates):
                key = normalize_header(raw)
                if key and key not in names:
                    names.append(key)
                    lookup.setdefault(key, canonical)
            spellings[canonical] = tuple(names)
        self._spellings: Mapping[str, tuple[str, ...]] = MappingProxyType(spellings)
        self._lookup: Mapping[str, str] = MappingProxyType(lookup)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._spellings)!r})"

    def __contains__(self, canonical: object) -> bool:
        return canonical in self._spellings

    @property
    def canonical_fields(self) -> tuple[str, ...]:
        """Canonical field names in declaration order."""
        return tuple(self._spellings)

    def spellings(self, canonical: str) -> tuple[str, ...]:
        """Return the normalized spellings accepted for ``canonical`` (itself first).

        Raises:
            KeyError: If ``canonical`` is not a field of this table.
        """
        return self._spellings[canonical]

    def resolve(self, header_cell: object) -> str:
        """Map a raw header cell to its canonical field name.

        Args:
            header_cell (object): Raw header text, e.g. ``"Phone"``.

        Returns:
            str: The canonical name (``"phone_number"``), or the normalized cell
                itself (``"favorite_color"``) when no field claims it.
        """
        key = normalize_header(header_cell)
        return self._lookup.get(key, key)

    def merged_with(self, extra: Mapping[str, Iterable[str]]) -> FieldAliasTable:
        """Return a new table with ``extra`` spellings appended.

        Spellings for known fields go after the built-in ones, so they never
        override an existing claim. Unknown canonical names become new fields.

        Args:
            extra (Mapping[str, Iterable[str]]): Additional spellings per field.

        Returns:
            FieldAliasTable: The combined table.
        """
        combined: dict[str, list[str]] = {name: list(s) for name, s in self._spellings.items()}
        for canonical, alternates in extra.items():
            combined.setdefault(canonical, []).extend(alternates)
        merged = FieldAliasTable(combined)

        # Existing claims win even when the extra spelling belongs to an earlier field.
        lookup = dict(self._lookup)
        for key, canonical in merged._lookup.items():
            lookup.setdefault(key, canonical)
        merged._lookup = MappingProxyType(lookup)
        return merged
