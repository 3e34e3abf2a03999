# topmark:header:start
#
#   project      : DocForge
#   file         : api.py
#   file_relpath : src/docforge/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public DocForge API (stable surface).

This module exposes a **small, typed API** for integrations that want to produce
report PDFs or exchange member CSV files without going through the CLI. Internal
modules (`docforge.pdf`, `docforge.tabular`, ...) remain private.

Configuration contract
----------------------
- Every function accepts ``config`` as either a frozen `docforge.config.Config`,
  a plain **mapping** mirroring the TOML shape, or ``None`` for the defaults.
- Mappings are layered over the defaults and frozen before use, so invalid
  values raise `docforge.core.errors.ConfigError` up front.

```python
from docforge import api

pdf = api.render_pdf(
    "Group Profile",
    ["Members: 12", "Treasurer: Jane Doe"],
    config={"document": {"overflow": "error"}},
)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from docforge.config.logging import get_logger
from docforge.config.model import Config, MutableConfig
from docforge.constants import DOCFORGE_VERSION
from docforge.pdf import assemble as _assemble
from docforge.pdf import render_document, scan_document
from docforge.tabular import build_alias_table, member_template, parse, serialize

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from docforge.config.logging import DocforgeLogger
    from docforge.pdf import DocumentScan
    from docforge.tabular import CsvDocument

logger: DocforgeLogger = get_logger(__name__)


def _resolve_config(config: Config | Mapping[str, Any] | None) -> Config:
    if config is None:
        return Config.from_defaults()
    if isinstance(config, Config):
        return config
    logger.debug("Layering config mapping over defaults: sections %s", sorted(config))
    return MutableConfig.from_toml_dict(dict(config)).freeze()


def version() -> str:
    """Return the installed DocForge version."""
    return DOCFORGE_VERSION


def render_pdf(
    title: object,
    paragraphs: Iterable[object],
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> bytes:
    """Lay out free-form text and return a single-page PDF.

    Title and paragraphs are sanitized to printable ASCII; paragraphs are wrapped
    at ``layout.wrap_width``.

    Args:
        title (object): Document title.
        paragraphs (Iterable[object]): Paragraph texts, one per logical line.
        config (Config | Mapping[str, Any] | None): Configuration override.

    Returns:
        bytes: The PDF document.
    """
    return render_document(title, paragraphs, config=_resolve_config(config))


def assemble_pdf(
    title: str,
    lines: Iterable[str],
    *,
    config: Config | Mapping[str, Any] | None = None,
) -> bytes:
    """Assemble already laid-out lines into a PDF.

    Raises:
        ContentContractError: If the title or a line is not a valid text line.
        ContentOverflowError: On too many lines under the ``error`` overflow policy.
    """
    return _assemble(title, lines, config=_resolve_config(config))


def inspect_pdf(data: bytes) -> DocumentScan:
    """Re-parse a DocForge PDF and report its structure (see `scan_document`)."""
    return scan_document(data)


def parse_csv(
    raw_text: object, *, config: Config | Mapping[str, Any] | None = None
) -> CsvDocument:
    """Decode a member CSV file.

    Headers resolve through the member alias table plus any ``[csv.aliases]``
    spellings from ``config``.

    Args:
        raw_text (object): File content.
        config (Config | Mapping[str, Any] | None): Configuration override.

    Returns:
        CsvDocument: Accepted records and the skipped-row report.
    """
    cfg = _resolve_config(config)
    return parse(
        raw_text,
        resolver=build_alias_table(cfg),
        delimiter=cfg.delimiter,
        strip_backticks=cfg.strip_backticks,
    )


def serialize_csv(
    document: CsvDocument, *, config: Config | Mapping[str, Any] | None = None
) -> str:
    """Encode a document as CSV text using the configured delimiter."""
    return serialize(document, delimiter=_resolve_config(config).delimiter)


def member_template_csv(*, config: Config | Mapping[str, Any] | None = None) -> str:
    """Return the member import template as CSV text."""
    return serialize_csv(member_template(), config=config)


__all__ = [
    "assemble_pdf",
    "inspect_pdf",
    "member_template_csv",
    "parse_csv",
    "render_pdf",
    "serialize_csv",
    "version",
]
