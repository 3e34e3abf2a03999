# topmark:header:start
#
#   project      : DocForge
#   file         : assembler.py
#   file_relpath : src/docforge/pdf/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-page PDF assembly.

`assemble` turns a title and a list of TextLines into a complete document:

    %PDF-1.4
    1 0 obj << /Type /Catalog /Pages 2 0 R >> endobj
    2 0 obj << /Type /Pages /Kids [3 0 R] /Count 1 >> endobj
    3 0 obj << /Type /Page /Parent 2 0 R /MediaBox [...] /Resources ... /Contents 4 0 R >> endobj
    4 0 obj << /Length N >> stream ... endstream endobj
    5 0 obj << /Type /Font /Subtype /Type1 /BaseFont /Helvetica >> endobj
    xref / trailer / startxref / %%EOF

`render_document` is the convenience entry point for report builders: it
sanitizes and wraps free-form paragraphs first.

Lines handed to `assemble` must already be TextLines (see
`docforge.layout.text`); anything else is a caller bug and raises
`ContentContractError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from docforge.config.logging import get_logger
from docforge.config.model import Config
from docforge.config.policy import OverflowPolicy
from docforge.core.errors import ContentContractError, ContentOverflowError
from docforge.layout.text import is_text_line, layout_paragraphs, sanitize
from docforge.pdf.content import FONT_RESOURCE_NAME, ContentStream
from docforge.pdf.objects import PdfObject
from docforge.pdf.writer import PdfWriter

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)

CATALOG_ID = 1
PAGES_ID = 2
PAGE_ID = 3
CONTENT_ID = 4
FONT_ID = 5


@dataclass(frozen=True)
class DocumentRequest:
    """Input of one export action.

    Attributes:
        title (str): Document title; printable ASCII.
        lines (tuple[str, ...]): Content TextLines in reading order.
    """

    title: str
    lines: tuple[str, ...] = ()


def _check_text(value: str, what: str) -> None:
    if not is_text_line(value):
        raise ContentContractError(value, what=what)


def _fit_lines(lines: Sequence[str], config: Config) -> Sequence[str]:
    if len(lines) <= config.max_lines:
        return lines
    if config.overflow is OverflowPolicy.ERROR:
        raise ContentOverflowError(len(lines), config.max_lines)
    logger.warning(
        "Document has %d content lines; dropping the last %d (single page holds %d)",
        len(lines),
        len(lines) - config.max_lines,
        config.max_lines,
    )
    return lines[: config.max_lines]


def build_content_stream(title: str, lines: Sequence[str], config: Config) -> bytes:
    """Return the page's content stream bytes for an already validated request."""
    stream = ContentStream()
    stream.show_title(
        title, x=config.margin_left, y=config.title_y, size=config.title_font_size
    )
    stream.show_lines(
        lines,
        x=config.margin_left,
        top=config.body_top,
        line_height=config.line_height,
        size=config.body_font_size,
    )
    return stream.to_bytes()


def assemble_request(request: DocumentRequest, config: Config | None = None) -> bytes:
    """Assemble the PDF for ``request``.

    Args:
        request (DocumentRequest): Title and content lines.
        config (Config | None): Page geometry and overflow policy; defaults when None.

    Returns:
        bytes: The finished document. The caller owns it exclusively.

    Raises:
        ContentContractError: If the title or a line contains characters outside
            printable ASCII.
        ContentOverflowError: If there are more lines than fit and the overflow
            policy is ``error``.
    """
    cfg = config or Config.from_defaults()

    title = request.title if request.title.strip() else cfg.title_fallback
    _check_text(title, "title")
    for line in request.lines:
        _check_text(line, "line")
    lines = _fit_lines(request.lines, cfg)

    stream = build_content_stream(title, lines, cfg)

    objects = [
        PdfObject(CATALOG_ID, b"<< /Type /Catalog /Pages %d 0 R >>" % PAGES_ID),
        PdfObject(PAGES_ID, b"<< /Type /Pages /Kids [%d 0 R] /Count 1 >>" % PAGE_ID),
        PdfObject(
            PAGE_ID,
            (
                f"<< /Type /Page /Parent {PAGES_ID} 0 R "
                f"/MediaBox [0 0 {cfg.page_width} {cfg.page_height}] "
                f"/Resources << /Font << /{FONT_RESOURCE_NAME} {FONT_ID} 0 R >> >> "
                f"/Contents {CONTENT_ID} 0 R >>"
            ).encode("ascii"),
        ),
        PdfObject(
            CONTENT_ID,
            b"<< /Length %d >> stream\n" % len(stream) + stream + b"\nendstream",
        ),
        PdfObject(
            FONT_ID,
            b"<< /Type /Font /Subtype /Type1 /BaseFont /%s >>" % cfg.base_font.encode("ascii"),
        ),
    ]

    writer = PdfWriter()
    for obj in objects:
        writer.add_object(obj)
    data = writer.finish(root_id=CATALOG_ID)
    logger.info("Assembled %r: %d line(s), %d bytes", title, len(lines), len(data))
    return data


def assemble(title: str, lines: Iterable[str], *, config: Config | None = None) -> bytes:
    """Assemble a single-page PDF from a title and TextLines.

    Args:
        title (str): Printable-ASCII title; empty uses ``title_fallback``.
        lines (Iterable[str]): Content TextLines.
        config (Config | None): Configuration; defaults when None.

    Returns:
        bytes: The finished document.
    """
    return assemble_request(DocumentRequest(title=title, lines=tuple(lines)), config)


def render_document(
    title: object, paragraphs: Iterable[object], *, config: Config | None = None
) -> bytes:
    """Sanitize, wrap and assemble free-form report content.

    Args:
        title (object): Title text; sanitized.
        paragraphs (Iterable[object]): Paragraph texts; each is sanitized and
            wrapped at ``wrap_width``, and empty paragraphs become blank lines.
        config (Config | None): Configuration; defaults when None.

    Returns:
        bytes: The finished document.
    """
    cfg = config or Config.from_defaults()
    lines = layout_paragraphs(paragraphs, cfg.wrap_width)
    return assemble(sanitize(title), lines, config=cfg)
