# topmark:header:start
#
#   project      : DocForge
#   file         : pdf.py
#   file_relpath : src/docforge/cli/commands/pdf.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge `pdf` command group.

  * ``docforge pdf render``: lay out text lines and write a single-page PDF.
  * ``docforge pdf inspect``: re-parse a PDF and check its cross-reference data.
"""

from __future__ import annotations

import click

from docforge.cli.cmd_common import build_config, get_console, get_effective_verbosity
from docforge.cli.errors import DocforgeDataError, from_library_error
from docforge.cli.io import read_input_bytes, read_input_text, write_output
from docforge.cli.options import CONTEXT_SETTINGS, common_config_options, output_option
from docforge.config.logging import DocforgeLogger, get_logger
from docforge.core.errors import DocforgeError
from docforge.core.exit_codes import ExitCode
from docforge.pdf import render_document, scan_document

logger: DocforgeLogger = get_logger(__name__)


@click.group(
    name="pdf",
    help="Render and inspect single-page report PDFs.",
    context_settings=CONTEXT_SETTINGS,
)
def pdf_command() -> None:
    """Group for PDF subcommands."""


@pdf_command.command(name="render")
@common_config_options
@output_option
@click.option("--title", "-t", required=True, help="Document title (sanitized to ASCII).")
@click.argument("input_path", metavar="[INPUT|-]", required=False, default="-")
@click.pass_context
def render_command(
    ctx: click.Context,
    config_paths: tuple[str, ...],
    output_path: str | None,
    title: str,
    input_path: str,
) -> None:
    """Render INPUT (one paragraph per line; STDIN by default) as a PDF.

    Long lines are wrapped at ``layout.wrap_width``; lines beyond the page
    capacity are dropped with a warning, or rejected under ``overflow = "error"``.
    """
    config = build_config(config_paths)
    text = read_input_text(input_path)
    try:
        data = render_document(title, text.splitlines(), config=config)
    except DocforgeError as exc:
        raise from_library_error(exc) from exc
    logger.debug("Rendered %d byte(s) for title %r", len(data), title)
    write_output(data, output_path)
    if output_path not in (None, "-") and get_effective_verbosity(ctx) > 0:
        get_console(ctx).print(f"Wrote {len(data)} bytes to {output_path}")


@pdf_command.command(name="inspect")
@click.argument("input_path", metavar="FILE|-")
@click.pass_context
def inspect_command(ctx: click.Context, input_path: str) -> None:
    """Check that FILE's xref offsets, /Size and startxref match its real layout.

    Exits with 2 when the document parses but is inconsistent.
    """
    console = get_console(ctx)
    data = read_input_bytes(input_path)
    logger.debug("Inspecting %s (%d bytes)", input_path, len(data))
    try:
        scan = scan_document(data)
    except DocforgeError as exc:
        raise DocforgeDataError(f"Not a readable DocForge PDF: {exc}") from exc

    console.print(f"PDF version: {scan.version}")
    console.print(f"Objects:     {scan.obj_count}")
    console.print(f"/Size:       {scan.size}")
    console.print(f"/Root:       {scan.root_id} 0 R")
    console.print(f"xref at:     {scan.xref_position}")
    if get_effective_verbosity(ctx) > 0:
        for span in scan.objects:
            kind = "stream" if span.has_stream else "dict"
            console.print(f"  {span.object_id} {span.generation} obj @ {span.offset} ({kind})")

    problems = scan.problems()
    if problems:
        for problem in problems:
            console.warn(f"  - {problem}")
        console.print(console.styled("Inconsistent", fg="red", bold=True))
        ctx.exit(ExitCode.INCONSISTENT)
    console.print(console.styled("OK", fg="green", bold=True))
