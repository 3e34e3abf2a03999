# topmark:header:start
#
#   project      : DocForge
#   file         : csv.py
#   file_relpath : src/docforge/cli/commands/csv.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge `csv` command group.

  * ``docforge csv check``: decode a member CSV and report accepted/skipped rows.
  * ``docforge csv normalize``: decode and re-encode with canonical headers.
  * ``docforge csv template``: write the member import template.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docforge.cli.cmd_common import build_config, get_console, get_effective_verbosity
from docforge.cli.errors import from_library_error
from docforge.cli.io import read_input_text, write_output
from docforge.cli.options import CONTEXT_SETTINGS, common_config_options, output_option
from docforge.config.logging import get_logger
from docforge.core.errors import DocforgeError
from docforge.tabular import build_alias_table, member_template, parse, serialize

if TYPE_CHECKING:
    from docforge.cli.console import ConsoleLike
    from docforge.config.logging import DocforgeLogger
    from docforge.config.model import Config
    from docforge.tabular import CsvDocument

logger: DocforgeLogger = get_logger(__name__)


def _decode(input_path: str, config: Config) -> CsvDocument:
    text = read_input_text(input_path)
    logger.debug("Decoding %s (%d chars, delimiter %r)", input_path, len(text), config.delimiter)
    try:
        return parse(
            text,
            resolver=build_alias_table(config),
            delimiter=config.delimiter,
            strip_backticks=config.strip_backticks,
        )
    except DocforgeError as exc:
        raise from_library_error(exc) from exc


def _summary(document: CsvDocument) -> str:
    return f"Parsed {len(document.rows)} records, skipped {len(document.skipped)}"


def _report_skipped(console: ConsoleLike, document: CsvDocument) -> None:
    for row in document.skipped:
        console.warn(f"  line {row.line_number}: {row.reason.value}")


@click.group(
    name="csv",
    help="Decode, normalize and template member CSV files.",
    context_settings=CONTEXT_SETTINGS,
)
def csv_command() -> None:
    """Group for CSV subcommands."""


@csv_command.command(name="check")
@common_config_options
@click.argument("input_path", metavar="FILE|-")
@click.pass_context
def check_command(ctx: click.Context, config_paths: tuple[str, ...], input_path: str) -> None:
    """Decode FILE and report how many records would be imported."""
    console = get_console(ctx)
    document = _decode(input_path, build_config(config_paths))
    if document.skipped:
        logger.info("%s: %s", input_path, _summary(document))

    if get_effective_verbosity(ctx) > 0:
        console.print(f"Columns: {', '.join(document.header)}")
        _report_skipped(console, document)
    console.print(_summary(document))


@csv_command.command(name="normalize")
@common_config_options
@output_option
@click.argument("input_path", metavar="FILE|-")
@click.pass_context
def normalize_command(
    ctx: click.Context,
    config_paths: tuple[str, ...],
    output_path: str | None,
    input_path: str,
) -> None:
    """Decode FILE and write it back with canonical headers and clean cells."""
    console = get_console(ctx)
    config = build_config(config_paths)
    document = _decode(input_path, config)
    write_output(serialize(document, delimiter=config.delimiter), output_path)

    if document.skipped:
        console.warn(_summary(document))
        if get_effective_verbosity(ctx) > 0:
            _report_skipped(console, document)


@csv_command.command(name="template")
@output_option
def template_command(output_path: str | None) -> None:
    """Write the member import template (header plus one sample row)."""
    write_output(serialize(member_template()), output_path)
