# topmark:header:start
#
#   project      : DocForge
#   file         : main.py
#   file_relpath : src/docforge/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge Click entry point.

Group-level options are resolved once by `init_common_state` and placed into
``ctx.obj`` (console, verbosity, color); subcommands read them from there.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from docforge.cli.commands.config import config_command
from docforge.cli.commands.csv import csv_command
from docforge.cli.commands.pdf import pdf_command
from docforge.cli.commands.version import version_command
from docforge.cli.console import ClickConsole
from docforge.cli.options import (
    CONTEXT_SETTINGS,
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from docforge.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from docforge.cli.console import ConsoleLike
    from docforge.config.logging import DocforgeLogger

logger: DocforgeLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    ``DOCFORGE_LOG_LEVEL`` overrides the level derived from ``-v``/``-q``.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose - quiet
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    effective_mode = ColorMode.NEVER if no_color else color_mode
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="DocForge: single-page report PDFs and member CSV exchange.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the DocForge CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


cli.add_command(version_command)
cli.add_command(pdf_command)
cli.add_command(csv_command)
cli.add_command(config_command)

if __name__ == "__main__":
    cli()
