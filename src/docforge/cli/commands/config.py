# topmark:header:start
#
#   project      : DocForge
#   file         : config.py
#   file_relpath : src/docforge/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge `config` command group.

  * ``docforge config dump``: show the effective merged configuration.
  * ``docforge config init``: print a starter configuration file.
"""

from __future__ import annotations

import click

from docforge.cli.cmd_common import build_config, get_console, get_effective_verbosity
from docforge.cli.options import CONTEXT_SETTINGS, common_config_options
from docforge.config.io import load_default_config_template_toml_text, to_toml


@click.group(
    name="config",
    help="Inspect and scaffold DocForge configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""


@config_command.command(name="dump")
@common_config_options
@click.pass_context
def dump_command(ctx: click.Context, config_paths: tuple[str, ...]) -> None:
    """Print the effective configuration (defaults merged with --config files) as TOML."""
    console = get_console(ctx)
    config = build_config(config_paths)
    if get_effective_verbosity(ctx) > 0:
        sources = ", ".join(config_paths) or "defaults only"
        console.print(console.styled(f"# Effective configuration ({sources})", bold=True))
    console.print(to_toml(config.to_toml_dict()).rstrip("\n"))


@config_command.command(name="init")
@click.pass_context
def init_command(ctx: click.Context) -> None:
    """Print the annotated default configuration as a starting docforge.toml."""
    text = load_default_config_template_toml_text()
    get_console(ctx).print(text.rstrip("\n"))
