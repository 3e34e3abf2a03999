# topmark:header:start
#
#   project      : DocForge
#   file         : version.py
#   file_relpath : src/docforge/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DocForge `version` command.

Prints the current DocForge version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from docforge.cli.cmd_common import get_console, get_effective_verbosity
from docforge.constants import DOCFORGE_VERSION


@click.command(
    name="version",
    help="Show the current version of DocForge.",
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Show the current version of DocForge."""
    console = get_console(ctx)
    if get_effective_verbosity(ctx) > 0:
        console.print(console.styled("DocForge version:", bold=True, underline=True))
        console.print(f"    {console.styled(DOCFORGE_VERSION, bold=True)}")
    else:
        console.print(console.styled(DOCFORGE_VERSION, bold=True))
