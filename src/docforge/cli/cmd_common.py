# topmark:header:start
#
#   project      : DocForge
#   file         : cmd_common.py
#   file_relpath : src/docforge/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Helpers shared by DocForge subcommands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from docforge.cli.errors import DocforgeFileNotFoundError, from_library_error
from docforge.config.logging import get_logger
from docforge.config.model import load_config
from docforge.core.errors import ConfigError

if TYPE_CHECKING:
    from docforge.cli.console import ConsoleLike
    from docforge.config.logging import DocforgeLogger
    from docforge.config.model import Config

logger: DocforgeLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by `init_common_state`."""
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (``-v`` count minus ``-q`` count)."""
    ctx.ensure_object(dict)
    return int(ctx.obj.get("verbosity_level", 0))


def build_config(config_paths: tuple[str, ...]) -> Config:
    """Load and merge configuration files over the defaults.

    Args:
        config_paths (tuple[str, ...]): Values of the repeatable ``--config`` option.

    Returns:
        Config: The effective configuration.

    Raises:
        DocforgeFileNotFoundError: If a config file does not exist.
        DocforgeConfigError: If a config file is malformed or holds invalid values.
    """
    paths = [Path(p) for p in config_paths]
    for path in paths:
        if not path.is_file():
            raise DocforgeFileNotFoundError(f"No such config file: {path}")
    try:
        config = load_config(paths)
    except ConfigError as exc:
        raise from_library_error(exc) from exc
    logger.debug("Effective configuration merged from %d file(s)", len(paths))
    return config
