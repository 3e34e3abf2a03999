# topmark:header:start
#
#   project      : DocForge
#   file         : logging.py
#   file_relpath : src/docforge/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom DocForge logging with TRACE logging.

This module extends the standard logging module with DocForge-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.

The library modules (layout, pdf, tabular) only ever log; whether anything reaches
the terminal is decided by `setup_logging`, which the CLI calls once at startup.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "DOCFORGE_LOG_LEVEL"


class DocforgeLogger(logging.Logger):
    """Custom logger class for DocForge with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(DocforgeLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record by severity with yachalk."""

    # Highest threshold first; records below TRACE fall through to the last style.
    _STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
        (logging.CRITICAL, chalk.red_bright),
        (logging.ERROR, chalk.red),
        (logging.WARNING, chalk.yellow),
        (logging.INFO, chalk.green),
        (logging.DEBUG, chalk.gray),
        (TRACE_LEVEL, chalk.blue),
    )

    def format(self, record: logging.LogRecord) -> str:
        """Return the formatted ``record`` wrapped in its severity color."""
        message = super().format(record)
        for threshold, paint in self._STYLES:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


_LEVEL_ALIASES: Final[dict[str, int]] = {"WARN": logging.WARNING, "FATAL": logging.CRITICAL}


def resolve_env_log_level() -> int | None:
    """Return a logging level from environment or None if unset.

    Honors DOCFORGE_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    name = val.strip().upper()
    if name.isdigit():
        return int(name)
    if name in _LEVEL_ALIASES:
        return _LEVEL_ALIASES[name]
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    logger = get_logger(__name__)
    logger.warning("Ignoring unknown %s value %r", LOG_LEVEL_ENV_VAR, val)
    return None


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, environment variables are consulted via
    [`resolve_env_log_level`][docforge.config.logging.resolve_env_log_level].
    Default is CRITICAL when unspecified.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Logs go to stderr: stdout may carry a binary PDF or CSV text.
    handler = logging.StreamHandler(sys.stderr)
    formatter = ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    root_logger.propagate = False


def get_logger(name: str) -> DocforgeLogger:
    """Retrieve a DocforgeLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        DocforgeLogger: A DocforgeLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("DocforgeLogger", logger)
