# topmark:header:start
#
#   project      : DocForge
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DocForge test suite.

Notes:
    Tests should respect the immutable/mutable configuration split: build a
    `docforge.config.MutableConfig`, then ``freeze()`` it (see `make_config`).
    Do **not** mutate a frozen `docforge.config.Config`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, TypeVar, cast

import pytest

from docforge.config import Config, MutableConfig, logging

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type."""

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_hypothesis_slow: DecoratorType[Any] = as_typed_mark(pytest.mark.hypothesis_slow)


@pytest.fixture(autouse=True)
def reset_docforge_logging(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep the environment from forcing a log level, and restore test logging afterwards.

    CLI invocations rebind the root handler to Click's captured streams; the
    teardown points it back at the real stderr.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)
    yield
    logging.setup_logging(level=logging.TRACE_LEVEL)


def pytest_configure(config: pytest.Config) -> None:
    """Log at TRACE level for the whole run so failures come with full context."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(data: dict[str, Any] | None = None) -> Config:
    """Return a frozen `Config` built from the defaults and a TOML-shaped override.

    Args:
        data (dict[str, Any] | None): Table in the ``docforge.toml`` schema, e.g.
            ``{"document": {"max_lines": 3}}``.

    Returns:
        Config: The validated configuration.
    """
    return MutableConfig.from_toml_dict(data or {}).freeze()
