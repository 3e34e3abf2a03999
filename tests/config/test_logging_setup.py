# topmark:header:start
#
#   project      : DocForge
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE logger, the env override and the chalk formatter."""

from __future__ import annotations

import logging

import pytest

from docforge.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    DocforgeLogger,
    get_logger,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("20", 20),
        ("chatty", None),
        ("", None),
    ],
)
def test_env_log_level(monkeypatch: pytest.MonkeyPatch, raw: str, expected: int | None) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, raw)
    assert resolve_env_log_level() == expected


def test_env_log_level_unset() -> None:
    assert resolve_env_log_level() is None


def test_get_logger_returns_trace_capable_logger(caplog: pytest.LogCaptureFixture) -> None:
    logger = get_logger("docforge.tests.trace")
    assert isinstance(logger, DocforgeLogger)

    with caplog.at_level(TRACE_LEVEL, logger="docforge.tests.trace"):
        logger.trace("fine-grained %s", "detail")

    assert caplog.records[-1].levelname == "TRACE"
    assert caplog.records[-1].getMessage() == "fine-grained detail"


def test_formatter_keeps_message_text() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful", None, None)
    assert "[WARNING] careful" in ChalkFormatter("[%(levelname)s] %(message)s").format(record)
