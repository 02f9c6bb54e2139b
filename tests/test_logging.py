"""Tests for logging utilities."""

from __future__ import annotations

import json
import logging

from tiny_ioc.core.config import LoggingSettings
from tiny_ioc.core.logging import configure_logging


def _console_handler() -> logging.Handler:
    (handler,) = [
        handler
        for handler in logging.getLogger().handlers
        if type(handler) is logging.StreamHandler
    ]
    return handler


def test_configure_logging_sets_root_level() -> None:
    """configure_logging should set the root logger level according to settings."""

    settings = LoggingSettings(level="DEBUG", structured=False)
    configure_logging(settings)
    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("tiny_ioc").level == logging.DEBUG


def test_plain_formatter_renders_fields() -> None:
    configure_logging(LoggingSettings(level="INFO", structured=False))
    record = logging.LogRecord(
        "tiny_ioc.test", logging.INFO, __file__, 1, "hello", None, None
    )

    rendered = _console_handler().format(record)

    assert rendered.endswith("INFO tiny_ioc.test hello")


def test_structured_formatter_emits_valid_json() -> None:
    """Quotes, backslashes and newlines in messages must still yield JSON."""

    configure_logging(LoggingSettings(level="INFO", structured=True))
    record = logging.LogRecord(
        "tiny_ioc.test",
        logging.WARNING,
        __file__,
        1,
        'said "hi" to %s\nnext line \\ done',
        ("Leaf",),
        None,
    )

    payload = json.loads(_console_handler().format(record))

    assert payload["event"] == 'said "hi" to Leaf\nnext line \\ done'
    assert payload["level"] == "warning"
    assert payload["logger"] == "tiny_ioc.test"
    assert "timestamp" in payload
