"""Tests for the logging helpers with correlation and session ids."""

import logging
from typing import Any, cast

from pythonjsonlogger import jsonlogger

from dartmouth_engine.core.logging import (
    CorrelationIdFilter,
    bind_correlation_id,
    bind_session_id,
    correlation_id_context,
    get_correlation_id,
    get_logger,
    get_session_id,
    reset_correlation_id,
    reset_session_id,
    session_id_context,
)


def test_correlation_filter_attaches_context():
    """Filter should attach the current correlation and session ids onto log records."""
    cid_token = bind_correlation_id("abc123")
    session_token = bind_session_id("session-9")
    try:
        record = logging.LogRecord(
            name="test",
            level=logging.INFO,
            pathname=__file__,
            lineno=10,
            msg="hello",
            args=None,
            exc_info=None,
        )
        filt = CorrelationIdFilter()
        assert filt.filter(record) is True
        record_any = cast(Any, record)
        assert record_any.__dict__["correlation_id"] == "abc123"
        assert record_any.__dict__["session_id"] == "session-9"
    finally:
        reset_session_id(session_token)
        reset_correlation_id(cid_token)


def test_filter_uses_placeholder_when_unbound():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)
    CorrelationIdFilter().filter(record)
    assert cast(Any, record).correlation_id == "-"
    assert cast(Any, record).session_id == "-"


def test_context_managers_restore_state():
    """Nested contexts restore the original ids."""
    with correlation_id_context("ctx"), correlation_id_context("nested"), session_id_context(
        "session-a"
    ):
        assert get_correlation_id() == "nested"
        assert get_session_id() == "session-a"
    assert get_correlation_id() is None
    assert get_session_id() is None


def test_get_logger_installs_filtered_json_handlers():
    """Handlers on a module logger carry the correlation filter and JSON formatter."""
    logger = get_logger("dartmouth_engine.tests.logging")
    assert logger.handlers
    assert all(
        any(isinstance(flt, CorrelationIdFilter) for flt in handler.filters)
        for handler in logger.handlers
    )
    assert all(isinstance(handler.formatter, jsonlogger.JsonFormatter) for handler in logger.handlers)


def test_get_logger_does_not_duplicate_handlers():
    first = get_logger("dartmouth_engine.tests.logging.repeat")
    count = len(first.handlers)
    second = get_logger("dartmouth_engine.tests.logging.repeat")
    assert first is second
    assert len(second.handlers) == count
