"""
Tests for structured logging and request context
"""

import json
import logging

import pytest
import structlog

from relaykit.logging import (
    RequestContextFilter,
    clear_request_context,
    configure_logging,
    generate_request_id,
    get_logger,
    get_request_id,
    set_request_context,
)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo logging configuration and request context after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    clear_request_context()
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestRequestContext:
    def test_set_and_clear(self):
        request_id = set_request_context("req-123", operation_name="FetchNode")

        assert request_id == "req-123"
        assert get_request_id() == "req-123"

        clear_request_context()
        assert get_request_id() is None

    def test_generates_request_id(self):
        request_id = set_request_context()

        assert request_id == get_request_id()
        assert len(request_id) == 14

    def test_generated_ids_differ(self):
        assert generate_request_id() != generate_request_id()

    def test_filter_adds_context(self):
        set_request_context("req-1", operation_name="FetchNode")

        event = RequestContextFilter()(None, "info", {"event": "hello"})

        assert event == {"event": "hello", "request_id": "req-1", "operation_name": "FetchNode"}

    def test_filter_without_context(self):
        assert RequestContextFilter()(None, "info", {"event": "hello"}) == {"event": "hello"}


class TestConfigureLogging:
    def test_json_output_includes_request_context(self, capsys):
        configure_logging(debug=False)
        set_request_context("req-42")

        get_logger("relaykit.test").warning("Rejected global id", code="MALFORMED_GLOBAL_ID")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        record = json.loads(line)
        assert record["event"] == "Rejected global id"
        assert record["code"] == "MALFORMED_GLOBAL_ID"
        assert record["request_id"] == "req-42"
        assert record["level"] == "warning"
        assert record["logger"] == "relaykit.test"

    def test_explicit_level_filters(self, capsys):
        configure_logging(debug=False, log_level="warning")

        get_logger("relaykit.test").info("Dispatching node fetch")

        assert capsys.readouterr().out == ""

    def test_unknown_level_rejected_before_configuring(self):
        root = logging.getLogger()
        handlers = root.handlers[:]

        with pytest.raises(ValueError, match="Unknown log level 'verbose'"):
            configure_logging(log_level="verbose")

        assert root.handlers == handlers

    def test_numeric_level_name_rejected(self):
        with pytest.raises(ValueError):
            configure_logging(log_level="Level 5")
