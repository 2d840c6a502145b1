"""Unit tests for the structlog console adapter."""

import json

import pytest
import structlog

from src.infrastructure.logging import ConsoleAdapter


def _lines(capsys) -> list[dict]:
    return [json.loads(line) for line in capsys.readouterr().out.splitlines() if line]


@pytest.mark.unit
class TestConsoleAdapter:
    """Test JSON output, levels and bound context."""

    def test_json_record_contains_event_and_context(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.info("collection_page_loaded", collection="leads", total=45)

        [record] = _lines(capsys)
        assert record["event"] == "collection_page_loaded"
        assert record["level"] == "info"
        assert record["collection"] == "leads"
        assert record["total"] == 45
        assert "timestamp" in record

    def test_error_adds_error_type_and_message(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("profile_update_failed", error=ConnectionError("db down"))

        [record] = _lines(capsys)
        assert record["error_type"] == "ConnectionError"
        assert record["error_message"] == "db down"

    def test_level_filters_lower_records(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("ignored")
        logger.warning("kept")

        assert [record["event"] for record in _lines(capsys)] == ["kept"]

    def test_unknown_level_defaults_to_info(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="CHATTY")

        logger.debug("ignored")
        logger.info("kept")

        assert [record["event"] for record in _lines(capsys)] == ["kept"]

    def test_bind_adds_context(self, capsys):
        logger = ConsoleAdapter(use_json=True).bind(app="dashboard")

        logger.with_context(request="r1").critical("boom")

        [record] = _lines(capsys)
        assert record["app"] == "dashboard"
        assert record["request"] == "r1"
        assert record["level"] == "critical"

    def test_contextvars_are_merged(self, capsys):
        logger = ConsoleAdapter(use_json=True)
        structlog.contextvars.bind_contextvars(trace_id="abc")
        try:
            logger.info("traced")
        finally:
            structlog.contextvars.clear_contextvars()

        [record] = _lines(capsys)
        assert record["trace_id"] == "abc"
