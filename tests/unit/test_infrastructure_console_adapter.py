"""Unit tests for ConsoleAdapter (structlog)."""

import json

import pytest

from src.infrastructure.logging.console_adapter import ConsoleAdapter


def last_json_line(capsys) -> dict:
    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    return json.loads(lines[-1])


@pytest.mark.unit
class TestConsoleAdapter:
    """Test structured output."""

    def test_json_output_contains_event_level_and_context(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="DEBUG")

        logger.info("Appointment persisted", schedule_id="98701")

        entry = last_json_line(capsys)
        assert entry["event"] == "Appointment persisted"
        assert entry["level"] == "info"
        assert entry["schedule_id"] == "98701"
        assert "timestamp" in entry

    def test_error_includes_exception_details(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("Save failed", error=ValueError("bad value"), table="appointments")

        entry = last_json_line(capsys)
        assert entry["error_type"] == "ValueError"
        assert entry["error_message"] == "bad value"
        assert entry["table"] == "appointments"

    def test_bind_adds_context_to_every_entry(self, capsys):
        logger = ConsoleAdapter(use_json=True).bind(aws_request_id="req-1")

        logger.warning("Something odd")

        entry = last_json_line(capsys)
        assert entry["aws_request_id"] == "req-1"
        assert entry["level"] == "warning"

    def test_level_filters_lower_entries(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("hidden")
        logger.debug("hidden too")

        assert capsys.readouterr().out.strip() == ""
