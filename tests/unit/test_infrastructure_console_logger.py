"""Unit tests for the structlog console adapter."""

import json

import pytest

from campus_events.infrastructure.logging import ConsoleAdapter


@pytest.mark.unit
class TestConsoleAdapter:
    def test_json_output_carries_bound_context(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="INFO")

        logger.bind(event_id="e-1").info("registration_admitted", registration_id="r-1")

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["event"] == "registration_admitted"
        assert record["event_id"] == "e-1"
        assert record["registration_id"] == "r-1"
        assert record["level"] == "info"

    def test_error_includes_exception_details(self, capsys):
        logger = ConsoleAdapter(use_json=True)

        logger.error("unexpected", error=RuntimeError("disk full"))

        record = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert record["error_type"] == "RuntimeError"
        assert record["error_message"] == "disk full"

    def test_level_filters_lower_messages(self, capsys):
        logger = ConsoleAdapter(use_json=True, level="WARNING")

        logger.info("quiet")
        logger.warning("loud")

        lines = capsys.readouterr().out.strip().splitlines()
        assert [json.loads(line)["event"] for line in lines] == ["loud"]
