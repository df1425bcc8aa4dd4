"""
Tests for structured logging setup.
"""

import json
import logging

from structlog.testing import CapturingLogger

from privgate.utils.logging import configure_logging, filter_sensitive_data, get_logger


def test_sensitive_fields_are_redacted():
    event_dict = {
        "event": "test",
        "token": 100,
        "request_token": 101,
        "password": "hunter2",
        "api_key": "secret-key",
    }

    filtered = filter_sensitive_data(CapturingLogger(), "info", event_dict.copy())

    # Correlation tokens are plain ids
    assert filtered["token"] == 100
    assert filtered["request_token"] == 101
    assert filtered["password"] == "***REDACTED***"
    assert filtered["api_key"] == "***REDACTED***"


def test_json_lines_reach_log_file(tmp_path):
    log_file = tmp_path / "privgate.log"
    configure_logging(level="DEBUG", fmt="json", log_file=str(log_file))
    try:
        get_logger("privgate.tests").info("authorization_requested", token=7)
        for handler in logging.getLogger("privgate").handlers:
            handler.flush()

        lines = log_file.read_text(encoding="utf-8").strip().splitlines()
        record = json.loads(lines[-1])
        assert record["event"] == "authorization_requested"
        assert record["token"] == 7
        assert record["level"] == "info"
    finally:
        configure_logging()


def test_level_filters_lower_events(tmp_path):
    log_file = tmp_path / "privgate.log"
    configure_logging(level="WARNING", fmt="json", log_file=str(log_file))
    try:
        logger = get_logger("privgate.tests")
        logger.info("quiet_event")
        logger.warning("loud_event")
        for handler in logging.getLogger("privgate").handlers:
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "quiet_event" not in content
        assert "loud_event" in content
    finally:
        configure_logging()
