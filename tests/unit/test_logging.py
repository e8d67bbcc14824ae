from __future__ import annotations

import io
import json
import logging
import re

import pytest

from eprints.logging_config import (
    ConsoleLogFormatter,
    JsonLogFormatter,
    configure_logging,
    parse_redact_fields,
)
from eprints.logging_utils import structured_log


def test_json_log_formatter_redacts_sensitive_fields() -> None:
    formatter = JsonLogFormatter(redact_fields=parse_redact_fields("api_key"))
    record = logging.makeLogRecord(
        {
            "name": "tests.logging",
            "levelno": logging.INFO,
            "levelname": "INFO",
            "msg": "test.event",
            "args": (),
            "api_key": "very-secret",
            "authorization": "Bearer token",
            "route": "query",
            "color_message": "ANSI-noise",
        }
    )

    payload = json.loads(formatter.format(record))

    assert payload["event"] == "test.event"
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}Z", payload["timestamp"])
    assert payload["api_key"] == "[REDACTED]"
    assert payload["authorization"] == "[REDACTED]"
    assert payload["route"] == "query"
    assert "color_message" not in payload


def test_parse_redact_fields_trims_and_lowercases() -> None:
    fields = parse_redact_fields(" Token , ,SECRET ")
    assert {"token", "secret", "authorization"} <= fields


# --- structured_log tests ---


def _capture_structured_log(caplog, level, event, **fields):
    """Helper: call structured_log and return the captured LogRecord."""
    logger = logging.getLogger("tests.structured")
    with caplog.at_level(logging.DEBUG, logger="tests.structured"):
        structured_log(logger, level, event, **fields)
    return caplog.records[-1]


def test_structured_log_json_formatter_uses_event_as_message(caplog) -> None:
    record = _capture_structured_log(caplog, "debug", "arxiv.request_sent", method="GET", uri="/api/query")
    formatter = JsonLogFormatter(redact_fields=set())
    payload = json.loads(formatter.format(record))

    assert payload["event"] == "arxiv.request_sent"
    assert payload["level"] == "debug"
    assert payload["uri"] == "/api/query"


def test_structured_log_console_formatter(caplog) -> None:
    record = _capture_structured_log(
        caplog,
        "warning",
        "arxiv.response_read_failed",
        method="GET",
        uri="/api/query?id_list=1",
        status_code=503,
    )
    formatter = ConsoleLogFormatter(redact_fields=set())
    output = formatter.format(record)

    assert "WRN" in output
    assert "arxiv.response_read_failed" in output
    assert "GET /api/query?id_list=1" in output
    assert "status=503" in output


def test_configure_logging_installs_single_json_handler() -> None:
    root_logger = logging.getLogger()
    previous_handlers = list(root_logger.handlers)
    previous_level = root_logger.level
    stream = io.StringIO()
    try:
        configure_logging(level="debug", log_format="json", redact_fields=parse_redact_fields(None), stream=stream)
        structured_log(logging.getLogger("eprints.test"), "info", "arxiv.feed_decoded", entry_count=2, mailto="x@y")

        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
        payload = json.loads(stream.getvalue().strip())
        assert payload["event"] == "arxiv.feed_decoded"
        assert payload["entry_count"] == 2
        assert payload["mailto"] == "[REDACTED]"
    finally:
        root_logger.handlers[:] = previous_handlers
        root_logger.setLevel(previous_level)


@pytest.mark.parametrize("level", ["nonsense", ""])
def test_configure_logging_falls_back_to_info_for_unknown_levels(level: str) -> None:
    root_logger = logging.getLogger()
    previous_handlers = list(root_logger.handlers)
    previous_level = root_logger.level
    try:
        configure_logging(level=level, log_format="console", redact_fields=set(), stream=io.StringIO())
        assert root_logger.level == logging.INFO
        assert isinstance(root_logger.handlers[0].formatter, ConsoleLogFormatter)
    finally:
        root_logger.handlers[:] = previous_handlers
        root_logger.setLevel(previous_level)
