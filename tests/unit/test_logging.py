"""Unit tests for structured logging."""

from __future__ import annotations

import json
import logging

from workflow_trigger.logging import REDACTED, JsonFormatter


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="workflow_trigger.transport",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="Server error, will retry",
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_extra_fields() -> None:
    payload = json.loads(JsonFormatter().format(_record(attempt=2, status_code=502)))

    assert payload["level"] == "WARNING"
    assert payload["logger"] == "workflow_trigger.transport"
    assert payload["message"] == "Server error, will retry"
    assert payload["extra"] == {"attempt": 2, "status_code": 502}


def test_json_formatter_redacts_credentials() -> None:
    line = JsonFormatter().format(_record(access_token="ghp_secret", Authorization="token x"))
    payload = json.loads(line)

    assert "ghp_secret" not in line
    assert payload["extra"]["access_token"] == REDACTED
    assert payload["extra"]["Authorization"] == REDACTED
