"""Test configuration and fixtures."""

from __future__ import annotations

import io
import json
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pytest
import requests

from workflow_trigger.config import TriggerConfig

_ENV_VARS = (
    "WORKFLOW_TRIGGER_HOST",
    "WORKFLOW_TRIGGER_OWNER",
    "WORKFLOW_TRIGGER_REPOSITORY",
    "WORKFLOW_TRIGGER_ACCESS_TOKEN",
    "WORKFLOW_TRIGGER_EVENT_TYPE",
    "WORKFLOW_TRIGGER_MAX_RETRIES",
    "WORKFLOW_TRIGGER_RETRY_DELAY",
    "WORKFLOW_TRIGGER_TIMEOUT",
    "WORKFLOW_TRIGGER_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep the developer's environment and `.env` out of every test."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


def make_response(status: int, body: Any = None) -> requests.Response:
    """Build a real `requests.Response` without touching the network."""
    if body is None:
        raw = b""
    elif isinstance(body, bytes):
        raw = body
    elif isinstance(body, str):
        raw = body.encode("utf-8")
    else:
        raw = json.dumps(body).encode("utf-8")

    response = requests.Response()
    response.status_code = status
    response.raw = io.BytesIO(raw)
    response.headers["Content-Type"] = "application/json"
    return response


@dataclass
class SentRequest:
    request: requests.PreparedRequest
    timeout: float | None
    at: float


@dataclass
class FakeSender:
    """Sender that replays queued outcomes and records every send.

    Each outcome is a status code, a `(status, body)` tuple, a ready response,
    or an exception to raise. The last outcome repeats once the queue runs out.
    """

    outcomes: list[Any]
    sent: list[SentRequest] = field(default_factory=list)

    def send(
        self, request: requests.PreparedRequest, *, timeout: float | None
    ) -> requests.Response:
        self.sent.append(SentRequest(request=request, timeout=timeout, at=time.monotonic()))
        index = min(len(self.sent), len(self.outcomes)) - 1
        outcome = self.outcomes[index]
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, requests.Response):
            return outcome
        if isinstance(outcome, tuple):
            return make_response(*outcome)
        return make_response(outcome)

    @property
    def count(self) -> int:
        return len(self.sent)


@pytest.fixture
def trigger_config() -> TriggerConfig:
    """Provide a test trigger configuration."""
    return TriggerConfig(
        owner="octo-org",
        repository="octo-repo",
        access_token="test-token",
        event_type="deploy",
        retry_delay=0.01,
    )


@pytest.fixture
def sender_factory() -> type[FakeSender]:
    """Provide the fake sender class; call it with a list of outcomes."""
    return FakeSender


@pytest.fixture
def response_factory() -> Any:
    """Provide `make_response(status, body=None)`."""
    return make_response
