"""Unit tests for trigger configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from workflow_trigger.config import TriggerConfig


def test_config_defaults() -> None:
    config = TriggerConfig()

    assert config.host == "api.github.com"
    assert config.owner == ""
    assert config.max_retries == 1
    assert config.retry_delay == 5.0
    assert config.timeout == 30.0
    assert config.log_level == "INFO"


def test_config_loads_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(
        "\n".join(
            [
                "WORKFLOW_TRIGGER_OWNER=octo-org",
                "WORKFLOW_TRIGGER_REPOSITORY=octo-repo",
                "WORKFLOW_TRIGGER_ACCESS_TOKEN=test-token",
                "WORKFLOW_TRIGGER_EVENT_TYPE=deploy",
                "WORKFLOW_TRIGGER_MAX_RETRIES=3",
                "WORKFLOW_TRIGGER_RETRY_DELAY=1.5",
                "",
            ]
        ),
        encoding="utf-8",
    )

    config = TriggerConfig()

    assert config.repository_slug == "octo-org/octo-repo"
    assert config.access_token == "test-token"
    assert config.event_type == "deploy"
    assert config.max_retries == 3
    assert config.retry_delay == 1.5


def test_environment_overrides_dotenv(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text("WORKFLOW_TRIGGER_HOST=from-dotenv\n", encoding="utf-8")
    monkeypatch.setenv("WORKFLOW_TRIGGER_HOST", "github.example.com")

    assert TriggerConfig().host == "github.example.com"


def test_keyword_arguments_override_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKFLOW_TRIGGER_EVENT_TYPE", "from-env")

    assert TriggerConfig(event_type="from-kwargs").event_type == "from-kwargs"


def test_access_token_is_not_in_repr() -> None:
    config = TriggerConfig(access_token="super-secret")

    assert "super-secret" not in repr(config)


def test_config_is_frozen() -> None:
    config = TriggerConfig(owner="octo-org")

    with pytest.raises(ValidationError):
        config.owner = "someone-else"  # type: ignore[misc]


def test_invalid_max_retries_is_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORKFLOW_TRIGGER_MAX_RETRIES", "many")

    with pytest.raises(ValidationError):
        TriggerConfig()
