"""Configuration for a dispatch trigger.

Configuration is loaded from:
- keyword arguments (the CLI passes its flags this way)
- environment variables prefixed with ``WORKFLOW_TRIGGER_``
- and a local ``.env`` file (if present)

Keeping the token in the environment avoids exposing it in the process list:
``WORKFLOW_TRIGGER_ACCESS_TOKEN``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOST = "api.github.com"
DEFAULT_MAX_RETRIES = 1
DEFAULT_RETRY_DELAY = 5.0
DEFAULT_TIMEOUT = 30.0


class TriggerConfig(BaseSettings):
    """Everything needed to dispatch one event type to one repository.

    Environment variables:
    - WORKFLOW_TRIGGER_HOST           (optional)
    - WORKFLOW_TRIGGER_OWNER
    - WORKFLOW_TRIGGER_REPOSITORY
    - WORKFLOW_TRIGGER_ACCESS_TOKEN
    - WORKFLOW_TRIGGER_EVENT_TYPE
    - WORKFLOW_TRIGGER_MAX_RETRIES    (optional)
    - WORKFLOW_TRIGGER_RETRY_DELAY    (optional, seconds)
    - WORKFLOW_TRIGGER_TIMEOUT        (optional, seconds)
    - WORKFLOW_TRIGGER_LOG_LEVEL      (optional)

    Notes:
        Empty required strings are accepted here; the CLI rejects them before
        any request is made. Out-of-range retry settings are normalized by
        :func:`workflow_trigger.client.configure` rather than rejected.
    """

    host: str = Field(
        default=DEFAULT_HOST,
        description="API host, e.g. a GitHub Enterprise hostname",
    )
    owner: str = Field(default="", description="Repository owner")
    repository: str = Field(default="", description="Repository name")
    access_token: str = Field(
        default="",
        repr=False,
        description="Personal access token used for the Authorization header",
    )
    event_type: str = Field(default="", description="Custom webhook event name")

    max_retries: int = Field(
        default=DEFAULT_MAX_RETRIES,
        description="Maximum number of send attempts (values below 1 mean 1)",
    )
    retry_delay: float = Field(
        default=DEFAULT_RETRY_DELAY,
        description="Seconds to wait between attempts (non-positive means the default)",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT,
        description="Per-attempt HTTP timeout in seconds (0 disables)",
    )

    log_level: str = Field(default="INFO", description="Root logging level")

    model_config = SettingsConfigDict(
        env_prefix="WORKFLOW_TRIGGER_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    @property
    def repository_slug(self) -> str:
        """Return ``owner/repository``."""

        return f"{self.owner}/{self.repository}"
