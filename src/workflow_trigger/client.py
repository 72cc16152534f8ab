"""Repository dispatch client.

This intentionally stays small: build one request, send it through the retrying
transport, classify the response.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from urllib.parse import quote

import requests

from workflow_trigger import __version__
from workflow_trigger.config import DEFAULT_RETRY_DELAY, TriggerConfig
from workflow_trigger.context import CancelToken
from workflow_trigger.errors import RequestBuildError, SerializationError
from workflow_trigger.response import classify_response
from workflow_trigger.transport import RequestsSender, RetryingTransport, Sender

logger = logging.getLogger(__name__)


def dispatch_url(*, host: str, owner: str, repository: str) -> str:
    """Return the repository dispatch endpoint for ``owner/repository`` on ``host``."""

    path = f"/repos/{quote(owner, safe='')}/{quote(repository, safe='')}/dispatches"
    return f"https://{host.strip().rstrip('/')}{path}"


@dataclass(frozen=True, slots=True)
class WorkflowClient:
    """Triggers one event type on one repository.

    Instances hold no per-call state and can be reused, including from several
    threads at once.
    """

    url: str
    access_token: str = field(repr=False)
    event_type: str
    transport: RetryingTransport

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/vnd.github.v3+json",
            "Content-Type": "application/json",
            "Authorization": f"token {self.access_token}",
            "User-Agent": f"workflow-trigger/{__version__}",
        }

    def build_request(self) -> requests.PreparedRequest:
        """Build the dispatch POST.

        Raises:
            SerializationError: If the payload cannot be encoded.
            RequestBuildError: If ``requests`` rejects the URL or headers.
        """

        try:
            body = json.dumps({"event_type": self.event_type}).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"failed to marshal request body: {e}") from e

        try:
            return requests.Request("POST", self.url, headers=self._headers(), data=body).prepare()
        except (requests.RequestException, ValueError) as e:
            raise RequestBuildError(f"failed to create new request: {e}") from e

    def trigger(self) -> None:
        """Trigger the workflow and wait for the outcome without a way to cancel."""

        self.trigger_context(CancelToken())

    def trigger_context(self, token: CancelToken) -> None:
        """Trigger the workflow, giving up as soon as ``token`` fires.

        Returns None once the platform accepted the dispatch.

        Raises:
            TriggerError: A subclass describing which phase failed.
        """

        request = self.build_request()
        response = self.transport.send(request, token)
        classify_response(response)
        logger.debug("Dispatch accepted", extra={"url": self.url, "event_type": self.event_type})


def configure(config: TriggerConfig, *, sender: Sender | None = None) -> WorkflowClient:
    """Create a :class:`WorkflowClient` from ``config``.

    ``max_retries`` below 1 becomes 1 and a non-positive ``retry_delay`` becomes
    the default delay. No network activity happens here.
    """

    max_retries = max(config.max_retries, 1)
    retry_delay = config.retry_delay if config.retry_delay > 0 else DEFAULT_RETRY_DELAY
    timeout = config.timeout if config.timeout > 0 else None

    transport = RetryingTransport(
        sender or RequestsSender(),
        max_retries=max_retries,
        retry_delay=retry_delay,
        timeout=timeout,
    )
    return WorkflowClient(
        url=dispatch_url(host=config.host, owner=config.owner, repository=config.repository),
        access_token=config.access_token,
        event_type=config.event_type,
        transport=transport,
    )
