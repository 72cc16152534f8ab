"""HTTP senders and the retrying transport decorator.

The retrying transport wraps whatever sender it is given, so tests can inject a
fake sender and the client never touches global transport state.
"""

from __future__ import annotations

import logging
from typing import Protocol

import requests

from workflow_trigger.context import CancelToken
from workflow_trigger.errors import Cancelled, TransportError
from workflow_trigger.state import RetryState, TriggerState

logger = logging.getLogger(__name__)

# urllib3 rejects a zero timeout.
_MIN_ATTEMPT_TIMEOUT = 0.001


class Sender(Protocol):
    """Performs one physical HTTP send."""

    def send(
        self, request: requests.PreparedRequest, *, timeout: float | None
    ) -> requests.Response: ...


class RequestsSender:
    """Sender backed by a :class:`requests.Session`."""

    def __init__(self, session: requests.Session | None = None) -> None:
        self._session = session or requests.Session()

    def send(
        self, request: requests.PreparedRequest, *, timeout: float | None
    ) -> requests.Response:
        return self._session.send(request, timeout=timeout, allow_redirects=False)

    def close(self) -> None:
        self._session.close()


class RetryingTransport:
    """Send a request up to ``max_retries`` times with a constant delay.

    Transport errors and 5xx responses are retried; any other response is
    returned immediately. The response from the last attempt is returned even if
    it is a 5xx, so the caller can classify it.
    """

    def __init__(
        self,
        sender: Sender,
        *,
        max_retries: int,
        retry_delay: float,
        timeout: float | None = None,
    ) -> None:
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        if retry_delay < 0:
            raise ValueError("retry_delay must not be negative")
        if timeout is not None and timeout <= 0:
            raise ValueError("timeout must be positive when set")

        self._sender = sender
        self._max_retries = max_retries
        self._retry_delay = retry_delay
        self._timeout = timeout

    @property
    def max_retries(self) -> int:
        return self._max_retries

    @property
    def retry_delay(self) -> float:
        return self._retry_delay

    @property
    def timeout(self) -> float | None:
        return self._timeout

    def _attempt_timeout(self, token: CancelToken) -> float | None:
        remaining = token.remaining()
        if remaining is None:
            return self._timeout
        if self._timeout is not None:
            remaining = min(self._timeout, remaining)
        return max(remaining, _MIN_ATTEMPT_TIMEOUT)

    def send(self, request: requests.PreparedRequest, token: CancelToken) -> requests.Response:
        """Execute ``request`` under the retry policy.

        Raises:
            Cancelled: If ``token`` fires before a terminal outcome.
            TransportError: If the last attempt failed at the network level.
        """

        retry = RetryState(max_attempts=self._max_retries)

        while True:
            err = token.error()
            if err is not None:
                retry.transition(TriggerState.FAILED)
                raise err

            attempt = retry.begin_attempt()
            logger.debug(
                "Sending dispatch request",
                extra={"url": request.url, "attempt": attempt, "max_attempts": retry.max_attempts},
            )

            try:
                response = self._sender.send(request, timeout=self._attempt_timeout(token))
            except requests.RequestException as e:
                done = token.error()
                if done is not None:
                    retry.transition(TriggerState.FAILED)
                    raise done from e
                if retry.exhausted:
                    retry.transition(TriggerState.FAILED)
                    raise TransportError(f"unexpected error triggering workflow: {e}") from e
                logger.debug(
                    "Transport error, will retry",
                    extra={"attempt": attempt, "error": str(e)},
                )
            else:
                status = response.status_code
                if status < 500:
                    retry.transition(
                        TriggerState.SUCCEEDED if status < 400 else TriggerState.FAILED
                    )
                    return response
                if retry.exhausted:
                    retry.transition(TriggerState.FAILED)
                    return response
                response.close()
                logger.debug(
                    "Server error, will retry",
                    extra={"attempt": attempt, "status_code": status},
                )

            retry.transition(TriggerState.RETRYING)
            try:
                token.sleep(self._retry_delay)
            except Cancelled:
                retry.transition(TriggerState.FAILED)
                raise
