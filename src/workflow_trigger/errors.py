"""Exceptions raised while triggering a repository dispatch event.

Every failure surfaces as a :class:`TriggerError` subclass so callers can catch
the whole family at once, or pick out a single phase.
"""

from __future__ import annotations


class TriggerError(Exception):
    """Base class for all trigger failures."""


class SerializationError(TriggerError):
    """The dispatch payload could not be encoded as JSON."""


class RequestBuildError(TriggerError):
    """The outbound HTTP request could not be constructed."""


class TransportError(TriggerError):
    """A network-level failure persisted through every attempt."""


class ServerError(TriggerError):
    """The platform answered with a 5xx status on the final attempt."""

    def __init__(self, status_code: int) -> None:
        super().__init__("server error")
        self.status_code = status_code


class APIError(TriggerError):
    """The platform rejected the dispatch with a 4xx status.

    ``str(exc)`` is the platform's ``message`` verbatim.
    """

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ResponseDecodeError(TriggerError):
    """A 4xx response body was not a JSON error envelope."""

    def __init__(self, message: str, *, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class Cancelled(TriggerError):
    """The caller cancelled the trigger call."""


class DeadlineExceeded(Cancelled):
    """The trigger call ran past its deadline."""
