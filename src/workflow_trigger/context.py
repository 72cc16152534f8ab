"""Cooperative cancellation for trigger calls.

A :class:`CancelToken` is passed through every point where a trigger call can
block (the HTTP send and the retry sleep). Cancelling it, or letting its
deadline pass, makes those points give up with a :class:`Cancelled` error.
"""

from __future__ import annotations

import threading
import time

from workflow_trigger.errors import Cancelled, DeadlineExceeded


class CancelToken:
    """A cancellation signal with an optional monotonic deadline.

    Tokens are safe to cancel from another thread. A token that nobody holds a
    reference to can never be cancelled, which is how a plain ``trigger()`` call
    behaves.
    """

    def __init__(self, *, deadline: float | None = None) -> None:
        self._deadline = deadline
        self._event = threading.Event()

    @classmethod
    def with_timeout(cls, seconds: float) -> CancelToken:
        """Return a token that expires ``seconds`` from now."""

        return cls(deadline=time.monotonic() + seconds)

    @property
    def deadline(self) -> float | None:
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self.error() is not None

    def cancel(self) -> None:
        self._event.set()

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or None when there is no deadline."""

        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def error(self) -> Cancelled | None:
        if self._event.is_set():
            return Cancelled("context canceled")
        if self._deadline is not None and time.monotonic() >= self._deadline:
            return DeadlineExceeded("context deadline exceeded")
        return None

    def raise_if_done(self) -> None:
        err = self.error()
        if err is not None:
            raise err

    def sleep(self, seconds: float) -> None:
        """Block for ``seconds`` unless the token fires first.

        Raises:
            Cancelled: If the token was cancelled or its deadline passed before
                the full delay elapsed.
        """

        self.raise_if_done()
        remaining = self.remaining()
        wait_for = seconds if remaining is None else min(seconds, remaining)
        if self._event.wait(wait_for):
            self.raise_if_done()
        # The wait was cut short at the deadline.
        if wait_for < seconds:
            raise DeadlineExceeded("context deadline exceeded")
