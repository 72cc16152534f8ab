from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TriggerState(str, Enum):
    BUILT = "built"
    SENDING = "sending"
    RETRYING = "retrying"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


ALLOWED_TRANSITIONS: dict[TriggerState, set[TriggerState]] = {
    TriggerState.BUILT: {TriggerState.SENDING, TriggerState.FAILED},
    TriggerState.SENDING: {
        TriggerState.SUCCEEDED,
        TriggerState.RETRYING,
        TriggerState.FAILED,
    },
    TriggerState.RETRYING: {TriggerState.SENDING, TriggerState.FAILED},
    TriggerState.SUCCEEDED: set(),
    TriggerState.FAILED: set(),
}


class IllegalTransitionError(ValueError):
    pass


@dataclass(slots=True)
class RetryState:
    """Attempt bookkeeping for a single trigger call.

    One instance is created per call and never shared, so concurrent calls on
    the same client cannot see each other's counters.
    """

    max_attempts: int
    attempts: int = 0
    state: TriggerState = TriggerState.BUILT

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.max_attempts

    @property
    def terminal(self) -> bool:
        return not ALLOWED_TRANSITIONS[self.state]

    def transition(self, to: TriggerState) -> None:
        allowed = ALLOWED_TRANSITIONS.get(self.state, set())
        if to not in allowed:
            raise IllegalTransitionError(f"Illegal transition: {self.state.value} -> {to.value}")
        self.state = to

    def begin_attempt(self) -> int:
        self.transition(TriggerState.SENDING)
        self.attempts += 1
        return self.attempts
