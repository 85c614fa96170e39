"""
Call lifecycle - State machine and terminal outcome for one request.

Call State Machine (Forward-Only Transitions)
=============================================

States:
- CREATED: Call constructed, nothing sent yet
- IN_FLIGHT: Round trip dispatched, awaiting the reply
- SUCCEEDED: Terminal, reply decoded into a CreatedUser
- FAILED: Terminal, a ClientError was classified

Valid Transitions:
    CREATED -> IN_FLIGHT
    IN_FLIGHT -> SUCCEEDED
    IN_FLIGHT -> FAILED

Anything else (re-entering IN_FLIGHT, leaving a terminal state,
skipping IN_FLIGHT) raises IllegalCallTransition.
"""

from dataclasses import dataclass, field
from enum import Enum

from .exceptions import ClientError, IllegalCallTransition
from .models import CreatedUser, CreateUserRequest


class CallState(str, Enum):
    """Lifecycle states of a single create-user call."""

    CREATED = "CREATED"
    IN_FLIGHT = "IN_FLIGHT"
    SUCCEEDED = "SUCCEEDED"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self in (CallState.SUCCEEDED, CallState.FAILED)


_ALLOWED_TRANSITIONS = {
    CallState.CREATED: {CallState.IN_FLIGHT},
    CallState.IN_FLIGHT: {CallState.SUCCEEDED, CallState.FAILED},
    CallState.SUCCEEDED: set(),
    CallState.FAILED: set(),
}


@dataclass(frozen=True)
class CallOutcome:
    """
    Terminal notification of a call.

    Exactly one of user and error is set.
    """

    user: CreatedUser | None = None
    error: ClientError | None = None

    def __post_init__(self) -> None:
        if (self.user is None) == (self.error is None):
            raise ValueError("CallOutcome requires exactly one of user or error")

    @classmethod
    def success(cls, user: CreatedUser) -> "CallOutcome":
        return cls(user=user)

    @classmethod
    def failure(cls, error: ClientError) -> "CallOutcome":
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.user is not None

    def unwrap(self) -> CreatedUser:
        """
        Return the created user, or raise the classified error.

        For callers that prefer exceptions once the result is back
        on their side of the async boundary.
        """
        if self.error is not None:
            raise self.error
        return self.user  # type: ignore[return-value]


@dataclass
class UserCall:
    """
    One create-user invocation and its progress.

    The outcome is recorded once, on reaching a terminal state.
    """

    request: CreateUserRequest
    state: CallState = CallState.CREATED
    outcome: CallOutcome | None = field(default=None, init=False)

    def _transition(self, target: CallState) -> None:
        if target not in _ALLOWED_TRANSITIONS[self.state]:
            raise IllegalCallTransition(f"{self.state.value} -> {target.value}")
        self.state = target

    def start(self) -> None:
        """Mark the call as dispatched."""
        self._transition(CallState.IN_FLIGHT)

    def succeed(self, user: CreatedUser) -> CallOutcome:
        self._transition(CallState.SUCCEEDED)
        self.outcome = CallOutcome.success(user)
        return self.outcome

    def fail(self, error: ClientError) -> CallOutcome:
        self._transition(CallState.FAILED)
        self.outcome = CallOutcome.failure(error)
        return self.outcome
