"""
Unit tests for domain ports, exceptions and call lifecycle.

Tests verify:
- Error taxonomy hierarchy
- Call state machine transitions
- CallOutcome exactly-one invariant
- Domain purity (zero framework imports)
"""

import subprocess
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path

import pytest

import users_client.domain
from users_client.domain.calls import CallOutcome, CallState, UserCall
from users_client.domain.exceptions import (
    ClientError,
    ConfigurationError,
    DecodeError,
    IllegalCallTransition,
    ServerError,
    TransportError,
    UsersClientError,
)
from users_client.domain.models import CreatedUser, CreateUserRequest
from users_client.domain.ports import HttpResponse

DOMAIN_DIR = Path(users_client.domain.__file__).parent


def make_user() -> CreatedUser:
    return CreatedUser(
        id=1,
        name="John Doe",
        email="john.doe@example.com",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


def make_call() -> UserCall:
    return UserCall(request=CreateUserRequest(name="John Doe", email="john.doe@example.com"))


class TestErrorTaxonomy:
    """Tests for exception hierarchy."""

    @pytest.mark.parametrize("error_cls", [TransportError, DecodeError])
    def test_call_failures_are_client_errors(self, error_cls: type) -> None:
        """Transport and decode failures are ClientErrors."""
        assert issubclass(error_cls, ClientError)

    def test_server_error_is_client_error(self) -> None:
        """ServerError is a ClientError carrying the status code."""
        error = ServerError(500, b"boom")
        assert isinstance(error, ClientError)
        assert error.status_code == 500
        assert error.body == b"boom"
        assert "500" in str(error)

    def test_configuration_error_is_not_client_error(self) -> None:
        """A missing base URL is fatal, never reported as a ClientError."""
        assert issubclass(ConfigurationError, UsersClientError)
        assert not issubclass(ConfigurationError, ClientError)

    def test_illegal_transition_is_runtime_error(self) -> None:
        """State machine misuse is a programming error."""
        assert issubclass(IllegalCallTransition, RuntimeError)


class TestHttpResponse:
    """Tests for HttpResponse descriptor."""

    @pytest.mark.parametrize("status", [200, 201, 204, 299])
    def test_2xx_is_success(self, status: int) -> None:
        assert HttpResponse(status_code=status).is_success

    @pytest.mark.parametrize("status", [199, 301, 404, 500])
    def test_other_statuses_are_not_success(self, status: int) -> None:
        assert not HttpResponse(status_code=status).is_success


class TestCallStateEnum:
    """Tests for CallState enum."""

    def test_call_state_is_str_enum(self) -> None:
        """CallState is a string Enum."""
        assert issubclass(CallState, Enum)
        assert issubclass(CallState, str)
        assert CallState.IN_FLIGHT == "IN_FLIGHT"

    def test_terminal_states(self) -> None:
        """Only SUCCEEDED and FAILED are terminal."""
        assert {s for s in CallState if s.is_terminal} == {CallState.SUCCEEDED, CallState.FAILED}


class TestUserCallTransitions:
    """Tests for forward-only call transitions."""

    def test_new_call_is_created(self) -> None:
        call = make_call()
        assert call.state == CallState.CREATED
        assert call.outcome is None

    def test_success_path(self) -> None:
        """CREATED -> IN_FLIGHT -> SUCCEEDED records a success outcome."""
        call = make_call()
        call.start()
        assert call.state == CallState.IN_FLIGHT

        outcome = call.succeed(make_user())

        assert call.state == CallState.SUCCEEDED
        assert call.outcome is outcome
        assert outcome.succeeded

    def test_failure_path(self) -> None:
        """CREATED -> IN_FLIGHT -> FAILED records a failure outcome."""
        call = make_call()
        call.start()
        error = TransportError("down")

        outcome = call.fail(error)

        assert call.state == CallState.FAILED
        assert outcome.error is error

    def test_cannot_finish_without_starting(self) -> None:
        """Skipping IN_FLIGHT is rejected."""
        call = make_call()
        with pytest.raises(IllegalCallTransition):
            call.succeed(make_user())

    def test_cannot_restart(self) -> None:
        """Re-entering IN_FLIGHT is rejected."""
        call = make_call()
        call.start()
        with pytest.raises(IllegalCallTransition):
            call.start()

    @pytest.mark.parametrize("first", ["succeed", "fail"])
    def test_terminal_states_are_final(self, first: str) -> None:
        """No transition leaves a terminal state; the outcome is kept."""
        call = make_call()
        call.start()
        if first == "succeed":
            original = call.succeed(make_user())
        else:
            original = call.fail(DecodeError("bad"))

        with pytest.raises(IllegalCallTransition):
            call.fail(TransportError("late"))
        with pytest.raises(IllegalCallTransition):
            call.succeed(make_user())
        assert call.outcome is original


class TestCallOutcome:
    """Tests for CallOutcome invariant and helpers."""

    def test_requires_exactly_one_of_user_or_error(self) -> None:
        with pytest.raises(ValueError):
            CallOutcome()
        with pytest.raises(ValueError):
            CallOutcome(user=make_user(), error=DecodeError("bad"))

    def test_unwrap_success(self) -> None:
        user = make_user()
        assert CallOutcome.success(user).unwrap() is user

    def test_unwrap_failure_raises_stored_error(self) -> None:
        error = ServerError(503)
        with pytest.raises(ServerError) as exc_info:
            CallOutcome.failure(error).unwrap()
        assert exc_info.value is error


class TestDomainPurity:
    """Tests for domain purity - zero framework imports."""

    @pytest.mark.parametrize(
        "pattern",
        ["import httpx", "from httpx", "import pydantic", "from pydantic", "from fastapi", "import fastapi"],
    )
    def test_no_framework_imports_in_domain(self, pattern: str) -> None:
        """Domain layer imports no HTTP, validation or web framework."""
        result = subprocess.run(
            ["grep", "-r", pattern, str(DOMAIN_DIR)],
            capture_output=True,
            text=True,
        )
        assert result.returncode != 0, f"Framework import found: {result.stdout}"
