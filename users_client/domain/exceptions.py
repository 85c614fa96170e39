"""
Domain exceptions - Semantic error types for the users client.

This module defines the error taxonomy reported by a create-user call,
plus the fatal and programming errors that sit outside of it.
Adapters translate library exceptions into these types.
"""


class UsersClientError(Exception):
    """Base class for all users client errors."""

    pass


class ClientError(UsersClientError):
    """Base class for reportable call failures (delivered as outcomes)."""

    pass


class TransportError(ClientError):
    """Network unreachable, connection refused, or timeout."""

    pass


class ServerError(ClientError):
    """Server replied with a non-2xx status."""

    def __init__(self, status_code: int, body: bytes = b"") -> None:
        super().__init__(f"Server responded with status {status_code}")
        self.status_code = status_code
        self.body = body


class DecodeError(ClientError):
    """Reply body is malformed or lacks a required field."""

    pass


class ConfigurationError(UsersClientError):
    """Base URL missing or invalid. Fatal, never reported as a ClientError."""

    pass


class InvalidUserRequest(UsersClientError, ValueError):
    """Request model failed caller-side validation."""

    pass


class IllegalCallTransition(UsersClientError, RuntimeError):
    """Attempted a backward or skipped call state transition."""

    pass
