"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, along with the plain request/response descriptors
exchanged across them. Adapters implement these protocols.
"""

from dataclasses import dataclass, field
from typing import Protocol

from .models import CreatedUser, CreateUserRequest


@dataclass(frozen=True)
class HttpRequest:
    """
    Transport-neutral description of one HTTP request.

    path is relative to the configured base URL.
    """

    method: str
    path: str
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class HttpResponse:
    """Transport-neutral HTTP reply."""

    status_code: int
    body: bytes = b""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class UserCodec(Protocol):
    """Port interface for wire serialization."""

    content_type: str

    def encode(self, request: CreateUserRequest) -> bytes:
        """
        Serialize a request model to a wire payload.

        Never fails for a constructed CreateUserRequest.
        """
        ...

    def decode(self, payload: bytes) -> CreatedUser:
        """
        Deserialize a successful reply body.

        Raises:
            DecodeError: Payload is not well-formed, or a required
                field (id, name, email, createdAt) is absent or of the
                wrong shape
        """
        ...


class HttpTransport(Protocol):
    """Port interface for performing one network round trip."""

    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send the request and return the reply, whatever its status.

        Raises:
            TransportError: Connection failure or timeout
            DecodeError: Reply body could not be read as sent
        """
        ...

    async def aclose(self) -> None:
        """Release network resources held by the transport."""
        ...
