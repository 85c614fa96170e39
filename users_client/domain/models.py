"""
Domain models - Request and response values for user creation.

Both models are immutable. CreateUserRequest validates itself on
construction; CreatedUser is only ever produced by a UserCodec from a
successful reply.
"""

from dataclasses import dataclass
from datetime import datetime

from .exceptions import InvalidUserRequest


@dataclass(frozen=True)
class CreateUserRequest:
    """User data sent to the API."""

    name: str
    email: str

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidUserRequest("name must not be empty")
        if "@" not in self.email:
            raise InvalidUserRequest(f"email must contain '@': {self.email!r}")


@dataclass(frozen=True)
class CreatedUser:
    """
    User resource as returned by the API.

    id is server-assigned and unique per created resource.
    created_at carries the wire field createdAt.
    """

    id: int
    name: str
    email: str
    created_at: datetime
