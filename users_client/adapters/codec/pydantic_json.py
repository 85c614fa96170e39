"""
JSON codec adapter - Implements UserCodec protocol with pydantic.

This module provides the JSON wire format for the users endpoint.
Requests are serialized straight from the domain dataclass; replies are
validated against a strict pydantic schema before being turned into
domain objects, so a partially valid reply never yields a CreatedUser.

Reply schema (strict):
- id: JSON integer (booleans and numeric strings rejected)
- name, email: JSON strings
- createdAt: ISO-8601 timestamp string with a UTC offset or Z
  (epoch numbers, numeric strings and naive times rejected)
Unknown fields are ignored.
"""

import logging
import re

from pydantic import (
    AwareDatetime,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from users_client.domain.exceptions import DecodeError
from users_client.domain.models import CreatedUser, CreateUserRequest

logger = logging.getLogger(__name__)

_request_adapter = TypeAdapter(CreateUserRequest)

_ISO_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}[Tt ]\d{2}:\d{2}")


class CreatedUserPayload(BaseModel):
    """Wire shape of a successful create-user reply."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True, populate_by_name=True)

    id: int
    name: str
    email: str
    created_at: AwareDatetime = Field(alias="createdAt")

    @field_validator("created_at", mode="before")
    @classmethod
    def _require_iso_text(cls, value: object) -> object:
        # pydantic also parses epoch seconds from digit-only strings
        if isinstance(value, str) and not _ISO_DATETIME.match(value):
            raise ValueError("createdAt must be an ISO-8601 timestamp")
        return value

    def to_domain(self) -> CreatedUser:
        return CreatedUser(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
        )


class JsonUserCodec:
    """
    Implements UserCodec protocol for application/json.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    content_type = "application/json"

    def encode(self, request: CreateUserRequest) -> bytes:
        """Serialize a request model to UTF-8 JSON."""
        return _request_adapter.dump_json(request)

    def decode(self, payload: bytes) -> CreatedUser:
        """
        Validate and convert a reply body.

        Raises:
            DecodeError: Body is not a JSON object matching the reply schema
        """
        try:
            parsed = CreatedUserPayload.model_validate_json(payload)
        except ValidationError as err:
            fields = sorted({".".join(str(p) for p in e["loc"]) or "<root>" for e in err.errors()})
            logger.debug("Reply failed validation on: %s", ", ".join(fields))
            raise DecodeError(f"Malformed reply body ({err.error_count()} errors)") from err
        return parsed.to_domain()
