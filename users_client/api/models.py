"""
API request and response models.

Pydantic models for the stub users endpoint. The response mirrors the
wire shape the client decodes, including the camelCase createdAt field.
"""

from datetime import datetime

from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_serializer


class CreateUserBody(BaseModel):
    """Request model for user creation."""

    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)] = Field(
        ..., description="Display name"
    )
    email: EmailStr


class UserResource(BaseModel):
    """Response model for a created user."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str
    email: str
    created_at: datetime = Field(alias="createdAt")

    @field_serializer("created_at")
    def _serialize_created_at(self, value: datetime) -> str:
        # ISO-8601 UTC with a Z suffix
        return value.strftime("%Y-%m-%dT%H:%M:%SZ")


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
