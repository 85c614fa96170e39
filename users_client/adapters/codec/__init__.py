"""Codec adapters - Wire format implementations."""

from .pydantic_json import CreatedUserPayload, JsonUserCodec

__all__ = ["CreatedUserPayload", "JsonUserCodec"]
