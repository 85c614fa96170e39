"""
Domain layer - Pure client logic with zero framework imports.

This package contains the request/response models, the error taxonomy,
the call state machine and the UsersClient service. It defines its own
port interfaces for wire encoding and transport, so codecs and HTTP
libraries stay in the adapters.
"""

from .calls import CallOutcome, CallState, UserCall
from .config import ClientConfig
from .exceptions import (
    ClientError,
    ConfigurationError,
    DecodeError,
    IllegalCallTransition,
    InvalidUserRequest,
    ServerError,
    TransportError,
    UsersClientError,
)
from .models import CreatedUser, CreateUserRequest
from .ports import HttpRequest, HttpResponse, HttpTransport, UserCodec
from .users import USERS_PATH, UsersClient, build_create_user_request

__all__ = [
    "USERS_PATH",
    "CallOutcome",
    "CallState",
    "ClientConfig",
    "ClientError",
    "ConfigurationError",
    "CreateUserRequest",
    "CreatedUser",
    "DecodeError",
    "HttpRequest",
    "HttpResponse",
    "HttpTransport",
    "IllegalCallTransition",
    "InvalidUserRequest",
    "ServerError",
    "TransportError",
    "UserCall",
    "UserCodec",
    "UsersClient",
    "UsersClientError",
    "build_create_user_request",
]
