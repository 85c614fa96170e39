"""
Client factory - Wires configuration, transport and codec together.

The counterpart of FastAPI dependency wiring for callers that are not
web handlers: one call builds a ready-to-use UsersClient.
"""

import httpx

from users_client.adapters.codec import JsonUserCodec
from users_client.adapters.http import HttpxTransport
from users_client.domain.users import UsersClient

from .settings import Settings, get_settings, load_client_config


def build_users_client(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> UsersClient:
    """
    Create a UsersClient from settings.

    Args:
        settings: Settings to use; defaults to the cached environment settings
        http_client: Optional pre-built httpx client (tests, custom transports)

    Raises:
        ConfigurationError: base_url missing or invalid
    """
    config = load_client_config(settings or get_settings())
    return UsersClient(
        config=config,
        transport=HttpxTransport(config, client=http_client),
        codec=JsonUserCodec(),
    )
