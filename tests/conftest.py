"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Client configuration
- A UsersClient factory around fake transports (tests/helpers/transports.py)
"""

import pytest

from users_client.adapters.codec import JsonUserCodec
from users_client.domain.config import ClientConfig
from users_client.domain.users import UsersClient

BASE_URL = "https://api.example.com"


@pytest.fixture
def config() -> ClientConfig:
    """Client configuration with a short timeout for tests."""
    return ClientConfig(base_url=BASE_URL, timeout_seconds=1.0)


@pytest.fixture
def make_client(config: ClientConfig):
    """Factory building a UsersClient around a given transport."""

    def _make(transport, client_config: ClientConfig | None = config) -> UsersClient:
        return UsersClient(config=client_config, transport=transport, codec=JsonUserCodec())

    return _make
