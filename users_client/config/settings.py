"""
Application settings - pydantic-settings configuration.

This module defines client configuration using pydantic-settings
for environment variable loading with validation and defaults,
and turns it into the immutable ClientConfig used by the domain.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from users_client.domain.config import ClientConfig
from users_client.domain.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Client settings with environment variable support (USERS_CLIENT_*)."""

    model_config = SettingsConfigDict(
        env_prefix="USERS_CLIENT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Remote API
    base_url: str | None = None  # e.g. https://jsonplaceholder.typicode.com
    timeout_seconds: float = 10.0  # Upper bound for one round trip

    # Diagnostics
    log_http: bool = False  # Log each request/response line at DEBUG
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def load_client_config(settings: Settings) -> ClientConfig:
    """
    Build the immutable client configuration from settings.

    Raises:
        ConfigurationError: base_url is unset or malformed, or the
            timeout is not positive
    """
    if not settings.base_url:
        raise ConfigurationError("USERS_CLIENT_BASE_URL is not set")
    return ClientConfig(
        base_url=settings.base_url,
        timeout_seconds=settings.timeout_seconds,
        log_http=settings.log_http,
    )
