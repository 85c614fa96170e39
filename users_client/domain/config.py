"""
Client configuration - Immutable connection settings.

A ClientConfig is built once at process start and shared read-only by
every call, so concurrent calls never need to synchronize on it.
"""

from dataclasses import dataclass
from urllib.parse import urlsplit

from .exceptions import ConfigurationError


@dataclass(frozen=True)
class ClientConfig:
    """
    Base endpoint and call limits.

    base_url is normalized to carry no trailing slash so that request
    paths ("/users") can be appended directly.
    """

    base_url: str
    timeout_seconds: float = 10.0
    log_http: bool = False

    def __post_init__(self) -> None:
        parts = urlsplit(self.base_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(f"base_url must be an absolute http(s) URL: {self.base_url!r}")
        if self.timeout_seconds <= 0:
            raise ConfigurationError("timeout_seconds must be positive")
        # frozen: bypass __setattr__ to store the normalized form
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def url_for(self, path: str) -> str:
        """Join a request path onto the base URL."""
        return f"{self.base_url}/{path.lstrip('/')}"
