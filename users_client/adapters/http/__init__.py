"""HTTP adapters - Network transport implementations."""

from .httpx_transport import HttpxTransport

__all__ = ["HttpxTransport"]
