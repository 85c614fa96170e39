"""Configuration - Settings loading and client wiring."""

from .factory import build_users_client
from .settings import Settings, get_settings, load_client_config

__all__ = ["Settings", "build_users_client", "get_settings", "load_client_config"]
