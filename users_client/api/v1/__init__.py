"""
API v1 package.

Contains versioned API routes for the stub users API.
"""

from users_client.api.v1.routes import router

__all__ = ["router"]
