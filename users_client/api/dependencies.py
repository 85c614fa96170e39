"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the
user store into routes.
"""

from fastapi import Request

from users_client.api.store import InMemoryUserStore


def get_user_store(request: Request) -> InMemoryUserStore:
    """
    Get user store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.user_store
