"""
FastAPI application factory and configuration.

This module creates the stub users API: an in-process stand-in for the
remote service the client talks to, for local development and
end-to-end tests. Point the client at it with
USERS_CLIENT_BASE_URL=http://localhost:8000/v1.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from users_client.api.store import InMemoryUserStore
from users_client.api.v1 import router as v1_router

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Stub Users API v1 - Create users with server-assigned ids",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Creates a fresh in-memory user store on startup.
    """
    logger.info("Starting stub users API...")
    app.state.user_store = InMemoryUserStore()
    logger.info("Application startup complete")

    yield

    logger.info("Shutting down stub users API (%s users created)", len(app.state.user_store))


def create_app() -> FastAPI:
    """Build a new application instance with its own store."""
    application = FastAPI(
        title="users-client stub API",
        description="Stand-in for the remote users service",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    application.include_router(v1_router, prefix="/v1")

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


app = create_app()
