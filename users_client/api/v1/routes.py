"""
API v1 routes.

Defines the REST endpoints of the stub users API.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from users_client.api.dependencies import get_user_store
from users_client.api.models import CreateUserBody, ErrorResponse, UserResource
from users_client.api.store import InMemoryUserStore

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=UserResource,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"description": "Validation error"}},
    summary="Create a user",
    description="Create a user and return it with its server-assigned id and creation time.",
)
async def create_user(
    body: CreateUserBody,
    store: InMemoryUserStore = Depends(get_user_store),
) -> UserResource:
    """
    Create a user.

    - **name**: Non-empty display name
    - **email**: Valid email address
    """
    return store.create(body.name, body.email)


@router.get(
    "/users/{user_id}",
    response_model=UserResource,
    response_model_by_alias=True,
    responses={404: {"model": ErrorResponse, "description": "User not found"}},
    summary="Fetch a created user",
)
async def get_user(
    user_id: int,
    store: InMemoryUserStore = Depends(get_user_store),
) -> UserResource:
    """Return a previously created user."""
    user = store.get(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
