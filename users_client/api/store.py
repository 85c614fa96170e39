"""
In-memory user store for the stub server.

Assigns ids from a counter guarded by a lock, so concurrent POSTs
never receive the same id.
"""

import itertools
import logging
import threading
from datetime import datetime, timezone

from users_client.api.models import UserResource

logger = logging.getLogger(__name__)


class InMemoryUserStore:
    """Process-local user storage; ids start at 1."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._users: dict[int, UserResource] = {}

    def create(self, name: str, email: str) -> UserResource:
        """Persist a new user and return it with its assigned id."""
        with self._lock:
            user = UserResource(
                id=next(self._ids),
                name=name,
                email=email,
                created_at=datetime.now(timezone.utc),
            )
            self._users[user.id] = user
        logger.info("[USERS] Created id=%s email=%s", user.id, user.email)
        return user

    def get(self, user_id: int) -> UserResource | None:
        return self._users.get(user_id)

    def __len__(self) -> int:
        return len(self._users)
