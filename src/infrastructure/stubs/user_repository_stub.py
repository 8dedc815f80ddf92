"""User repository stub.

In-memory stub implementation for user storage. Users normally arrive
through identity sync; tests and local runs seed them with `add_user`.

Developer Golden Rules:
1. In-memory storage - no persistence across restarts
2. Reads return None for unknown ids, never raise
"""

from __future__ import annotations

import asyncio
import logging
from uuid import UUID

from src.application.ports.user_repository import UserRepositoryProtocol
from src.domain.models.user import User, UserRole

logger = logging.getLogger(__name__)


class UserRepositoryStub(UserRepositoryProtocol):
    """In-memory stub implementation of the user repository.

    Attributes:
        _users: Map of user_id to User.
        _lock: Async lock for concurrent access.
    """

    def __init__(self) -> None:
        """Initialize the repository stub."""
        self._users: dict[UUID, User] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, user_id: UUID) -> User | None:
        async with self._lock:
            return self._users.get(user_id)

    async def find_all_active_by_role(self, role: UserRole) -> list[User]:
        """Retrieve active users with a role, in insertion order."""
        async with self._lock:
            return [u for u in self._users.values() if u.active and u.role == role]

    async def exists(self, user_id: UUID) -> bool:
        async with self._lock:
            return user_id in self._users

    async def find_all(self) -> list[User]:
        async with self._lock:
            return list(self._users.values())

    async def save(self, user: User) -> User:
        async with self._lock:
            self._users[user.id] = user
            logger.debug(
                "Saved user %s: role=%s active=%s",
                user.id,
                user.role.value,
                user.active,
            )
            return user

    # Test helper methods

    def add_user(self, user: User) -> None:
        """Seed a user synchronously (for testing)."""
        self._users[user.id] = user

    def clear(self) -> None:
        """Clear all users (for testing)."""
        self._users.clear()

    def count(self) -> int:
        """Get the number of stored users (for testing)."""
        return len(self._users)
