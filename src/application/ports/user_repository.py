"""User lookup and repository ports.

Users are owned by identity sync. The use-cases only need lookups;
user management additionally needs `save`.

Developer Golden Rules:
1. Protocol-based DI - all implementations through ports
2. Reads return None for unknown ids, the service raises NotFoundError
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.user import User, UserRole


class UserLookupProtocol(Protocol):
    """Read-only user lookups consumed by the use-cases."""

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Retrieve a user by id.

        Args:
            user_id: The user to look up.

        Returns:
            The user if found, None otherwise.
        """
        ...

    async def find_all_active_by_role(self, role: UserRole) -> list[User]:
        """Retrieve every active user holding a role.

        Args:
            role: The role to filter on.

        Returns:
            Active users with that role, possibly empty.
        """
        ...

    async def exists(self, user_id: UUID) -> bool:
        """Check whether a user exists."""
        ...


class UserRepositoryProtocol(UserLookupProtocol, Protocol):
    """User lookups plus persistence for user management."""

    async def find_all(self) -> list[User]:
        """Retrieve every user, active or not."""
        ...

    async def save(self, user: User) -> User:
        """Insert or replace a user.

        Returns:
            The stored user.
        """
        ...
