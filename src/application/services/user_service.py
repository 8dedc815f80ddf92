"""User management service.

Users come from identity sync; this service only flips the soft-delete
flag and promotes interns. Every mutation requires an ADMIN actor.
Deactivated users keep their tasks and notes but can no longer be
assigned work and stop receiving scrum note notifications.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from src.application.services.entity_loader import load_user
from src.domain.models.user import User, UserRole
from src.domain.services.authorization_policy import require_manage_users

if TYPE_CHECKING:
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.ports.user_repository import UserRepositoryProtocol

logger = get_logger(__name__)


class UserService:
    """Admin-only user management plus user listings."""

    def __init__(
        self,
        user_repo: UserRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._time = time_authority

    async def get_user(self, user_id: UUID) -> User:
        """Retrieve a user.

        Raises:
            NotFoundError: User does not exist.
        """
        return await load_user(self._user_repo, user_id)

    async def list_users(self, role: UserRole | None = None) -> list[User]:
        """List users, active or not, optionally filtered by role."""
        users = await self._user_repo.find_all()
        if role is None:
            return users
        return [u for u in users if u.role == role]

    async def activate_user(self, actor_id: UUID, user_id: UUID) -> User:
        """Reactivate a user.

        Raises:
            NotFoundError: Actor or user does not exist.
            UnauthorizedError: Actor is not an admin.
        """
        return await self._set_active(actor_id, user_id, active=True)

    async def deactivate_user(self, actor_id: UUID, user_id: UUID) -> User:
        """Soft-delete a user.

        Raises:
            NotFoundError: Actor or user does not exist.
            UnauthorizedError: Actor is not an admin.
        """
        return await self._set_active(actor_id, user_id, active=False)

    async def promote_to_admin(self, actor_id: UUID, user_id: UUID) -> User:
        """Give a user the ADMIN role. Promoting an admin changes nothing.

        Raises:
            NotFoundError: Actor or user does not exist.
            UnauthorizedError: Actor is not an admin.
        """
        actor = await load_user(self._user_repo, actor_id)
        require_manage_users(actor.id, actor.role)
        user = await load_user(self._user_repo, user_id)

        if user.is_admin:
            return user

        saved = await self._user_repo.save(user.promoted(self._time.utcnow()))
        logger.info(
            "user_promoted", actor_id=str(actor.id), user_id=str(saved.id)
        )
        return saved

    async def _set_active(self, actor_id: UUID, user_id: UUID, active: bool) -> User:
        actor = await load_user(self._user_repo, actor_id)
        require_manage_users(actor.id, actor.role)
        user = await load_user(self._user_repo, user_id)

        if user.active == active:
            return user

        saved = await self._user_repo.save(
            user.with_active(active, self._time.utcnow())
        )
        logger.info(
            "user_activation_changed",
            actor_id=str(actor.id),
            user_id=str(saved.id),
            active=active,
        )
        return saved
