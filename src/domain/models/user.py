"""User domain model.

Users are created and updated by identity sync; they are never hard
deleted. The `active` flag is the soft-delete marker, and the role only
changes through an explicit promotion.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum
from uuid import UUID


class UserRole(str, Enum):
    """The two user roles.

    Roles:
        ADMIN: Owns the task lifecycle and sees every scrum note.
        INTERN: Works assigned tasks and writes daily scrum notes.
    """

    ADMIN = "ADMIN"
    INTERN = "INTERN"


def _utc_now() -> datetime:
    """Return current UTC time with timezone info."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=True)
class User:
    """A tracker user.

    Attributes:
        id: Identity provider subject id.
        email: Normalized email address.
        name: Display name, used as actor name in notifications.
        role: ADMIN or INTERN.
        active: False once the user has been deactivated.
        created_at: When the user was first synced (UTC).
        updated_at: Last modification time (UTC).
    """

    id: UUID
    email: str
    name: str
    role: UserRole
    active: bool = field(default=True)
    created_at: datetime = field(default_factory=_utc_now)
    updated_at: datetime = field(default_factory=_utc_now)

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    @property
    def is_intern(self) -> bool:
        return self.role == UserRole.INTERN

    def with_active(self, active: bool, updated_at: datetime) -> User:
        """Return a copy with the soft-delete flag set."""
        return replace(self, active=active, updated_at=updated_at)

    def promoted(self, updated_at: datetime) -> User:
        """Return a copy of this user with the ADMIN role."""
        return replace(self, role=UserRole.ADMIN, updated_at=updated_at)
