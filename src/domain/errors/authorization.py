"""Authorization errors.

Every denial made by the authorization policy surfaces as an
UnauthorizedError. There is no silent denial path.
"""

from __future__ import annotations

from uuid import UUID

from src.domain.exceptions import TrackerError


class UnauthorizedError(TrackerError):
    """Raised when an actor is not permitted to perform an action.

    Attributes:
        actor_id: The user who attempted the action.
        action: Short name of the denied action (e.g. "delete task").
    """

    def __init__(self, actor_id: UUID, action: str) -> None:
        self.actor_id = actor_id
        self.action = action
        super().__init__(f"User {actor_id} is not allowed to {action}")
