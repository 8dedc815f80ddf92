"""Lookup failure errors.

Raised during the load phase of a use-case when a required entity
does not exist. The operation aborts before any mutation.
"""

from __future__ import annotations

from uuid import UUID

from src.domain.exceptions import TrackerError


class NotFoundError(TrackerError):
    """Raised when a required entity cannot be found.

    Attributes:
        kind: Entity kind ("Task", "ScrumNote", "User", "Notification").
        entity_id: The identifier that was looked up.
    """

    def __init__(self, kind: str, entity_id: UUID) -> None:
        """Initialize the error.

        Args:
            kind: Entity kind that was looked up.
            entity_id: The identifier that was not found.
        """
        self.kind = kind
        self.entity_id = entity_id
        super().__init__(f"{kind} {entity_id} not found")
