"""Task lifecycle errors.

Constraints:
- DONE -> TODO is forbidden for every actor
- A completed task cannot be (re)assigned
- The assignee of a task must be an active user
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from src.domain.exceptions import TrackerError

if TYPE_CHECKING:
    from src.domain.models.task import TaskStatus


class InvalidTransitionError(TrackerError):
    """Raised when a requested status move is not permitted.

    Attributes:
        from_status: The task's current status.
        to_status: The requested status.
    """

    def __init__(self, from_status: TaskStatus, to_status: TaskStatus) -> None:
        self.from_status = from_status
        self.to_status = to_status
        super().__init__(
            f"Cannot move task from {from_status.value} to {to_status.value}"
        )


class NotAssignableError(TrackerError):
    """Raised when a task cannot be assigned.

    Attributes:
        reason: Why the assignment was rejected.
    """

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Task cannot be assigned: {reason}")
