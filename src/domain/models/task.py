"""Task domain model.

Tasks move across a three-column board: TODO -> IN_PROGRESS -> DONE.
Mutations produce new instances; the rules deciding which mutations
are legal live in src.domain.services.task_state_machine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from uuid import UUID

TITLE_MAX_LENGTH = 255


class TaskStatus(str, Enum):
    """Board column of a task."""

    TODO = "TODO"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"

    @property
    def label(self) -> str:
        """Human-readable label used in notification messages."""
        return _STATUS_LABELS[self]


_STATUS_LABELS: dict[TaskStatus, str] = {
    TaskStatus.TODO: "To do",
    TaskStatus.IN_PROGRESS: "In progress",
    TaskStatus.DONE: "Done",
}


@dataclass(frozen=True, eq=True)
class Task:
    """A unit of work created by an admin.

    Attributes:
        id: Task identifier.
        title: Short title (1-255 characters).
        description: Non-empty description.
        status: Current board column.
        creator_id: Admin who created the task (immutable).
        assignee_id: Current assignee, None when unassigned.
        deadline: Optional due date (UTC).
        created_at: Creation time (UTC).
        updated_at: Last mutation time (UTC).
    """

    id: UUID
    title: str
    description: str
    creator_id: UUID
    created_at: datetime
    updated_at: datetime
    status: TaskStatus = field(default=TaskStatus.TODO)
    assignee_id: UUID | None = field(default=None)
    deadline: datetime | None = field(default=None)

    def is_assigned_to(self, user_id: UUID) -> bool:
        return self.assignee_id is not None and self.assignee_id == user_id

    def is_overdue(self, now: datetime) -> bool:
        """Check whether the deadline has passed on an unfinished task.

        Args:
            now: Current time from the time authority.

        Returns:
            True if a deadline is set, lies before `now`, and the task
            is not DONE.
        """
        if self.deadline is None:
            return False
        return self.deadline < now and self.status != TaskStatus.DONE
