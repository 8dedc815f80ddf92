"""Task repository port.

The mutation core only uses find_by_id, save and delete. The query
methods serve read-only listings.
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.domain.models.task import Task, TaskStatus


class TaskRepositoryProtocol(Protocol):
    """Protocol for task storage operations.

    Writes are last-write-wins; concurrent conflicting writes are not
    detected at this boundary.
    """

    async def find_by_id(self, task_id: UUID) -> Task | None:
        """Retrieve a task by id, None if unknown."""
        ...

    async def save(self, task: Task) -> Task:
        """Insert or replace a task.

        Returns:
            The stored task.
        """
        ...

    async def delete(self, task_id: UUID) -> None:
        """Remove a task. Unknown ids are ignored."""
        ...

    async def find_all(self) -> list[Task]:
        """Retrieve every task, newest first."""
        ...

    async def find_by_status(self, status: TaskStatus) -> list[Task]:
        """Retrieve tasks in a board column, newest first."""
        ...

    async def find_by_assignee(self, assignee_id: UUID) -> list[Task]:
        """Retrieve tasks assigned to a user, newest first."""
        ...
