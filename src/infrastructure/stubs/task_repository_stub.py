"""Task repository stub.

In-memory stub implementation for task storage. Listings are ordered by
creation time, newest first, like the production query.
"""

from __future__ import annotations

import asyncio
import logging
from uuid import UUID

from src.application.ports.task_repository import TaskRepositoryProtocol
from src.domain.models.task import Task, TaskStatus

logger = logging.getLogger(__name__)


class TaskRepositoryStub(TaskRepositoryProtocol):
    """In-memory stub implementation of the task repository.

    Attributes:
        _tasks: Map of task_id to Task.
        _lock: Async lock for concurrent access.
    """

    def __init__(self) -> None:
        """Initialize the repository stub."""
        self._tasks: dict[UUID, Task] = {}
        self._lock = asyncio.Lock()

    def _newest_first(self, tasks: list[Task]) -> list[Task]:
        return sorted(tasks, key=lambda t: t.created_at, reverse=True)

    async def find_by_id(self, task_id: UUID) -> Task | None:
        async with self._lock:
            return self._tasks.get(task_id)

    async def save(self, task: Task) -> Task:
        async with self._lock:
            self._tasks[task.id] = task
            logger.debug("Saved task %s: status=%s", task.id, task.status.value)
            return task

    async def delete(self, task_id: UUID) -> None:
        async with self._lock:
            if self._tasks.pop(task_id, None) is not None:
                logger.debug("Deleted task %s", task_id)

    async def find_all(self) -> list[Task]:
        async with self._lock:
            return self._newest_first(list(self._tasks.values()))

    async def find_by_status(self, status: TaskStatus) -> list[Task]:
        async with self._lock:
            return self._newest_first(
                [t for t in self._tasks.values() if t.status == status]
            )

    async def find_by_assignee(self, assignee_id: UUID) -> list[Task]:
        async with self._lock:
            return self._newest_first(
                [t for t in self._tasks.values() if t.assignee_id == assignee_id]
            )

    # Test helper methods

    def clear(self) -> None:
        """Clear all tasks (for testing)."""
        self._tasks.clear()

    def count(self) -> int:
        """Get the number of stored tasks (for testing)."""
        return len(self._tasks)
