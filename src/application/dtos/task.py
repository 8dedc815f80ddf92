"""Task use-case input records.

Plain, framework-free inputs handed to TaskService by presentation
callers. Optional fields left as None are "not supplied".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from src.domain.models.task import TaskStatus


@dataclass(frozen=True)
class CreateTaskInput:
    """Input for creating a task."""

    actor_id: UUID
    title: str
    description: str
    deadline: datetime | None = None


@dataclass(frozen=True)
class UpdateTaskInput:
    """Input for editing task details."""

    actor_id: UUID
    task_id: UUID
    title: str | None = None
    description: str | None = None
    deadline: datetime | None = None


@dataclass(frozen=True)
class UpdateTaskStatusInput:
    """Input for moving a task to another board column."""

    actor_id: UUID
    task_id: UUID
    new_status: TaskStatus


@dataclass(frozen=True)
class AssignTaskInput:
    """Input for assigning a task."""

    actor_id: UUID
    task_id: UUID
    assignee_id: UUID


@dataclass(frozen=True)
class DeleteTaskInput:
    """Input for deleting a task."""

    actor_id: UUID
    task_id: UUID
