"""Task state machine domain service.

Validates and applies every Task mutation: creation, status moves,
detail edits and assignment. Each entry point checks authorization
first, then the transition or field rules, and only then returns a new
Task with `updated_at` touched. Nothing here performs I/O, so a rejected
mutation leaves no trace.

Status moves:
    TODO -> IN_PROGRESS -> DONE, plus the corrective moves
    IN_PROGRESS -> TODO and DONE -> IN_PROGRESS, and TODO -> DONE.
    DONE -> TODO is forbidden for every actor, ADMIN included.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from uuid import UUID

from src.domain.errors.task import InvalidTransitionError, NotAssignableError
from src.domain.errors.validation import ValidationError
from src.domain.models.task import TITLE_MAX_LENGTH, Task, TaskStatus
from src.domain.models.user import User, UserRole
from src.domain.services.authorization_policy import (
    require_assign_task,
    require_change_task_status,
    require_create_task,
    require_modify_task_details,
)

FORBIDDEN_TRANSITIONS: frozenset[tuple[TaskStatus, TaskStatus]] = frozenset(
    {(TaskStatus.DONE, TaskStatus.TODO)}
)


def is_transition_allowed(from_status: TaskStatus, to_status: TaskStatus) -> bool:
    """Check whether a status move is legal, independent of the actor.

    Same-status requests are allowed and are no-ops.
    """
    return (from_status, to_status) not in FORBIDDEN_TRANSITIONS


def _as_utc(value: datetime) -> datetime:
    # Naive datetimes are taken to be UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def validate_title(title: str | None) -> str:
    """Validate and trim a task title.

    Raises:
        ValidationError: If the title is empty or longer than 255 characters.
    """
    if title is None or not title.strip():
        raise ValidationError("title", "cannot be empty")
    trimmed = title.strip()
    if len(trimmed) > TITLE_MAX_LENGTH:
        raise ValidationError(
            "title", f"cannot exceed {TITLE_MAX_LENGTH} characters"
        )
    return trimmed


def validate_description(description: str | None) -> str:
    """Validate and trim a task description.

    Raises:
        ValidationError: If the description is empty.
    """
    if description is None or not description.strip():
        raise ValidationError("description", "cannot be empty")
    return description.strip()


def validate_deadline(deadline: datetime, now: datetime) -> datetime:
    """Validate that a deadline is not strictly before `now`.

    Raises:
        ValidationError: If the deadline lies in the past.
    """
    deadline = _as_utc(deadline)
    if deadline < _as_utc(now):
        raise ValidationError("deadline", "cannot be in the past")
    return deadline


def new_task(
    task_id: UUID,
    title: str,
    description: str,
    actor_id: UUID,
    actor_role: UserRole,
    now: datetime,
    deadline: datetime | None = None,
) -> Task:
    """Build a new TODO task owned by the acting admin.

    Args:
        task_id: Identifier for the new task.
        title: Task title.
        description: Task description.
        actor_id: The creating user, recorded as creator.
        actor_role: Role of the creating user.
        now: Current time from the time authority.
        deadline: Optional deadline, must not be in the past.

    Returns:
        A new unassigned Task in TODO.

    Raises:
        UnauthorizedError: If the actor is not an admin.
        ValidationError: If any field is invalid.
    """
    require_create_task(actor_id, actor_role)

    return Task(
        id=task_id,
        title=validate_title(title),
        description=validate_description(description),
        creator_id=actor_id,
        status=TaskStatus.TODO,
        assignee_id=None,
        deadline=validate_deadline(deadline, now) if deadline is not None else None,
        created_at=now,
        updated_at=now,
    )


def change_status(
    task: Task,
    new_status: TaskStatus,
    actor_id: UUID,
    actor_role: UserRole,
    now: datetime,
) -> Task:
    """Move a task to a new board column.

    Args:
        task: Current task state.
        new_status: Requested status.
        actor_id: The user moving the task.
        actor_role: Role of that user.
        now: Current time from the time authority.

    Returns:
        The moved task, or `task` itself when the status is unchanged.

    Raises:
        UnauthorizedError: If the actor is neither admin nor assignee.
        InvalidTransitionError: If the move is DONE -> TODO.
    """
    require_change_task_status(actor_id, actor_role, task)

    if not is_transition_allowed(task.status, new_status):
        raise InvalidTransitionError(task.status, new_status)

    if task.status == new_status:
        return task

    return replace(task, status=new_status, updated_at=now)


def update_details(
    task: Task,
    actor_id: UUID,
    actor_role: UserRole,
    now: datetime,
    title: str | None = None,
    description: str | None = None,
    deadline: datetime | None = None,
) -> Task:
    """Edit title, description and/or deadline.

    Fields left as None are not touched. Explicitly empty strings are
    rejected rather than ignored.

    Raises:
        UnauthorizedError: If the actor is not an admin.
        ValidationError: If any supplied field is invalid.
    """
    require_modify_task_details(actor_id, actor_role)

    changes: dict[str, object] = {}
    if title is not None:
        changes["title"] = validate_title(title)
    if description is not None:
        changes["description"] = validate_description(description)
    if deadline is not None:
        changes["deadline"] = validate_deadline(deadline, now)

    return replace(task, updated_at=now, **changes)


def assign(
    task: Task,
    assignee: User,
    actor_id: UUID,
    actor_role: UserRole,
    now: datetime,
) -> Task:
    """Assign a task to a user without changing its status.

    Args:
        task: Current task state.
        assignee: The user receiving the task (already loaded).
        actor_id: The assigning user.
        actor_role: Role of the assigning user.
        now: Current time from the time authority.

    Raises:
        UnauthorizedError: If the actor is not an admin.
        NotAssignableError: If the task is DONE or the assignee is inactive.
    """
    require_assign_task(actor_id, actor_role)

    if task.status == TaskStatus.DONE:
        raise NotAssignableError("cannot assign a completed task")

    if not assignee.active:
        raise NotAssignableError(f"user {assignee.id} is inactive")

    return replace(task, assignee_id=assignee.id, updated_at=now)
