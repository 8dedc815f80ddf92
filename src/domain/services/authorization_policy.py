"""Authorization policy domain service.

Single source of truth for who may do what to a Task or ScrumNote.
Every predicate is a pure function over the actor's role, the actor's
id and (where ownership matters) the resource. Each predicate has a
`require_*` companion that raises UnauthorizedError on denial, so call
sites never implement their own role checks.

Rules:
- Task creation, deletion, detail edits and assignment: ADMIN only
- Task status change: ADMIN or the current assignee
- Scrum note edit and deletion: ADMIN or the note owner
- User management (activation, promotion): ADMIN only
"""

from __future__ import annotations

from uuid import UUID

from src.domain.errors.authorization import UnauthorizedError
from src.domain.models.scrum_note import ScrumNote
from src.domain.models.task import Task
from src.domain.models.user import UserRole

# Action names carried by UnauthorizedError
ACTION_CREATE_TASK = "create task"
ACTION_DELETE_TASK = "delete task"
ACTION_ASSIGN_TASK = "assign task"
ACTION_UPDATE_TASK = "update task details"
ACTION_CHANGE_TASK_STATUS = "change task status"
ACTION_UPDATE_SCRUM_NOTE = "update scrum note"
ACTION_DELETE_SCRUM_NOTE = "delete scrum note"
ACTION_MANAGE_USERS = "manage users"


def can_create_task(role: UserRole) -> bool:
    return role == UserRole.ADMIN


def can_delete_task(role: UserRole) -> bool:
    return role == UserRole.ADMIN


def can_assign_task(role: UserRole) -> bool:
    """Check whether a role may assign tasks.

    Whether the task itself is assignable (not DONE) is a separate rule
    enforced by the task state machine, for every role.
    """
    return role == UserRole.ADMIN


def can_modify_task_details(role: UserRole) -> bool:
    return role == UserRole.ADMIN


def can_change_task_status(actor_id: UUID, role: UserRole, task: Task) -> bool:
    return role == UserRole.ADMIN or task.is_assigned_to(actor_id)


def can_modify_scrum_note(actor_id: UUID, role: UserRole, note: ScrumNote) -> bool:
    return role == UserRole.ADMIN or note.belongs_to(actor_id)


def can_delete_scrum_note(actor_id: UUID, role: UserRole, note: ScrumNote) -> bool:
    return role == UserRole.ADMIN or note.belongs_to(actor_id)


def can_manage_users(role: UserRole) -> bool:
    return role == UserRole.ADMIN


def _require(allowed: bool, actor_id: UUID, action: str) -> None:
    if not allowed:
        raise UnauthorizedError(actor_id, action)


def require_create_task(actor_id: UUID, role: UserRole) -> None:
    """Raise UnauthorizedError unless the actor may create tasks."""
    _require(can_create_task(role), actor_id, ACTION_CREATE_TASK)


def require_delete_task(actor_id: UUID, role: UserRole) -> None:
    """Raise UnauthorizedError unless the actor may delete tasks."""
    _require(can_delete_task(role), actor_id, ACTION_DELETE_TASK)


def require_assign_task(actor_id: UUID, role: UserRole) -> None:
    """Raise UnauthorizedError unless the actor may assign tasks."""
    _require(can_assign_task(role), actor_id, ACTION_ASSIGN_TASK)


def require_modify_task_details(actor_id: UUID, role: UserRole) -> None:
    """Raise UnauthorizedError unless the actor may edit task details."""
    _require(can_modify_task_details(role), actor_id, ACTION_UPDATE_TASK)


def require_change_task_status(actor_id: UUID, role: UserRole, task: Task) -> None:
    """Raise UnauthorizedError unless the actor may move this task."""
    _require(
        can_change_task_status(actor_id, role, task),
        actor_id,
        ACTION_CHANGE_TASK_STATUS,
    )


def require_modify_scrum_note(
    actor_id: UUID, role: UserRole, note: ScrumNote
) -> None:
    """Raise UnauthorizedError unless the actor may edit this note."""
    _require(
        can_modify_scrum_note(actor_id, role, note),
        actor_id,
        ACTION_UPDATE_SCRUM_NOTE,
    )


def require_delete_scrum_note(
    actor_id: UUID, role: UserRole, note: ScrumNote
) -> None:
    """Raise UnauthorizedError unless the actor may delete this note."""
    _require(
        can_delete_scrum_note(actor_id, role, note),
        actor_id,
        ACTION_DELETE_SCRUM_NOTE,
    )


def require_manage_users(actor_id: UUID, role: UserRole) -> None:
    """Raise UnauthorizedError unless the actor may manage users."""
    _require(can_manage_users(role), actor_id, ACTION_MANAGE_USERS)
