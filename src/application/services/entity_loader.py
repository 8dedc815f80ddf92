"""Load-phase helpers shared by the use-case services.

Each helper fetches one required entity and raises NotFoundError when it
is missing, so the use-case aborts before any mutation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from src.domain.errors.not_found import NotFoundError
from src.domain.models.scrum_note import ScrumNote
from src.domain.models.task import Task
from src.domain.models.user import User

if TYPE_CHECKING:
    from src.application.ports.scrum_note_repository import (
        ScrumNoteRepositoryProtocol,
    )
    from src.application.ports.task_repository import TaskRepositoryProtocol
    from src.application.ports.user_repository import UserLookupProtocol

KIND_USER = "User"
KIND_TASK = "Task"
KIND_SCRUM_NOTE = "ScrumNote"
KIND_NOTIFICATION = "Notification"


async def load_user(users: UserLookupProtocol, user_id: UUID) -> User:
    user = await users.find_by_id(user_id)
    if user is None:
        raise NotFoundError(KIND_USER, user_id)
    return user


async def load_task(tasks: TaskRepositoryProtocol, task_id: UUID) -> Task:
    task = await tasks.find_by_id(task_id)
    if task is None:
        raise NotFoundError(KIND_TASK, task_id)
    return task


async def load_scrum_note(
    notes: ScrumNoteRepositoryProtocol, note_id: UUID
) -> ScrumNote:
    note = await notes.find_by_id(note_id)
    if note is None:
        raise NotFoundError(KIND_SCRUM_NOTE, note_id)
    return note
