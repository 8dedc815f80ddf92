"""Infrastructure stubs for development and testing.

This module provides in-memory implementations of the repository ports
for use in development and testing environments.

Available stubs:
- UserRepositoryStub: Users keyed by id, seeded with add_user
- TaskRepositoryStub: Tasks with status and assignee listings
- ScrumNoteRepositoryStub: Notes with a unique (user, day) index
- NotificationRepositoryStub: Notifications with inbox queries

WARNING: These stubs are NOT for production use.
"""

from src.infrastructure.stubs.notification_repository_stub import (
    NotificationRepositoryStub,
)
from src.infrastructure.stubs.scrum_note_repository_stub import (
    ScrumNoteRepositoryStub,
)
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from src.infrastructure.stubs.user_repository_stub import UserRepositoryStub

__all__: list[str] = [
    "NotificationRepositoryStub",
    "ScrumNoteRepositoryStub",
    "TaskRepositoryStub",
    "UserRepositoryStub",
]
