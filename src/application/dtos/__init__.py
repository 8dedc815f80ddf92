"""Application DTOs (Data Transfer Objects).

These DTOs are used for data transfer within the application layer
and across layer boundaries. They are distinct from domain models
(immutable business objects).

This module exports both:
1. Dataclass-based input records and results - for use-case calls
2. Pydantic models - for serialized notification delivery
"""

from src.application.dtos.notification import (
    NotificationPayload,
    UserNotificationsDTO,
)
from src.application.dtos.scrum_note import (
    CreateScrumNoteInput,
    DeleteScrumNoteInput,
    UpdateScrumNoteInput,
)
from src.application.dtos.task import (
    AssignTaskInput,
    CreateTaskInput,
    DeleteTaskInput,
    UpdateTaskInput,
    UpdateTaskStatusInput,
)

__all__ = [
    "AssignTaskInput",
    "CreateScrumNoteInput",
    "CreateTaskInput",
    "DeleteScrumNoteInput",
    "DeleteTaskInput",
    "NotificationPayload",
    "UpdateScrumNoteInput",
    "UpdateTaskInput",
    "UpdateTaskStatusInput",
    "UserNotificationsDTO",
]
