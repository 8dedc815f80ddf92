"""Domain models for the task tracker.

Contains the immutable entities that represent core business concepts.
Models carry no infrastructure dependencies.
"""

from src.domain.models.notification import Notification, NotificationType
from src.domain.models.scrum_note import ScrumNote
from src.domain.models.task import Task, TaskStatus
from src.domain.models.user import User, UserRole

__all__: list[str] = [
    "Notification",
    "NotificationType",
    "ScrumNote",
    "Task",
    "TaskStatus",
    "User",
    "UserRole",
]
