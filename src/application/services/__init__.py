"""Application services - Use case orchestration.

This module contains application services that orchestrate domain
operations and coordinate with infrastructure adapters.

Available services:
- NotificationFanout: Persist-then-notify pipeline shared by all mutations
- TaskService: Task lifecycle (create, edit, move, assign, delete)
- ScrumNoteService: Daily scrum notes, one per user per day
- NotificationInboxService: Pull queries and read-state changes
- UserService: Admin-only user management
"""

from src.application.services.notification_fanout import (
    FanoutPlan,
    FanoutReport,
    NotificationFanout,
    resolve_recipients,
)
from src.application.services.notification_inbox_service import (
    NotificationInboxService,
)
from src.application.services.scrum_note_service import ScrumNoteService
from src.application.services.task_service import TaskService
from src.application.services.user_service import UserService

__all__ = [
    "FanoutPlan",
    "FanoutReport",
    "NotificationFanout",
    "NotificationInboxService",
    "ScrumNoteService",
    "TaskService",
    "UserService",
    "resolve_recipients",
]
