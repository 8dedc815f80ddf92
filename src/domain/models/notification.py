"""Notification domain model.

A notification is created as a side effect of a Task or ScrumNote
mutation. After creation the only permitted change is the read flip
(is_read False -> True). The redirect target is never stored: it is
recomputed from the type and metadata.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta
from enum import Enum
from uuid import UUID

MESSAGE_MAX_LENGTH = 500
DEFAULT_RETENTION_DAYS = 30

# Metadata keys
META_TASK_ID = "task_id"
META_TASK_TITLE = "task_title"
META_OLD_STATUS = "old_status"
META_NEW_STATUS = "new_status"
META_SCRUM_NOTE_ID = "scrum_note_id"
META_ACTOR_ID = "actor_id"
META_ACTOR_NAME = "actor_name"


class NotificationType(str, Enum):
    """Kinds of notification.

    Types:
        TASK_ASSIGNED: Sent to an intern when an admin assigns them a task.
        TASK_STATUS_UPDATED: Sent to the task creator when someone else
            moves the task.
        SCRUM_NOTE_CREATED: Sent to every active admin when an intern
            writes a scrum note.
    """

    TASK_ASSIGNED = "TASK_ASSIGNED"
    TASK_STATUS_UPDATED = "TASK_STATUS_UPDATED"
    SCRUM_NOTE_CREATED = "SCRUM_NOTE_CREATED"

    @property
    def default_title(self) -> str:
        return _DEFAULT_TITLES[self]


_DEFAULT_TITLES: dict[NotificationType, str] = {
    NotificationType.TASK_ASSIGNED: "New task assigned",
    NotificationType.TASK_STATUS_UPDATED: "Task status updated",
    NotificationType.SCRUM_NOTE_CREATED: "New scrum note",
}


def redirect_url_for(
    notification_type: NotificationType, metadata: dict[str, str]
) -> str:
    """Compute the UI route a notification points to.

    Args:
        notification_type: The notification type.
        metadata: The notification metadata.

    Returns:
        `/tasks/{task_id}` for task notifications (`/tasks` if the task id
        is missing), `/scrum-notes` for scrum note notifications.
    """
    if notification_type in (
        NotificationType.TASK_ASSIGNED,
        NotificationType.TASK_STATUS_UPDATED,
    ):
        task_id = metadata.get(META_TASK_ID)
        return f"/tasks/{task_id}" if task_id else "/tasks"
    return "/scrum-notes"


@dataclass(frozen=True, eq=True)
class Notification:
    """A persisted notice addressed to a single recipient.

    Attributes:
        id: Notification identifier.
        type: Notification type.
        title: Short title, derived from the type.
        message: Human-readable message (1-500 characters).
        recipient_id: User the notification is addressed to.
        created_at: Creation time (UTC).
        metadata: Event-specific string values (see META_* keys).
        is_read: Read flag, False on creation.
    """

    id: UUID
    type: NotificationType
    title: str
    message: str
    recipient_id: UUID
    created_at: datetime
    metadata: dict[str, str] = field(default_factory=dict, hash=False)
    is_read: bool = field(default=False)

    @property
    def redirect_url(self) -> str:
        return redirect_url_for(self.type, self.metadata)

    def mark_as_read(self) -> Notification:
        """Return the read version of this notification.

        Idempotent: an already read notification is returned unchanged.
        """
        if self.is_read:
            return self
        return replace(self, is_read=True)

    def is_expired(
        self, now: datetime, retention_days: int = DEFAULT_RETENTION_DAYS
    ) -> bool:
        """Check whether the notification is older than the retention window.

        Args:
            now: Current time from the time authority.
            retention_days: Retention window in days.

        Returns:
            True if `now` is past created_at + retention_days.
        """
        return now > self.created_at + timedelta(days=retention_days)
