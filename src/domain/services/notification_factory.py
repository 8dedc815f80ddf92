"""Notification factory domain service.

Stateless constructors, one per event kind. Every field of the returned
Notification is derived from the arguments: identifiers and timestamps
are passed in by the caller, so the same inputs always build the same
notification.
"""

from __future__ import annotations

from datetime import date, datetime
from uuid import UUID

from src.domain.errors.validation import ValidationError
from src.domain.models.notification import (
    MESSAGE_MAX_LENGTH,
    META_ACTOR_ID,
    META_ACTOR_NAME,
    META_NEW_STATUS,
    META_OLD_STATUS,
    META_SCRUM_NOTE_ID,
    META_TASK_ID,
    META_TASK_TITLE,
    Notification,
    NotificationType,
)
from src.domain.models.task import TaskStatus


def format_note_date(note_date: date) -> str:
    """Format a scrum note day as e.g. "Monday, March 3"."""
    return f"{note_date:%A, %B} {note_date.day}"


def _build(
    notification_type: NotificationType,
    notification_id: UUID,
    recipient_id: UUID,
    message: str,
    metadata: dict[str, str],
    created_at: datetime,
) -> Notification:
    message = message.strip()
    if not message:
        raise ValidationError("message", "cannot be empty")
    if len(message) > MESSAGE_MAX_LENGTH:
        raise ValidationError(
            "message", f"cannot exceed {MESSAGE_MAX_LENGTH} characters"
        )

    return Notification(
        id=notification_id,
        type=notification_type,
        title=notification_type.default_title,
        message=message,
        recipient_id=recipient_id,
        created_at=created_at,
        metadata=metadata,
        is_read=False,
    )


def task_assigned(
    recipient_id: UUID,
    task_id: UUID,
    task_title: str,
    actor_name: str,
    actor_id: UUID,
    *,
    notification_id: UUID,
    created_at: datetime,
) -> Notification:
    """Build the notice sent to the new assignee of a task.

    Args:
        recipient_id: The new assignee.
        task_id: The assigned task.
        task_title: Title of the task.
        actor_name: Display name of the assigning admin.
        actor_id: The assigning admin.
        notification_id: Identifier for the notification.
        created_at: Creation time.

    Returns:
        A TASK_ASSIGNED notification redirecting to /tasks/{task_id}.
    """
    return _build(
        NotificationType.TASK_ASSIGNED,
        notification_id,
        recipient_id,
        f'{actor_name} assigned you the task "{task_title}"',
        {
            META_TASK_ID: str(task_id),
            META_TASK_TITLE: task_title,
            META_ACTOR_ID: str(actor_id),
            META_ACTOR_NAME: actor_name,
        },
        created_at,
    )


def task_status_updated(
    recipient_id: UUID,
    task_id: UUID,
    task_title: str,
    old_status: TaskStatus,
    new_status: TaskStatus,
    actor_name: str,
    actor_id: UUID,
    *,
    notification_id: UUID,
    created_at: datetime,
) -> Notification:
    """Build the notice sent to a task creator when the task moves.

    The metadata carries both statuses as their enum values, so the
    transition can be read back exactly.

    Returns:
        A TASK_STATUS_UPDATED notification redirecting to /tasks/{task_id}.
    """
    return _build(
        NotificationType.TASK_STATUS_UPDATED,
        notification_id,
        recipient_id,
        (
            f'{actor_name} changed the status of "{task_title}" '
            f'from "{old_status.label}" to "{new_status.label}"'
        ),
        {
            META_TASK_ID: str(task_id),
            META_TASK_TITLE: task_title,
            META_OLD_STATUS: old_status.value,
            META_NEW_STATUS: new_status.value,
            META_ACTOR_ID: str(actor_id),
            META_ACTOR_NAME: actor_name,
        },
        created_at,
    )


def scrum_note_created(
    recipient_id: UUID,
    scrum_note_id: UUID,
    actor_name: str,
    actor_id: UUID,
    note_date: date,
    *,
    notification_id: UUID,
    created_at: datetime,
) -> Notification:
    """Build the notice sent to an admin when an intern writes a note.

    Returns:
        A SCRUM_NOTE_CREATED notification redirecting to /scrum-notes.
    """
    return _build(
        NotificationType.SCRUM_NOTE_CREATED,
        notification_id,
        recipient_id,
        f"{actor_name} created their scrum note for {format_note_date(note_date)}",
        {
            META_SCRUM_NOTE_ID: str(scrum_note_id),
            META_ACTOR_ID: str(actor_id),
            META_ACTOR_NAME: actor_name,
        },
        created_at,
    )
