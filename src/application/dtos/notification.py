"""Notification DTOs for the application layer.

This module contains two kinds of definitions:
1. NotificationPayload (Pydantic) - the wire form of a notification,
   pushed over the live channel and returned by inbox queries
2. Dataclass-based results for inbox queries

The payload always carries `redirect_url`, recomputed from the
notification type and metadata.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.domain.models.notification import (
    MESSAGE_MAX_LENGTH,
    Notification,
    NotificationType,
)


class NotificationPayload(BaseModel):
    """Serialized notification for push and pull delivery.

    Attributes:
        id: Notification id.
        type: Notification type.
        title: Short title.
        message: Human-readable message.
        recipient_id: Recipient user id.
        is_read: Read flag.
        metadata: Event-specific values.
        created_at: Creation time (UTC).
        redirect_url: UI route derived from type and metadata.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    type: NotificationType
    title: str
    message: str = Field(min_length=1, max_length=MESSAGE_MAX_LENGTH)
    recipient_id: UUID
    is_read: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    created_at: datetime
    redirect_url: str

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationPayload":
        """Build the payload for a domain notification."""
        return cls(
            id=notification.id,
            type=notification.type,
            title=notification.title,
            message=notification.message,
            recipient_id=notification.recipient_id,
            is_read=notification.is_read,
            metadata=dict(notification.metadata),
            created_at=notification.created_at,
            redirect_url=notification.redirect_url,
        )

    def to_sse_format(self) -> str:
        """Format the payload as a server-sent event."""
        data = self.model_dump(mode="json")
        return f"event: notification\nid: {self.id}\ndata: {json.dumps(data)}\n\n"


@dataclass(frozen=True)
class UserNotificationsDTO:
    """A page of a recipient's inbox.

    Attributes:
        notifications: Newest first.
        unread_count: Total unread notifications, not just on this page.
    """

    notifications: list[NotificationPayload] = field(default_factory=list)
    unread_count: int = 0
