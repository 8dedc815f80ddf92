"""Notification repository stub.

In-memory stub implementation for notification storage, backing both
the fan-out pipeline (`save`) and the inbox queries.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import datetime
from uuid import UUID

from src.application.ports.notification_repository import (
    NotificationRepositoryProtocol,
)
from src.domain.models.notification import Notification

logger = logging.getLogger(__name__)


class NotificationRepositoryStub(NotificationRepositoryProtocol):
    """In-memory stub implementation of the notification repository.

    Attributes:
        _notifications: Map of notification_id to Notification.
        _lock: Async lock for concurrent access.
    """

    def __init__(self) -> None:
        """Initialize the repository stub."""
        self._notifications: dict[UUID, Notification] = {}
        self._lock = asyncio.Lock()

    async def save(self, notification: Notification) -> Notification:
        async with self._lock:
            self._notifications[notification.id] = notification
            logger.debug(
                "Saved notification %s for recipient %s: type=%s",
                notification.id,
                notification.recipient_id,
                notification.type.value,
            )
            return notification

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        async with self._lock:
            return self._notifications.get(notification_id)

    async def find_by_recipient(
        self,
        recipient_id: UUID,
        limit: int | None = None,
        unread_only: bool = False,
    ) -> list[Notification]:
        async with self._lock:
            matches = [
                n
                for n in self._notifications.values()
                if n.recipient_id == recipient_id
                and not (unread_only and n.is_read)
            ]
        matches.sort(key=lambda n: n.created_at, reverse=True)
        return matches if limit is None else matches[:limit]

    async def count_unread(self, recipient_id: UUID) -> int:
        async with self._lock:
            return sum(
                1
                for n in self._notifications.values()
                if n.recipient_id == recipient_id and not n.is_read
            )

    async def mark_all_as_read(self, recipient_id: UUID) -> int:
        async with self._lock:
            flipped = 0
            for notification_id, n in list(self._notifications.items()):
                if n.recipient_id == recipient_id and not n.is_read:
                    self._notifications[notification_id] = replace(n, is_read=True)
                    flipped += 1
            logger.debug(
                "Marked %d notifications read for recipient %s",
                flipped,
                recipient_id,
            )
            return flipped

    async def delete_created_before(self, cutoff: datetime) -> int:
        async with self._lock:
            expired = [
                notification_id
                for notification_id, n in self._notifications.items()
                if n.created_at < cutoff
            ]
            for notification_id in expired:
                del self._notifications[notification_id]
            logger.debug(
                "Deleted %d notifications created before %s",
                len(expired),
                cutoff.isoformat(),
            )
            return len(expired)

    # Test helper methods

    def all(self) -> list[Notification]:
        """Get every stored notification (for testing)."""
        return list(self._notifications.values())

    def clear(self) -> None:
        """Clear all notifications (for testing)."""
        self._notifications.clear()

    def count(self) -> int:
        """Get the number of stored notifications (for testing)."""
        return len(self._notifications)
