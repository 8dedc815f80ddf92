"""Notification repository port.

The fan-out pipeline only calls `save`. The remaining methods back the
pull-based notification queries (inbox listing, read flips, retention
purge).
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol
from uuid import UUID

from src.domain.models.notification import Notification


class NotificationRepositoryProtocol(Protocol):
    """Protocol for notification storage operations."""

    async def save(self, notification: Notification) -> Notification:
        """Insert or replace a notification.

        Returns:
            The stored notification.
        """
        ...

    async def find_by_id(self, notification_id: UUID) -> Notification | None:
        """Retrieve a notification by id, None if unknown."""
        ...

    async def find_by_recipient(
        self,
        recipient_id: UUID,
        limit: int | None = None,
        unread_only: bool = False,
    ) -> list[Notification]:
        """Retrieve a recipient's notifications, newest first.

        Args:
            recipient_id: The recipient.
            limit: Maximum number of results, None for no limit.
            unread_only: Only return unread notifications.
        """
        ...

    async def count_unread(self, recipient_id: UUID) -> int:
        """Count a recipient's unread notifications."""
        ...

    async def mark_all_as_read(self, recipient_id: UUID) -> int:
        """Flip every unread notification of a recipient to read.

        Returns:
            The number of notifications flipped.
        """
        ...

    async def delete_created_before(self, cutoff: datetime) -> int:
        """Delete notifications created strictly before `cutoff`.

        Returns:
            The number of notifications deleted.
        """
        ...
