"""Notification inbox service.

Pull side of the notification system. The live channel is best-effort,
so a client that reconnects catches up through `get_user_notifications`.
Results are returned as NotificationPayload, the same shape the live
channel pushes.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING
from uuid import UUID

from structlog import get_logger

from src.application.dtos.notification import (
    NotificationPayload,
    UserNotificationsDTO,
)
from src.application.services.entity_loader import KIND_NOTIFICATION
from src.domain.errors.not_found import NotFoundError
from src.domain.errors.validation import ValidationError
from src.domain.models.notification import DEFAULT_RETENTION_DAYS

if TYPE_CHECKING:
    from src.application.ports.notification_repository import (
        NotificationRepositoryProtocol,
    )
    from src.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)

DEFAULT_PAGE_SIZE = 10


class NotificationInboxService:
    """Queries and read-state changes over stored notifications."""

    def __init__(
        self,
        notification_repo: NotificationRepositoryProtocol,
        time_authority: TimeAuthorityProtocol,
        page_size: int = DEFAULT_PAGE_SIZE,
        retention_days: int = DEFAULT_RETENTION_DAYS,
    ) -> None:
        """Initialize the inbox service.

        Args:
            notification_repo: Notification storage.
            time_authority: Clock for retention cutoffs.
            page_size: Default number of notifications per listing.
            retention_days: Default age after which notifications purge.
        """
        self._notification_repo = notification_repo
        self._time = time_authority
        self._page_size = page_size
        self._retention_days = retention_days

    async def get_user_notifications(
        self,
        recipient_id: UUID,
        limit: int | None = None,
        unread_only: bool = False,
    ) -> UserNotificationsDTO:
        """List a recipient's latest notifications with their unread count.

        Args:
            recipient_id: The recipient.
            limit: Page size; the configured default when None.
            unread_only: Only list unread notifications.

        Raises:
            ValidationError: If limit is not positive.
        """
        page_size = self._page_size if limit is None else limit
        if page_size < 1:
            raise ValidationError("limit", "must be positive")

        notifications = await self._notification_repo.find_by_recipient(
            recipient_id, limit=page_size, unread_only=unread_only
        )
        unread_count = await self._notification_repo.count_unread(recipient_id)
        return UserNotificationsDTO(
            notifications=[
                NotificationPayload.from_notification(n) for n in notifications
            ],
            unread_count=unread_count,
        )

    async def get_unread_notifications(
        self, recipient_id: UUID
    ) -> list[NotificationPayload]:
        """List every unread notification of a recipient, newest first."""
        notifications = await self._notification_repo.find_by_recipient(
            recipient_id, unread_only=True
        )
        return [NotificationPayload.from_notification(n) for n in notifications]

    async def mark_notification_read(
        self, notification_id: UUID
    ) -> NotificationPayload:
        """Mark one notification read. Marking it again changes nothing.

        Raises:
            NotFoundError: Notification does not exist.
        """
        notification = await self._notification_repo.find_by_id(notification_id)
        if notification is None:
            raise NotFoundError(KIND_NOTIFICATION, notification_id)

        if notification.is_read:
            return NotificationPayload.from_notification(notification)

        stored = await self._notification_repo.save(notification.mark_as_read())
        logger.debug("notification_marked_read", notification_id=str(stored.id))
        return NotificationPayload.from_notification(stored)

    async def mark_all_notifications_read(self, recipient_id: UUID) -> int:
        """Mark every notification of a recipient read.

        Returns:
            The number of notifications that were unread.
        """
        count = await self._notification_repo.mark_all_as_read(recipient_id)
        logger.info(
            "notifications_marked_read",
            recipient_id=str(recipient_id),
            count=count,
        )
        return count

    async def purge_expired_notifications(
        self, retention_days: int | None = None
    ) -> int:
        """Delete notifications older than the retention window.

        Args:
            retention_days: Window in days; the configured default when None.

        Returns:
            The number of notifications deleted.

        Raises:
            ValidationError: If retention_days is negative.
        """
        days = self._retention_days if retention_days is None else retention_days
        if days < 0:
            raise ValidationError("retention_days", "must not be negative")

        cutoff = self._time.utcnow() - timedelta(days=days)
        deleted = await self._notification_repo.delete_created_before(cutoff)
        logger.info(
            "notifications_purged",
            retention_days=days,
            cutoff=cutoff.isoformat(),
            deleted=deleted,
        )
        return deleted
