"""In-memory notification channel.

Process-lifetime publish/subscribe registry keyed by recipient id, used
to push NotificationPayloads to connected clients (e.g. an SSE stream).

Delivery semantics:
- publish never blocks and never raises on a slow subscriber: each
  subscription has a bounded queue and a full queue drops the event
- a recipient with no open subscription drops the event
- closing a subscription unregisters it and ends its iteration

A multi-process deployment would replace this adapter with a broker
backed one behind the same NotificationChannelProtocol.
"""

from __future__ import annotations

import asyncio
from types import TracebackType
from typing import cast
from uuid import UUID

from structlog import get_logger

from src.application.dtos.notification import NotificationPayload
from src.application.ports.notification_channel import NotificationChannelProtocol

log = get_logger(__name__)

DEFAULT_QUEUE_SIZE = 100

# Wakes a blocked __anext__ on close
_CLOSED = object()


class NotificationSubscription:
    """One caller-owned stream of payloads for a recipient.

    Iterate it with `async for`; use it as an async context manager to
    guarantee it is closed.

    Example:
        >>> async with channel.subscribe(user_id) as subscription:
        ...     async for payload in subscription:
        ...         yield payload.to_sse_format()
    """

    def __init__(
        self,
        channel: InMemoryNotificationChannel,
        recipient_id: UUID,
        max_queue_size: int,
    ) -> None:
        self.recipient_id = recipient_id
        self._channel = channel
        self._queue: asyncio.Queue[object] = asyncio.Queue(maxsize=max_queue_size)
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def pending(self) -> int:
        """Number of payloads waiting to be consumed."""
        return self._queue.qsize()

    def offer(self, payload: NotificationPayload) -> bool:
        """Enqueue a payload without waiting.

        Returns:
            False if the subscription is closed or its queue is full.
        """
        if self._closed:
            return False
        try:
            self._queue.put_nowait(payload)
        except asyncio.QueueFull:
            return False
        return True

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._channel._unregister(self)
        try:
            self._queue.put_nowait(_CLOSED)
        except asyncio.QueueFull:
            # The consumer is not blocked; it sees `closed` on its next call
            pass

    def __aiter__(self) -> NotificationSubscription:
        return self

    async def __anext__(self) -> NotificationPayload:
        if self._closed:
            raise StopAsyncIteration
        item = await self._queue.get()
        if item is _CLOSED or self._closed:
            raise StopAsyncIteration
        return cast(NotificationPayload, item)

    async def __aenter__(self) -> NotificationSubscription:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class InMemoryNotificationChannel(NotificationChannelProtocol):
    """In-memory implementation of the live notification channel.

    Attributes:
        _subscriptions: Map of recipient_id to its open subscriptions.
        _max_queue_size: Per-subscription buffer size.
    """

    def __init__(self, max_queue_size: int = DEFAULT_QUEUE_SIZE) -> None:
        if max_queue_size < 1:
            raise ValueError(f"max_queue_size must be positive, got {max_queue_size}")
        self._subscriptions: dict[UUID, set[NotificationSubscription]] = {}
        self._max_queue_size = max_queue_size

    def publish(self, recipient_id: UUID, payload: NotificationPayload) -> None:
        """Push a payload to every open subscription of a recipient."""
        subscriptions = list(self._subscriptions.get(recipient_id, ()))
        if not subscriptions:
            log.debug(
                "notification_push_skipped",
                recipient_id=str(recipient_id),
                notification_id=str(payload.id),
                reason="no_subscriber",
            )
            return

        for subscription in subscriptions:
            if not subscription.offer(payload):
                log.warning(
                    "notification_push_dropped",
                    recipient_id=str(recipient_id),
                    notification_id=str(payload.id),
                    reason="queue_full",
                )

    def subscribe(self, recipient_id: UUID) -> NotificationSubscription:
        """Open a subscription for a recipient."""
        subscription = NotificationSubscription(
            self, recipient_id, self._max_queue_size
        )
        self._subscriptions.setdefault(recipient_id, set()).add(subscription)
        log.info(
            "notification_subscription_opened",
            recipient_id=str(recipient_id),
            subscribers=self.subscriber_count(recipient_id),
        )
        return subscription

    def subscriber_count(self, recipient_id: UUID | None = None) -> int:
        """Count open subscriptions, for one recipient or overall."""
        if recipient_id is not None:
            return len(self._subscriptions.get(recipient_id, ()))
        return sum(len(subs) for subs in self._subscriptions.values())

    def close_all(self) -> None:
        """Close every open subscription (shutdown)."""
        for subscriptions in list(self._subscriptions.values()):
            for subscription in list(subscriptions):
                subscription.close()

    def _unregister(self, subscription: NotificationSubscription) -> None:
        subscriptions = self._subscriptions.get(subscription.recipient_id)
        if subscriptions is None:
            return
        subscriptions.discard(subscription)
        if not subscriptions:
            del self._subscriptions[subscription.recipient_id]
        log.info(
            "notification_subscription_closed",
            recipient_id=str(subscription.recipient_id),
        )
