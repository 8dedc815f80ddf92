"""Notification channel port for live per-recipient push.

The channel is a process-lifetime publish/subscribe registry keyed by
recipient id. It is injected into the fan-out pipeline rather than
reached through a module global, so a distributed backend can replace
the in-memory one without touching the use-cases.

Delivery contract:
- publish is fire-and-forget: no acknowledgment, no backpressure
- a recipient with no open subscription simply misses the event; the
  persisted notification remains retrievable by pull
- a subscription lives as long as its caller keeps it open; closing it
  unregisters it, and nothing is buffered for reconnects
"""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from src.application.dtos.notification import NotificationPayload


class NotificationSubscriptionProtocol(Protocol):
    """A caller-owned stream of payloads for one recipient."""

    recipient_id: UUID

    def __aiter__(self) -> NotificationSubscriptionProtocol:
        ...

    async def __anext__(self) -> NotificationPayload:
        """Wait for the next payload; stops iteration once closed."""
        ...

    def close(self) -> None:
        """Unregister the subscription. Safe to call more than once."""
        ...

    @property
    def closed(self) -> bool:
        ...


class NotificationChannelProtocol(Protocol):
    """Port for live notification delivery."""

    def publish(self, recipient_id: UUID, payload: NotificationPayload) -> None:
        """Push a payload to every open subscription of a recipient.

        Must not block. Recipients without subscriptions drop the event.
        """
        ...

    def subscribe(self, recipient_id: UUID) -> NotificationSubscriptionProtocol:
        """Open a subscription filtered on a recipient id."""
        ...
