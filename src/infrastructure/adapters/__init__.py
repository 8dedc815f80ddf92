"""Infrastructure adapters for the tracker.

Adapters implement the ports defined in the application layer,
providing concrete implementations for external services.

Available adapters:
- InMemoryNotificationChannel: Process-local live notification push
- SystemTimeAuthority: Wall-clock UTC time
"""

from src.infrastructure.adapters.in_memory_notification_channel import (
    InMemoryNotificationChannel,
    NotificationSubscription,
)
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority

__all__: list[str] = [
    "InMemoryNotificationChannel",
    "NotificationSubscription",
    "SystemTimeAuthority",
]
