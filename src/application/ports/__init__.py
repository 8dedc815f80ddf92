"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- UserLookupProtocol / UserRepositoryProtocol: user lookups and persistence
- TaskRepositoryProtocol: task persistence and listings
- ScrumNoteRepositoryProtocol: scrum note persistence and listings
- NotificationRepositoryProtocol: notification persistence and inbox queries
- NotificationChannelProtocol: live per-recipient push
- TimeAuthorityProtocol: single clock source
"""

from src.application.ports.notification_channel import (
    NotificationChannelProtocol,
    NotificationSubscriptionProtocol,
)
from src.application.ports.notification_repository import (
    NotificationRepositoryProtocol,
)
from src.application.ports.scrum_note_repository import ScrumNoteRepositoryProtocol
from src.application.ports.task_repository import TaskRepositoryProtocol
from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.ports.user_repository import (
    UserLookupProtocol,
    UserRepositoryProtocol,
)

__all__: list[str] = [
    "NotificationChannelProtocol",
    "NotificationRepositoryProtocol",
    "NotificationSubscriptionProtocol",
    "ScrumNoteRepositoryProtocol",
    "TaskRepositoryProtocol",
    "TimeAuthorityProtocol",
    "UserLookupProtocol",
    "UserRepositoryProtocol",
]
