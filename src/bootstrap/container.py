"""Bootstrap wiring for the tracker services.

`build_container` is the composition root: it picks the infrastructure
implementations (in-memory stubs, in-memory channel, system clock) and
hands them to the application services through their ports. The live
channel is created once here and shared by every service, so it has
process lifetime.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID, uuid4

from src.application.ports.time_authority import TimeAuthorityProtocol
from src.application.services.notification_fanout import NotificationFanout
from src.application.services.notification_inbox_service import (
    NotificationInboxService,
)
from src.application.services.scrum_note_service import ScrumNoteService
from src.application.services.task_service import TaskService
from src.application.services.user_service import UserService
from src.bootstrap.logging import configure_logging
from src.config.tracker_config import TrackerConfig
from src.infrastructure.adapters.in_memory_notification_channel import (
    InMemoryNotificationChannel,
)
from src.infrastructure.adapters.system_time_authority import SystemTimeAuthority
from src.infrastructure.stubs.notification_repository_stub import (
    NotificationRepositoryStub,
)
from src.infrastructure.stubs.scrum_note_repository_stub import (
    ScrumNoteRepositoryStub,
)
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from src.infrastructure.stubs.user_repository_stub import UserRepositoryStub


@dataclass(frozen=True)
class TrackerContainer:
    """Every wired component of a running tracker."""

    config: TrackerConfig
    time_authority: TimeAuthorityProtocol
    users: UserRepositoryStub
    tasks: TaskRepositoryStub
    scrum_notes: ScrumNoteRepositoryStub
    notifications: NotificationRepositoryStub
    channel: InMemoryNotificationChannel
    fanout: NotificationFanout
    task_service: TaskService
    scrum_note_service: ScrumNoteService
    inbox_service: NotificationInboxService
    user_service: UserService


def build_container(
    config: TrackerConfig | None = None,
    time_authority: TimeAuthorityProtocol | None = None,
    id_factory: Callable[[], UUID] = uuid4,
    configure_logs: bool = False,
) -> TrackerContainer:
    """Wire a tracker.

    Args:
        config: Configuration; read from the environment when None.
        time_authority: Clock; the system clock when None.
        id_factory: Generator for every new entity id.
        configure_logs: Also configure structlog for config.environment.
    """
    config = config or TrackerConfig.from_environment()
    time_authority = time_authority or SystemTimeAuthority()

    if configure_logs:
        configure_logging(config)

    users = UserRepositoryStub()
    tasks = TaskRepositoryStub()
    scrum_notes = ScrumNoteRepositoryStub()
    notifications = NotificationRepositoryStub()
    channel = InMemoryNotificationChannel(max_queue_size=config.channel_queue_size)
    fanout = NotificationFanout(notifications, channel, time_authority, id_factory)

    return TrackerContainer(
        config=config,
        time_authority=time_authority,
        users=users,
        tasks=tasks,
        scrum_notes=scrum_notes,
        notifications=notifications,
        channel=channel,
        fanout=fanout,
        task_service=TaskService(tasks, users, fanout, time_authority, id_factory),
        scrum_note_service=ScrumNoteService(
            scrum_notes, users, fanout, time_authority, id_factory
        ),
        inbox_service=NotificationInboxService(
            notifications,
            time_authority,
            page_size=config.notification_page_size,
            retention_days=config.notification_retention_days,
        ),
        user_service=UserService(users, time_authority),
    )


_container: TrackerContainer | None = None


def get_container() -> TrackerContainer:
    """Get the process-wide tracker, wiring it on first use."""
    global _container
    if _container is None:
        _container = build_container(configure_logs=True)
    return _container


def reset_container() -> None:
    """Reset the process-wide tracker (for testing)."""
    global _container
    if _container is not None:
        _container.channel.close_all()
    _container = None
