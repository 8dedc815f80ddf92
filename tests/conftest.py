"""
Pytest configuration and shared fixtures for tracker tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

import pytest

from src.application.services.notification_fanout import NotificationFanout
from src.application.services.notification_inbox_service import (
    NotificationInboxService,
)
from src.application.services.scrum_note_service import ScrumNoteService
from src.application.services.task_service import TaskService
from src.application.services.user_service import UserService
from src.bootstrap.container import TrackerContainer, build_container
from src.config.tracker_config import TEST_TRACKER_CONFIG
from src.domain.models.user import User, UserRole
from src.infrastructure.adapters.in_memory_notification_channel import (
    InMemoryNotificationChannel,
)
from src.infrastructure.stubs.notification_repository_stub import (
    NotificationRepositoryStub,
)
from src.infrastructure.stubs.scrum_note_repository_stub import (
    ScrumNoteRepositoryStub,
)
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from src.infrastructure.stubs.user_repository_stub import UserRepositoryStub
from tests.helpers import FakeTimeAuthority, make_user


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def fake_time_authority() -> FakeTimeAuthority:
    """Clock frozen at 2026-01-01T00:00:00 UTC."""
    return FakeTimeAuthority()


# Users


@pytest.fixture
def admin() -> User:
    return make_user(UserRole.ADMIN, name="Alice")


@pytest.fixture
def second_admin() -> User:
    return make_user(UserRole.ADMIN, name="Carol")


@pytest.fixture
def intern() -> User:
    return make_user(UserRole.INTERN, name="Bob")


@pytest.fixture
def other_intern() -> User:
    return make_user(UserRole.INTERN, name="Dave")


# Infrastructure


@pytest.fixture
def user_repo(
    admin: User, second_admin: User, intern: User, other_intern: User
) -> UserRepositoryStub:
    repo = UserRepositoryStub()
    for user in (admin, second_admin, intern, other_intern):
        repo.add_user(user)
    return repo


@pytest.fixture
def task_repo() -> TaskRepositoryStub:
    return TaskRepositoryStub()


@pytest.fixture
def note_repo() -> ScrumNoteRepositoryStub:
    return ScrumNoteRepositoryStub()


@pytest.fixture
def notification_repo() -> NotificationRepositoryStub:
    return NotificationRepositoryStub()


@pytest.fixture
def channel() -> InMemoryNotificationChannel:
    return InMemoryNotificationChannel(max_queue_size=10)


# Services


@pytest.fixture
def fanout(
    notification_repo: NotificationRepositoryStub,
    channel: InMemoryNotificationChannel,
    fake_time_authority: FakeTimeAuthority,
) -> NotificationFanout:
    return NotificationFanout(notification_repo, channel, fake_time_authority)


@pytest.fixture
def task_service(
    task_repo: TaskRepositoryStub,
    user_repo: UserRepositoryStub,
    fanout: NotificationFanout,
    fake_time_authority: FakeTimeAuthority,
) -> TaskService:
    return TaskService(task_repo, user_repo, fanout, fake_time_authority)


@pytest.fixture
def scrum_note_service(
    note_repo: ScrumNoteRepositoryStub,
    user_repo: UserRepositoryStub,
    fanout: NotificationFanout,
    fake_time_authority: FakeTimeAuthority,
) -> ScrumNoteService:
    return ScrumNoteService(note_repo, user_repo, fanout, fake_time_authority)


@pytest.fixture
def inbox_service(
    notification_repo: NotificationRepositoryStub,
    fake_time_authority: FakeTimeAuthority,
) -> NotificationInboxService:
    return NotificationInboxService(
        notification_repo, fake_time_authority, page_size=5, retention_days=30
    )


@pytest.fixture
def user_service(
    user_repo: UserRepositoryStub, fake_time_authority: FakeTimeAuthority
) -> UserService:
    return UserService(user_repo, fake_time_authority)


@pytest.fixture
def container(fake_time_authority: FakeTimeAuthority) -> TrackerContainer:
    """Fully wired tracker on in-memory infrastructure."""
    return build_container(
        config=TEST_TRACKER_CONFIG, time_authority=fake_time_authority
    )
