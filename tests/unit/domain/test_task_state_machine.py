"""Unit tests for the task state machine.

Key property: once DONE, a task never reaches TODO again, while
DONE -> IN_PROGRESS and any -> DONE stay reachable.
"""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from src.domain.errors import (
    InvalidTransitionError,
    NotAssignableError,
    UnauthorizedError,
    ValidationError,
)
from src.domain.models.task import TaskStatus
from src.domain.models.user import UserRole
from src.domain.services import task_state_machine as sm
from tests.helpers import T0, make_task, make_user

NOW = T0 + timedelta(hours=1)


class TestTransitionTable:
    """is_transition_allowed independent of the actor."""

    @pytest.mark.parametrize(
        ("from_status", "to_status"),
        [
            (TaskStatus.TODO, TaskStatus.IN_PROGRESS),
            (TaskStatus.IN_PROGRESS, TaskStatus.DONE),
            (TaskStatus.IN_PROGRESS, TaskStatus.TODO),
            (TaskStatus.DONE, TaskStatus.IN_PROGRESS),
            (TaskStatus.TODO, TaskStatus.DONE),
            (TaskStatus.DONE, TaskStatus.DONE),
        ],
    )
    def test_allowed(self, from_status: TaskStatus, to_status: TaskStatus) -> None:
        assert sm.is_transition_allowed(from_status, to_status)

    def test_done_to_todo_forbidden(self) -> None:
        assert not sm.is_transition_allowed(TaskStatus.DONE, TaskStatus.TODO)


class TestNewTask:
    """Task creation."""

    def test_creates_unassigned_todo_task(self) -> None:
        admin_id = uuid4()
        task_id = uuid4()

        task = sm.new_task(
            task_id, "  Fix bug  ", "Details", admin_id, UserRole.ADMIN, NOW
        )

        assert task.id == task_id
        assert task.title == "Fix bug"
        assert task.status == TaskStatus.TODO
        assert task.assignee_id is None
        assert task.creator_id == admin_id
        assert task.created_at == task.updated_at == NOW

    def test_intern_cannot_create(self) -> None:
        with pytest.raises(UnauthorizedError):
            sm.new_task(uuid4(), "Fix bug", "Details", uuid4(), UserRole.INTERN, NOW)

    @pytest.mark.parametrize("title", ["", "   ", "x" * 256])
    def test_rejects_invalid_title(self, title: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            sm.new_task(uuid4(), title, "Details", uuid4(), UserRole.ADMIN, NOW)
        assert exc_info.value.field == "title"

    def test_accepts_title_of_max_length(self) -> None:
        task = sm.new_task(uuid4(), "x" * 255, "Details", uuid4(), UserRole.ADMIN, NOW)
        assert len(task.title) == 255

    def test_rejects_empty_description(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            sm.new_task(uuid4(), "Fix bug", " ", uuid4(), UserRole.ADMIN, NOW)
        assert exc_info.value.field == "description"

    def test_rejects_past_deadline(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            sm.new_task(
                uuid4(),
                "Fix bug",
                "Details",
                uuid4(),
                UserRole.ADMIN,
                NOW,
                deadline=NOW - timedelta(seconds=1),
            )
        assert exc_info.value.field == "deadline"

    def test_deadline_equal_to_now_is_accepted(self) -> None:
        task = sm.new_task(
            uuid4(), "Fix bug", "Details", uuid4(), UserRole.ADMIN, NOW, deadline=NOW
        )
        assert task.deadline == NOW

    def test_naive_deadline_is_taken_as_utc(self) -> None:
        naive = datetime(2026, 2, 1, 12, 0)

        task = sm.new_task(
            uuid4(), "Fix bug", "Details", uuid4(), UserRole.ADMIN, NOW, deadline=naive
        )

        assert task.deadline == datetime(2026, 2, 1, 12, 0, tzinfo=timezone.utc)


class TestChangeStatus:
    """Status moves with authorization."""

    def test_assignee_moves_task_forward(self) -> None:
        intern_id = uuid4()
        task = make_task(creator_id=uuid4(), assignee_id=intern_id)

        moved = sm.change_status(
            task, TaskStatus.IN_PROGRESS, intern_id, UserRole.INTERN, NOW
        )

        assert moved.status == TaskStatus.IN_PROGRESS
        assert moved.updated_at == NOW
        assert task.status == TaskStatus.TODO

    def test_done_to_todo_rejected_even_for_admin(self) -> None:
        task = make_task(creator_id=uuid4(), status=TaskStatus.DONE)

        with pytest.raises(InvalidTransitionError) as exc_info:
            sm.change_status(task, TaskStatus.TODO, uuid4(), UserRole.ADMIN, NOW)

        assert exc_info.value.from_status == TaskStatus.DONE
        assert exc_info.value.to_status == TaskStatus.TODO

    def test_done_can_reopen_to_in_progress(self) -> None:
        task = make_task(creator_id=uuid4(), status=TaskStatus.DONE)

        moved = sm.change_status(
            task, TaskStatus.IN_PROGRESS, uuid4(), UserRole.ADMIN, NOW
        )

        assert moved.status == TaskStatus.IN_PROGRESS

    def test_same_status_returns_task_unchanged(self) -> None:
        task = make_task(creator_id=uuid4(), status=TaskStatus.IN_PROGRESS)

        moved = sm.change_status(
            task, TaskStatus.IN_PROGRESS, uuid4(), UserRole.ADMIN, NOW
        )

        assert moved is task

    def test_non_assignee_intern_rejected(self) -> None:
        task = make_task(creator_id=uuid4(), assignee_id=uuid4())

        with pytest.raises(UnauthorizedError):
            sm.change_status(task, TaskStatus.DONE, uuid4(), UserRole.INTERN, NOW)

    def test_authorization_checked_before_transition(self) -> None:
        """An unauthorized DONE -> TODO reports the authorization failure."""
        task = make_task(creator_id=uuid4(), status=TaskStatus.DONE)

        with pytest.raises(UnauthorizedError):
            sm.change_status(task, TaskStatus.TODO, uuid4(), UserRole.INTERN, NOW)


class TestUpdateDetails:
    """Title, description and deadline edits."""

    def test_updates_only_supplied_fields(self) -> None:
        task = make_task(creator_id=uuid4(), title="Old")

        updated = sm.update_details(
            task, uuid4(), UserRole.ADMIN, NOW, description="New description"
        )

        assert updated.title == "Old"
        assert updated.description == "New description"
        assert updated.updated_at == NOW

    def test_explicit_empty_title_rejected(self) -> None:
        task = make_task(creator_id=uuid4())

        with pytest.raises(ValidationError):
            sm.update_details(task, uuid4(), UserRole.ADMIN, NOW, title="")

    def test_intern_cannot_edit(self) -> None:
        intern_id = uuid4()
        task = make_task(creator_id=uuid4(), assignee_id=intern_id)

        with pytest.raises(UnauthorizedError):
            sm.update_details(task, intern_id, UserRole.INTERN, NOW, title="Mine")


class TestAssign:
    """Assignment rules."""

    def test_assigns_without_changing_status(self) -> None:
        assignee = make_user(UserRole.INTERN)
        task = make_task(creator_id=uuid4(), status=TaskStatus.IN_PROGRESS)

        assigned = sm.assign(task, assignee, uuid4(), UserRole.ADMIN, NOW)

        assert assigned.assignee_id == assignee.id
        assert assigned.status == TaskStatus.IN_PROGRESS

    def test_done_task_not_assignable(self) -> None:
        task = make_task(creator_id=uuid4(), status=TaskStatus.DONE)

        with pytest.raises(NotAssignableError):
            sm.assign(task, make_user(), uuid4(), UserRole.ADMIN, NOW)

    def test_inactive_assignee_rejected(self) -> None:
        task = make_task(creator_id=uuid4())

        with pytest.raises(NotAssignableError):
            sm.assign(task, make_user(active=False), uuid4(), UserRole.ADMIN, NOW)

    def test_intern_cannot_assign(self) -> None:
        task = make_task(creator_id=uuid4())

        with pytest.raises(UnauthorizedError):
            sm.assign(task, make_user(), uuid4(), UserRole.INTERN, NOW)

    def test_admin_can_be_assignee(self) -> None:
        admin = make_user(UserRole.ADMIN)
        task = make_task(creator_id=uuid4())

        assigned = sm.assign(task, admin, uuid4(), UserRole.ADMIN, NOW)

        assert assigned.assignee_id == admin.id
