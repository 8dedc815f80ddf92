"""Unit tests for TaskService.

Tests the four-phase flow (load, authorize + mutate, persist, notify)
for every task use-case, with in-memory stubs and a frozen clock.
"""

from __future__ import annotations

from datetime import timedelta
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.application.dtos.task import (
    AssignTaskInput,
    CreateTaskInput,
    DeleteTaskInput,
    UpdateTaskInput,
    UpdateTaskStatusInput,
)
from src.application.services.task_service import TaskService
from src.domain.errors import (
    InvalidTransitionError,
    NotAssignableError,
    NotFoundError,
    UnauthorizedError,
)
from src.domain.models.notification import NotificationType
from src.domain.models.task import Task, TaskStatus
from src.domain.models.user import User
from src.infrastructure.stubs.notification_repository_stub import (
    NotificationRepositoryStub,
)
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub
from src.infrastructure.stubs.user_repository_stub import UserRepositoryStub
from tests.helpers import FakeTimeAuthority, make_task, make_user


async def _create(service: TaskService, admin: User, title: str = "Fix bug") -> Task:
    return await service.create_task(
        CreateTaskInput(actor_id=admin.id, title=title, description="Details")
    )


class TestCreateTask:
    """create_task."""

    @pytest.mark.asyncio
    async def test_admin_creates_todo_task(
        self,
        task_service: TaskService,
        task_repo: TaskRepositoryStub,
        admin: User,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        task = await _create(task_service, admin)

        assert task.status == TaskStatus.TODO
        assert task.creator_id == admin.id
        assert task.created_at == fake_time_authority.utcnow()
        assert await task_repo.find_by_id(task.id) == task

    @pytest.mark.asyncio
    async def test_intern_rejected_and_nothing_persisted(
        self, task_service: TaskService, task_repo: TaskRepositoryStub, intern: User
    ) -> None:
        with pytest.raises(UnauthorizedError):
            await _create(task_service, intern)

        assert task_repo.count() == 0

    @pytest.mark.asyncio
    async def test_unknown_actor_is_not_found(self, task_service: TaskService) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await task_service.create_task(
                CreateTaskInput(actor_id=uuid4(), title="Fix bug", description="x")
            )
        assert exc_info.value.kind == "User"

    @pytest.mark.asyncio
    async def test_creation_notifies_nobody(
        self,
        task_service: TaskService,
        notification_repo: NotificationRepositoryStub,
        admin: User,
    ) -> None:
        await _create(task_service, admin)
        assert notification_repo.count() == 0


class TestUpdateTask:
    """update_task."""

    @pytest.mark.asyncio
    async def test_admin_edits_details(
        self,
        task_service: TaskService,
        admin: User,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        task = await _create(task_service, admin)
        deadline = fake_time_authority.utcnow() + timedelta(days=3)
        fake_time_authority.advance(seconds=60)

        updated = await task_service.update_task(
            UpdateTaskInput(
                actor_id=admin.id, task_id=task.id, title="Renamed", deadline=deadline
            )
        )

        assert updated.title == "Renamed"
        assert updated.deadline == deadline
        assert updated.updated_at > task.updated_at

    @pytest.mark.asyncio
    async def test_missing_task_is_not_found(
        self, task_service: TaskService, admin: User
    ) -> None:
        with pytest.raises(NotFoundError) as exc_info:
            await task_service.update_task(
                UpdateTaskInput(actor_id=admin.id, task_id=uuid4(), title="x")
            )
        assert exc_info.value.kind == "Task"


class TestUpdateTaskStatus:
    """update_task_status and its creator notification."""

    @pytest.mark.asyncio
    async def test_assignee_move_notifies_creator(
        self,
        task_service: TaskService,
        notification_repo: NotificationRepositoryStub,
        admin: User,
        intern: User,
    ) -> None:
        task = await _create(task_service, admin)
        await task_service.assign_task(
            AssignTaskInput(actor_id=admin.id, task_id=task.id, assignee_id=intern.id)
        )

        moved = await task_service.update_task_status(
            UpdateTaskStatusInput(
                actor_id=intern.id, task_id=task.id, new_status=TaskStatus.IN_PROGRESS
            )
        )

        assert moved.status == TaskStatus.IN_PROGRESS
        (notice,) = await notification_repo.find_by_recipient(admin.id)
        assert notice.type == NotificationType.TASK_STATUS_UPDATED
        assert notice.metadata["old_status"] == "TODO"
        assert notice.metadata["new_status"] == "IN_PROGRESS"
        assert notice.redirect_url == f"/tasks/{task.id}"

    @pytest.mark.asyncio
    async def test_creator_moving_own_task_notifies_nobody(
        self,
        task_service: TaskService,
        notification_repo: NotificationRepositoryStub,
        admin: User,
    ) -> None:
        task = await _create(task_service, admin)

        await task_service.update_task_status(
            UpdateTaskStatusInput(
                actor_id=admin.id, task_id=task.id, new_status=TaskStatus.DONE
            )
        )

        assert notification_repo.count() == 0

    @pytest.mark.asyncio
    async def test_same_status_skips_save_and_notifications(
        self,
        task_service: TaskService,
        task_repo: TaskRepositoryStub,
        notification_repo: NotificationRepositoryStub,
        admin: User,
        second_admin: User,
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        task = await _create(task_service, admin)
        save = AsyncMock(side_effect=RuntimeError("storage offline"))
        monkeypatch.setattr(task_repo, "save", save)

        result = await task_service.update_task_status(
            UpdateTaskStatusInput(
                actor_id=second_admin.id, task_id=task.id, new_status=TaskStatus.TODO
            )
        )

        assert result == task
        save.assert_not_called()
        assert notification_repo.count() == 0

    @pytest.mark.asyncio
    async def test_done_to_todo_rejected_and_state_kept(
        self,
        task_service: TaskService,
        task_repo: TaskRepositoryStub,
        admin: User,
    ) -> None:
        task = make_task(creator_id=admin.id, status=TaskStatus.DONE)
        await task_repo.save(task)

        with pytest.raises(InvalidTransitionError):
            await task_service.update_task_status(
                UpdateTaskStatusInput(
                    actor_id=admin.id, task_id=task.id, new_status=TaskStatus.TODO
                )
            )

        assert (await task_repo.find_by_id(task.id)).status == TaskStatus.DONE

    @pytest.mark.asyncio
    async def test_unassigned_intern_rejected(
        self, task_service: TaskService, admin: User, intern: User
    ) -> None:
        task = await _create(task_service, admin)

        with pytest.raises(UnauthorizedError):
            await task_service.update_task_status(
                UpdateTaskStatusInput(
                    actor_id=intern.id, task_id=task.id, new_status=TaskStatus.DONE
                )
            )

    @pytest.mark.asyncio
    async def test_persist_failure_propagates_without_notification(
        self,
        user_repo: UserRepositoryStub,
        fanout,
        fake_time_authority: FakeTimeAuthority,
        notification_repo: NotificationRepositoryStub,
        admin: User,
        second_admin: User,
    ) -> None:
        task = make_task(creator_id=admin.id)
        task_repo = AsyncMock()
        task_repo.find_by_id.return_value = task
        task_repo.save.side_effect = RuntimeError("write failed")
        service = TaskService(task_repo, user_repo, fanout, fake_time_authority)

        with pytest.raises(RuntimeError, match="write failed"):
            await service.update_task_status(
                UpdateTaskStatusInput(
                    actor_id=second_admin.id,
                    task_id=task.id,
                    new_status=TaskStatus.DONE,
                )
            )

        assert notification_repo.count() == 0


class TestAssignTask:
    """assign_task and its assignee notification."""

    @pytest.mark.asyncio
    async def test_assignment_notifies_assignee_only(
        self,
        task_service: TaskService,
        notification_repo: NotificationRepositoryStub,
        admin: User,
        intern: User,
    ) -> None:
        task = await _create(task_service, admin)

        assigned = await task_service.assign_task(
            AssignTaskInput(actor_id=admin.id, task_id=task.id, assignee_id=intern.id)
        )

        assert assigned.assignee_id == intern.id
        assert assigned.status == TaskStatus.TODO
        stored = notification_repo.all()
        assert len(stored) == 1
        assert stored[0].recipient_id == intern.id
        assert stored[0].type == NotificationType.TASK_ASSIGNED
        assert stored[0].metadata["task_id"] == str(task.id)

    @pytest.mark.asyncio
    async def test_self_assignment_notifies_nobody(
        self,
        task_service: TaskService,
        notification_repo: NotificationRepositoryStub,
        admin: User,
    ) -> None:
        task = await _create(task_service, admin)

        await task_service.assign_task(
            AssignTaskInput(actor_id=admin.id, task_id=task.id, assignee_id=admin.id)
        )

        assert notification_repo.count() == 0

    @pytest.mark.asyncio
    async def test_inactive_assignee_rejected(
        self,
        task_service: TaskService,
        user_repo: UserRepositoryStub,
        admin: User,
    ) -> None:
        inactive = make_user(active=False)
        user_repo.add_user(inactive)
        task = await _create(task_service, admin)

        with pytest.raises(NotAssignableError):
            await task_service.assign_task(
                AssignTaskInput(
                    actor_id=admin.id, task_id=task.id, assignee_id=inactive.id
                )
            )

    @pytest.mark.asyncio
    async def test_unknown_assignee_is_not_found(
        self, task_service: TaskService, admin: User
    ) -> None:
        task = await _create(task_service, admin)

        with pytest.raises(NotFoundError) as exc_info:
            await task_service.assign_task(
                AssignTaskInput(actor_id=admin.id, task_id=task.id, assignee_id=uuid4())
            )
        assert exc_info.value.kind == "User"

    @pytest.mark.asyncio
    async def test_unknown_assignee_reported_before_role_check(
        self, task_service: TaskService, admin: User, intern: User
    ) -> None:
        task = await _create(task_service, admin)

        with pytest.raises(NotFoundError):
            await task_service.assign_task(
                AssignTaskInput(
                    actor_id=intern.id, task_id=task.id, assignee_id=uuid4()
                )
            )

    @pytest.mark.asyncio
    async def test_notification_failure_does_not_fail_assignment(
        self,
        task_repo: TaskRepositoryStub,
        user_repo: UserRepositoryStub,
        channel,
        fake_time_authority: FakeTimeAuthority,
        admin: User,
        intern: User,
    ) -> None:
        from src.application.services.notification_fanout import NotificationFanout

        broken_repo = AsyncMock()
        broken_repo.save.side_effect = ConnectionError("store down")
        fanout = NotificationFanout(broken_repo, channel, fake_time_authority)
        service = TaskService(task_repo, user_repo, fanout, fake_time_authority)
        task = await _create(service, admin)

        assigned = await service.assign_task(
            AssignTaskInput(actor_id=admin.id, task_id=task.id, assignee_id=intern.id)
        )

        assert assigned.assignee_id == intern.id
        assert (await task_repo.find_by_id(task.id)).assignee_id == intern.id


class TestDeleteTask:
    """delete_task."""

    @pytest.mark.asyncio
    async def test_admin_deletes_task(
        self, task_service: TaskService, task_repo: TaskRepositoryStub, admin: User
    ) -> None:
        task = await _create(task_service, admin)

        deleted = await task_service.delete_task(
            DeleteTaskInput(actor_id=admin.id, task_id=task.id)
        )

        assert deleted == task
        assert await task_repo.find_by_id(task.id) is None

    @pytest.mark.asyncio
    async def test_intern_cannot_delete(
        self,
        task_service: TaskService,
        task_repo: TaskRepositoryStub,
        admin: User,
        intern: User,
    ) -> None:
        task = await _create(task_service, admin)

        with pytest.raises(UnauthorizedError):
            await task_service.delete_task(
                DeleteTaskInput(actor_id=intern.id, task_id=task.id)
            )

        assert task_repo.count() == 1


class TestTaskQueries:
    """get_task, list_tasks and list_overdue_tasks."""

    @pytest.mark.asyncio
    async def test_get_task_not_found(self, task_service: TaskService) -> None:
        with pytest.raises(NotFoundError):
            await task_service.get_task(uuid4())

    @pytest.mark.asyncio
    async def test_list_tasks_filters(
        self,
        task_service: TaskService,
        task_repo: TaskRepositoryStub,
        admin: User,
        intern: User,
    ) -> None:
        mine_todo = make_task(creator_id=admin.id, assignee_id=intern.id)
        mine_done = make_task(
            creator_id=admin.id, assignee_id=intern.id, status=TaskStatus.DONE
        )
        other = make_task(creator_id=admin.id, status=TaskStatus.DONE)
        for task in (mine_todo, mine_done, other):
            await task_repo.save(task)

        assert len(await task_service.list_tasks()) == 3
        assert {t.id for t in await task_service.list_tasks(status=TaskStatus.DONE)} == {
            mine_done.id,
            other.id,
        }
        assert {t.id for t in await task_service.list_tasks(assignee_id=intern.id)} == {
            mine_todo.id,
            mine_done.id,
        }
        assert [
            t.id
            for t in await task_service.list_tasks(
                status=TaskStatus.TODO, assignee_id=intern.id
            )
        ] == [mine_todo.id]

    @pytest.mark.asyncio
    async def test_list_overdue_tasks(
        self,
        task_service: TaskService,
        task_repo: TaskRepositoryStub,
        admin: User,
        fake_time_authority: FakeTimeAuthority,
    ) -> None:
        now = fake_time_authority.utcnow()
        overdue = make_task(creator_id=admin.id, deadline=now - timedelta(hours=1))
        finished = make_task(
            creator_id=admin.id,
            deadline=now - timedelta(hours=1),
            status=TaskStatus.DONE,
        )
        upcoming = make_task(creator_id=admin.id, deadline=now + timedelta(hours=1))
        for task in (overdue, finished, upcoming):
            await task_repo.save(task)

        assert [t.id for t in await task_service.list_overdue_tasks()] == [overdue.id]
