"""Task use-case service.

Orchestrates every task mutation through the same four phases:

1. Load      - task and users; a missing one raises NotFoundError
2. Mutate    - authorization policy + task state machine, in memory
3. Persist   - task repository; failures propagate
4. Notify    - NotificationFanout, best-effort

Fan-out rules:
- assign_task notifies the new assignee only
- update_task_status notifies the task creator, only when the actor is
  not the creator and the status actually changed
- create_task, update_task and delete_task notify nobody
"""

from __future__ import annotations

from collections.abc import Callable
from functools import partial
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from structlog import get_logger

from src.application.services.entity_loader import load_task, load_user
from src.application.services.notification_fanout import (
    FanoutPlan,
    resolve_recipients,
)
from src.domain.models.notification import NotificationType
from src.domain.models.task import Task, TaskStatus
from src.domain.services import notification_factory, task_state_machine
from src.domain.services.authorization_policy import require_delete_task

if TYPE_CHECKING:
    from src.application.dtos.task import (
        AssignTaskInput,
        CreateTaskInput,
        DeleteTaskInput,
        UpdateTaskInput,
        UpdateTaskStatusInput,
    )
    from src.application.ports.task_repository import TaskRepositoryProtocol
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.ports.user_repository import UserLookupProtocol
    from src.application.services.notification_fanout import NotificationFanout

logger = get_logger(__name__)


class TaskService:
    """Use-cases for creating, editing, moving, assigning and deleting tasks.

    Example:
        >>> service = TaskService(task_repo, user_lookup, fanout, time_authority)
        >>> task = await service.create_task(
        ...     CreateTaskInput(actor_id=alice.id, title="Fix bug", description="...")
        ... )
    """

    def __init__(
        self,
        task_repo: TaskRepositoryProtocol,
        user_lookup: UserLookupProtocol,
        fanout: NotificationFanout,
        time_authority: TimeAuthorityProtocol,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        """Initialize the task service.

        Args:
            task_repo: Task persistence.
            user_lookup: User lookups for actors and assignees.
            fanout: Persist-then-notify pipeline.
            time_authority: Clock for deadlines and timestamps.
            id_factory: Generator for new task ids.
        """
        self._task_repo = task_repo
        self._users = user_lookup
        self._fanout = fanout
        self._time = time_authority
        self._new_id = id_factory

    async def create_task(self, request: CreateTaskInput) -> Task:
        """Create an unassigned TODO task.

        Raises:
            NotFoundError: Actor does not exist.
            UnauthorizedError: Actor is not an admin.
            ValidationError: Title, description or deadline invalid.
        """
        log = logger.bind(actor_id=str(request.actor_id))

        actor = await load_user(self._users, request.actor_id)
        task = task_state_machine.new_task(
            task_id=self._new_id(),
            title=request.title,
            description=request.description,
            actor_id=actor.id,
            actor_role=actor.role,
            now=self._time.utcnow(),
            deadline=request.deadline,
        )

        saved = await self._fanout.commit("create_task", self._task_repo.save(task))
        log.info("task_created", task_id=str(saved.id))
        return saved

    async def update_task(self, request: UpdateTaskInput) -> Task:
        """Edit a task's title, description and/or deadline.

        Raises:
            NotFoundError: Task or actor does not exist.
            UnauthorizedError: Actor is not an admin.
            ValidationError: A supplied field is invalid.
        """
        log = logger.bind(
            actor_id=str(request.actor_id), task_id=str(request.task_id)
        )

        task = await load_task(self._task_repo, request.task_id)
        actor = await load_user(self._users, request.actor_id)
        updated = task_state_machine.update_details(
            task,
            actor_id=actor.id,
            actor_role=actor.role,
            now=self._time.utcnow(),
            title=request.title,
            description=request.description,
            deadline=request.deadline,
        )

        saved = await self._fanout.commit(
            "update_task", self._task_repo.save(updated)
        )
        log.info("task_updated")
        return saved

    async def update_task_status(self, request: UpdateTaskStatusInput) -> Task:
        """Move a task to another board column.

        Raises:
            NotFoundError: Task or actor does not exist.
            UnauthorizedError: Actor is neither admin nor assignee.
            InvalidTransitionError: Requested move is DONE -> TODO.
        """
        log = logger.bind(
            actor_id=str(request.actor_id), task_id=str(request.task_id)
        )

        task = await load_task(self._task_repo, request.task_id)
        actor = await load_user(self._users, request.actor_id)
        old_status = task.status
        moved = task_state_machine.change_status(
            task,
            request.new_status,
            actor_id=actor.id,
            actor_role=actor.role,
            now=self._time.utcnow(),
        )

        if moved is task:
            log.debug("task_status_unchanged", status=old_status.value)
            return task

        async def plan_for(saved: Task) -> FanoutPlan | None:
            return FanoutPlan(
                notification_type=NotificationType.TASK_STATUS_UPDATED,
                recipient_ids=resolve_recipients([saved.creator_id], actor.id),
                build=partial(
                    notification_factory.task_status_updated,
                    task_id=saved.id,
                    task_title=saved.title,
                    old_status=old_status,
                    new_status=saved.status,
                    actor_name=actor.name,
                    actor_id=actor.id,
                ),
            )

        saved = await self._fanout.commit(
            "update_task_status", self._task_repo.save(moved), plan_for
        )
        log.info(
            "task_status_updated",
            old_status=old_status.value,
            new_status=saved.status.value,
        )
        return saved

    async def assign_task(self, request: AssignTaskInput) -> Task:
        """Assign a task to an active user.

        Raises:
            NotFoundError: Task, assignee or actor does not exist.
            UnauthorizedError: Actor is not an admin.
            NotAssignableError: Task is DONE or assignee is inactive.
        """
        log = logger.bind(
            actor_id=str(request.actor_id),
            task_id=str(request.task_id),
            assignee_id=str(request.assignee_id),
        )

        task = await load_task(self._task_repo, request.task_id)
        assignee = await load_user(self._users, request.assignee_id)
        actor = await load_user(self._users, request.actor_id)
        assigned = task_state_machine.assign(
            task,
            assignee,
            actor_id=actor.id,
            actor_role=actor.role,
            now=self._time.utcnow(),
        )

        async def plan_for(saved: Task) -> FanoutPlan | None:
            return FanoutPlan(
                notification_type=NotificationType.TASK_ASSIGNED,
                recipient_ids=resolve_recipients([assignee.id], actor.id),
                build=partial(
                    notification_factory.task_assigned,
                    task_id=saved.id,
                    task_title=saved.title,
                    actor_name=actor.name,
                    actor_id=actor.id,
                ),
            )

        saved = await self._fanout.commit(
            "assign_task", self._task_repo.save(assigned), plan_for
        )
        log.info("task_assigned")
        return saved

    async def delete_task(self, request: DeleteTaskInput) -> Task:
        """Delete a task.

        Returns:
            The task as it was before deletion.

        Raises:
            NotFoundError: Task or actor does not exist.
            UnauthorizedError: Actor is not an admin.
        """
        task = await load_task(self._task_repo, request.task_id)
        actor = await load_user(self._users, request.actor_id)
        require_delete_task(actor.id, actor.role)

        await self._fanout.commit("delete_task", self._task_repo.delete(task.id))
        logger.info(
            "task_deleted", actor_id=str(actor.id), task_id=str(task.id)
        )
        return task

    async def get_task(self, task_id: UUID) -> Task:
        """Retrieve a task.

        Raises:
            NotFoundError: Task does not exist.
        """
        return await load_task(self._task_repo, task_id)

    async def list_tasks(
        self,
        status: TaskStatus | None = None,
        assignee_id: UUID | None = None,
    ) -> list[Task]:
        """List tasks, optionally filtered by status and/or assignee."""
        if assignee_id is not None:
            tasks = await self._task_repo.find_by_assignee(assignee_id)
            if status is not None:
                tasks = [t for t in tasks if t.status == status]
            return tasks
        if status is not None:
            return await self._task_repo.find_by_status(status)
        return await self._task_repo.find_all()

    async def list_overdue_tasks(self) -> list[Task]:
        """List unfinished tasks whose deadline has passed."""
        now = self._time.utcnow()
        return [t for t in await self._task_repo.find_all() if t.is_overdue(now)]
