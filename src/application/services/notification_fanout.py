"""Notification fan-out pipeline.

Every mutating use-case ends with the same two phases:

    3. Persist - the primary write. Its failure propagates unchanged.
    4. Notify  - best-effort. Entered only after a successful persist.

`NotificationFanout.commit` runs both, so use-cases never hand-roll the
"log and swallow" block. The notify phase is split into recipient
resolution (a FanoutPlan listing recipients) and per-recipient delivery
(build, persist, push). Each recipient is its own failure domain: a
failure for one is logged and the loop moves on to the next.

Delivery guarantees:
- at most one notification per recipient per event
- the acting user is never notified of their own action
- nothing raised in the notify phase reaches the caller
- no retries; a lost push is recovered by the recipient's next pull
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, TypeVar
from uuid import UUID, uuid4

from structlog import get_logger

from src.application.dtos.notification import NotificationPayload
from src.domain.models.notification import Notification, NotificationType

if TYPE_CHECKING:
    from src.application.ports.notification_channel import (
        NotificationChannelProtocol,
    )
    from src.application.ports.notification_repository import (
        NotificationRepositoryProtocol,
    )
    from src.application.ports.time_authority import TimeAuthorityProtocol

logger = get_logger(__name__)

T = TypeVar("T")

# Called as build(recipient_id, notification_id=..., created_at=...)
NotificationBuilder = Callable[..., Notification]

STAGE_BUILD = "build"
STAGE_PERSIST = "persist"
STAGE_PUBLISH = "publish"


def resolve_recipients(candidates: Iterable[UUID], actor_id: UUID) -> tuple[UUID, ...]:
    """Turn candidate recipient ids into the final recipient list.

    Order is preserved, duplicates are dropped and the actor is removed.

    Args:
        candidates: Recipient ids in emission order.
        actor_id: The user who triggered the event.

    Returns:
        Unique recipient ids, excluding the actor.
    """
    seen: set[UUID] = set()
    recipients: list[UUID] = []
    for candidate in candidates:
        if candidate == actor_id or candidate in seen:
            continue
        seen.add(candidate)
        recipients.append(candidate)
    return tuple(recipients)


@dataclass(frozen=True)
class FanoutPlan:
    """Who to notify about one event, and how to build each notice.

    Attributes:
        notification_type: Type of the notifications to emit.
        recipient_ids: Resolved recipients (see resolve_recipients).
        build: Factory producing one recipient's notification.
    """

    notification_type: NotificationType
    recipient_ids: tuple[UUID, ...]
    build: NotificationBuilder


@dataclass(frozen=True)
class FanoutReport:
    """Outcome of delivering one plan.

    Attributes:
        persisted: Recipients whose notification was stored.
        pushed: Recipients whose notification was also published live.
        failed: Recipients for which any stage raised.
    """

    persisted: int = 0
    pushed: int = 0
    failed: int = 0


class NotificationFanout:
    """Best-effort notification pipeline wrapped around a persistence call.

    The channel and repository are injected with process lifetime; the
    pipeline itself holds no per-request state.

    Example:
        >>> saved = await fanout.commit(
        ...     "assign_task",
        ...     task_repo.save(task),
        ...     plan_for=build_assignment_plan,
        ... )
    """

    def __init__(
        self,
        notification_repo: NotificationRepositoryProtocol,
        channel: NotificationChannelProtocol,
        time_authority: TimeAuthorityProtocol,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        """Initialize the pipeline.

        Args:
            notification_repo: Store for created notifications.
            channel: Live per-recipient push channel.
            time_authority: Clock for notification timestamps.
            id_factory: Generator for notification ids.
        """
        self._notification_repo = notification_repo
        self._channel = channel
        self._time = time_authority
        self._new_id = id_factory

    async def commit(
        self,
        operation: str,
        persist: Awaitable[T],
        plan_for: Callable[[T], Awaitable[FanoutPlan | None]] | None = None,
    ) -> T:
        """Run the persist phase, then the best-effort notify phase.

        Args:
            operation: Use-case name, for logging.
            persist: The primary write. Awaited first; any exception it
                raises propagates to the caller.
            plan_for: Optional coroutine function receiving the persisted
                result and returning the plan (or None for "nobody").

        Returns:
            The persisted result, regardless of notification outcome.
        """
        result = await persist

        if plan_for is None:
            return result

        try:
            plan = await plan_for(result)
        except Exception as e:
            logger.warning(
                "notification_planning_failed",
                operation=operation,
                error_type=type(e).__name__,
                error=str(e),
            )
            return result

        if plan is not None and plan.recipient_ids:
            report = await self.deliver(plan)
            logger.debug(
                "notification_fanout_completed",
                operation=operation,
                notification_type=plan.notification_type.value,
                recipients=len(plan.recipient_ids),
                persisted=report.persisted,
                pushed=report.pushed,
                failed=report.failed,
            )

        return result

    async def deliver(self, plan: FanoutPlan) -> FanoutReport:
        """Deliver a plan to each recipient independently.

        Never raises.

        Returns:
            Per-stage counts for the plan.
        """
        persisted = pushed = failed = 0
        for recipient_id in plan.recipient_ids:
            outcome = await self._deliver_one(plan, recipient_id)
            if outcome is None:
                failed += 1
                continue
            persisted += 1
            if outcome:
                pushed += 1
            else:
                failed += 1
        return FanoutReport(persisted=persisted, pushed=pushed, failed=failed)

    async def _deliver_one(self, plan: FanoutPlan, recipient_id: UUID) -> bool | None:
        """Build, store and push one recipient's notification.

        Returns:
            None if nothing was stored, False if stored but not pushed,
            True if stored and pushed.
        """
        log = logger.bind(
            recipient_id=str(recipient_id),
            notification_type=plan.notification_type.value,
        )

        stage = STAGE_BUILD
        try:
            created_at: datetime = self._time.utcnow()
            notification = plan.build(
                recipient_id,
                notification_id=self._new_id(),
                created_at=created_at,
            )
            stage = STAGE_PERSIST
            stored = await self._notification_repo.save(notification)
        except Exception as e:
            log.warning(
                "notification_delivery_failed",
                stage=stage,
                error_type=type(e).__name__,
                error=str(e),
            )
            return None

        try:
            payload = NotificationPayload.from_notification(stored)
            self._channel.publish(recipient_id, payload)
        except Exception as e:
            log.warning(
                "notification_delivery_failed",
                stage=STAGE_PUBLISH,
                notification_id=str(stored.id),
                error_type=type(e).__name__,
                error=str(e),
            )
            return False

        log.debug("notification_delivered", notification_id=str(stored.id))
        return True
