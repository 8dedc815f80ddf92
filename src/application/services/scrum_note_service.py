"""Scrum note use-case service.

Daily standup notes, one per user per calendar day.

Fan-out rule:
    When an INTERN creates a note, every active ADMIN receives a
    SCRUM_NOTE_CREATED notification. Notes written by admins, and
    updates or deletions of any note, notify nobody.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime
from functools import partial
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from structlog import get_logger

from src.application.services.entity_loader import load_scrum_note, load_user
from src.application.services.notification_fanout import (
    FanoutPlan,
    resolve_recipients,
)
from src.domain.models.notification import NotificationType
from src.domain.models.scrum_note import ScrumNote
from src.domain.models.user import User, UserRole
from src.domain.services import notification_factory, scrum_note_rules
from src.domain.services.authorization_policy import require_delete_scrum_note

if TYPE_CHECKING:
    from src.application.dtos.scrum_note import (
        CreateScrumNoteInput,
        DeleteScrumNoteInput,
        UpdateScrumNoteInput,
    )
    from src.application.ports.scrum_note_repository import (
        ScrumNoteRepositoryProtocol,
    )
    from src.application.ports.time_authority import TimeAuthorityProtocol
    from src.application.ports.user_repository import UserLookupProtocol
    from src.application.services.notification_fanout import NotificationFanout

logger = get_logger(__name__)


class ScrumNoteService:
    """Use-cases for writing, editing, deleting and reading scrum notes."""

    def __init__(
        self,
        note_repo: ScrumNoteRepositoryProtocol,
        user_lookup: UserLookupProtocol,
        fanout: NotificationFanout,
        time_authority: TimeAuthorityProtocol,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._note_repo = note_repo
        self._users = user_lookup
        self._fanout = fanout
        self._time = time_authority
        self._new_id = id_factory

    async def create_scrum_note(self, request: CreateScrumNoteInput) -> ScrumNote:
        """Write the actor's note for a day (today by default).

        Raises:
            NotFoundError: Actor does not exist.
            DuplicateNoteError: Actor already has a note for that day.
            ValidationError: A field is empty or too long.
        """
        log = logger.bind(actor_id=str(request.actor_id))

        actor = await load_user(self._users, request.actor_id)
        now = self._time.utcnow()
        note_date = scrum_note_rules.normalize_note_date(request.note_date, now)
        existing = await self._note_repo.find_by_user_and_date(actor.id, note_date)
        scrum_note_rules.ensure_unique(actor.id, note_date, existing)
        note = scrum_note_rules.new_note(
            note_id=self._new_id(),
            user_id=actor.id,
            note_date=note_date,
            what_i_did=request.what_i_did,
            next_steps=request.next_steps,
            now=now,
            blockers=request.blockers,
        )

        saved = await self._fanout.commit(
            "create_scrum_note",
            self._note_repo.save(note),
            partial(self._plan_note_created, actor),
        )
        log.info(
            "scrum_note_created",
            note_id=str(saved.id),
            note_date=saved.date.isoformat(),
        )
        return saved

    async def _plan_note_created(
        self, actor: User, saved: ScrumNote
    ) -> FanoutPlan | None:
        if actor.role != UserRole.INTERN:
            return None

        admins = await self._users.find_all_active_by_role(UserRole.ADMIN)
        return FanoutPlan(
            notification_type=NotificationType.SCRUM_NOTE_CREATED,
            recipient_ids=resolve_recipients((a.id for a in admins), actor.id),
            build=partial(
                notification_factory.scrum_note_created,
                scrum_note_id=saved.id,
                actor_name=actor.name,
                actor_id=actor.id,
                note_date=saved.date,
            ),
        )

    async def update_scrum_note(self, request: UpdateScrumNoteInput) -> ScrumNote:
        """Edit a note's text fields.

        Raises:
            NotFoundError: Note or actor does not exist.
            UnauthorizedError: Actor is neither admin nor owner.
            ValidationError: A supplied field is invalid.
        """
        note = await load_scrum_note(self._note_repo, request.note_id)
        actor = await load_user(self._users, request.actor_id)
        updated = scrum_note_rules.update_note(
            note,
            actor_id=actor.id,
            actor_role=actor.role,
            now=self._time.utcnow(),
            what_i_did=request.what_i_did,
            next_steps=request.next_steps,
            blockers=request.blockers,
        )

        saved = await self._fanout.commit(
            "update_scrum_note", self._note_repo.save(updated)
        )
        logger.info(
            "scrum_note_updated", actor_id=str(actor.id), note_id=str(saved.id)
        )
        return saved

    async def delete_scrum_note(self, request: DeleteScrumNoteInput) -> ScrumNote:
        """Delete a note.

        Returns:
            The note as it was before deletion.

        Raises:
            NotFoundError: Note or actor does not exist.
            UnauthorizedError: Actor is neither admin nor owner.
        """
        note = await load_scrum_note(self._note_repo, request.note_id)
        actor = await load_user(self._users, request.actor_id)
        require_delete_scrum_note(actor.id, actor.role, note)

        await self._fanout.commit(
            "delete_scrum_note", self._note_repo.delete(note.id)
        )
        logger.info(
            "scrum_note_deleted", actor_id=str(actor.id), note_id=str(note.id)
        )
        return note

    async def get_scrum_note(self, note_id: UUID) -> ScrumNote:
        """Retrieve a note.

        Raises:
            NotFoundError: Note does not exist.
        """
        return await load_scrum_note(self._note_repo, note_id)

    async def list_user_notes(self, user_id: UUID) -> list[ScrumNote]:
        """List a user's notes, most recent day first."""
        return await self._note_repo.find_by_user(user_id)

    async def list_notes_for_date(
        self, note_date: date | datetime
    ) -> list[ScrumNote]:
        """List every note written for a day."""
        day = scrum_note_rules.normalize_note_date(note_date, self._time.utcnow())
        return await self._note_repo.find_by_date(day)

    async def list_today_notes(self) -> list[ScrumNote]:
        """List every note written for the current UTC day."""
        return await self._note_repo.find_by_date(self._time.utcnow().date())
