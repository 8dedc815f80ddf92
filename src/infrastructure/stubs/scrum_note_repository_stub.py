"""Scrum note repository stub.

In-memory stub implementation for scrum note storage. A secondary index
on (user_id, date) mirrors the unique constraint of the production
table, so a second note for the same user and day replaces nothing and
raises DuplicateNoteError instead.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from uuid import UUID

from src.application.ports.scrum_note_repository import ScrumNoteRepositoryProtocol
from src.domain.errors.scrum_note import DuplicateNoteError
from src.domain.models.scrum_note import ScrumNote

logger = logging.getLogger(__name__)


class ScrumNoteRepositoryStub(ScrumNoteRepositoryProtocol):
    """In-memory stub implementation of the scrum note repository.

    Attributes:
        _notes: Map of note_id to ScrumNote.
        _by_user_day: Map of (user_id, date) to note_id.
        _lock: Async lock for concurrent access.
    """

    def __init__(self) -> None:
        """Initialize the repository stub."""
        self._notes: dict[UUID, ScrumNote] = {}
        self._by_user_day: dict[tuple[UUID, date], UUID] = {}
        self._lock = asyncio.Lock()

    async def find_by_id(self, note_id: UUID) -> ScrumNote | None:
        async with self._lock:
            return self._notes.get(note_id)

    async def find_by_user_and_date(
        self, user_id: UUID, note_date: date
    ) -> ScrumNote | None:
        async with self._lock:
            note_id = self._by_user_day.get((user_id, note_date))
            return self._notes.get(note_id) if note_id is not None else None

    async def find_by_user(self, user_id: UUID) -> list[ScrumNote]:
        async with self._lock:
            notes = [n for n in self._notes.values() if n.user_id == user_id]
            return sorted(notes, key=lambda n: n.date, reverse=True)

    async def find_by_date(self, note_date: date) -> list[ScrumNote]:
        async with self._lock:
            notes = [n for n in self._notes.values() if n.date == note_date]
            return sorted(notes, key=lambda n: n.created_at)

    async def save(self, note: ScrumNote) -> ScrumNote:
        """Insert or replace a note.

        Raises:
            DuplicateNoteError: Another note already covers the same
                user and day.
        """
        async with self._lock:
            key = (note.user_id, note.date)
            owner = self._by_user_day.get(key)
            if owner is not None and owner != note.id:
                raise DuplicateNoteError(note.user_id, note.date)

            self._notes[note.id] = note
            self._by_user_day[key] = note.id
            logger.debug(
                "Saved scrum note %s for user %s on %s",
                note.id,
                note.user_id,
                note.date.isoformat(),
            )
            return note

    async def delete(self, note_id: UUID) -> None:
        async with self._lock:
            note = self._notes.pop(note_id, None)
            if note is None:
                return
            self._by_user_day.pop((note.user_id, note.date), None)
            logger.debug("Deleted scrum note %s", note_id)

    # Test helper methods

    def clear(self) -> None:
        """Clear all notes (for testing)."""
        self._notes.clear()
        self._by_user_day.clear()

    def count(self) -> int:
        """Get the number of stored notes (for testing)."""
        return len(self._notes)
