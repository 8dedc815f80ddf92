"""Scrum note repository port."""

from __future__ import annotations

from datetime import date
from typing import Protocol
from uuid import UUID

from src.domain.models.scrum_note import ScrumNote


class ScrumNoteRepositoryProtocol(Protocol):
    """Protocol for scrum note storage operations.

    `find_by_user_and_date` matches the exact calendar day; dates are
    normalized before they reach the repository.
    """

    async def find_by_id(self, note_id: UUID) -> ScrumNote | None:
        """Retrieve a note by id, None if unknown."""
        ...

    async def find_by_user_and_date(
        self, user_id: UUID, note_date: date
    ) -> ScrumNote | None:
        """Retrieve a user's note for a given day, None if there is none."""
        ...

    async def find_by_user(self, user_id: UUID) -> list[ScrumNote]:
        """Retrieve all notes of a user, most recent day first."""
        ...

    async def find_by_date(self, note_date: date) -> list[ScrumNote]:
        """Retrieve every note written for a day."""
        ...

    async def save(self, note: ScrumNote) -> ScrumNote:
        """Insert or replace a note.

        Returns:
            The stored note.
        """
        ...

    async def delete(self, note_id: UUID) -> None:
        """Remove a note. Unknown ids are ignored."""
        ...
