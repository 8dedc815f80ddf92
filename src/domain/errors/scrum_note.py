"""Scrum note errors."""

from __future__ import annotations

from datetime import date
from uuid import UUID

from src.domain.exceptions import TrackerError


class DuplicateNoteError(TrackerError):
    """Raised when a user already has a scrum note for a given day.

    The existing note is never merged or overwritten.

    Attributes:
        user_id: Owner of the existing note.
        note_date: The day already covered.
    """

    def __init__(self, user_id: UUID, note_date: date) -> None:
        self.user_id = user_id
        self.note_date = note_date
        super().__init__(
            f"User {user_id} already has a scrum note for {note_date.isoformat()}"
        )
