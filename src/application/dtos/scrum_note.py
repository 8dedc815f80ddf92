"""Scrum note use-case input records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID


@dataclass(frozen=True)
class CreateScrumNoteInput:
    """Input for writing a scrum note.

    Attributes:
        actor_id: The author, who becomes the owner.
        what_i_did: Required.
        next_steps: Required.
        blockers: Optional.
        note_date: Day covered; defaults to the current UTC day.
    """

    actor_id: UUID
    what_i_did: str
    next_steps: str
    blockers: str | None = None
    note_date: date | datetime | None = None


@dataclass(frozen=True)
class UpdateScrumNoteInput:
    """Input for editing a scrum note's text fields."""

    actor_id: UUID
    note_id: UUID
    what_i_did: str | None = None
    next_steps: str | None = None
    blockers: str | None = None


@dataclass(frozen=True)
class DeleteScrumNoteInput:
    """Input for deleting a scrum note."""

    actor_id: UUID
    note_id: UUID
