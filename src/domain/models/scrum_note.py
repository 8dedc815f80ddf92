"""Scrum note domain model.

A scrum note is one user's stand-up entry for one calendar day.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from uuid import UUID

NOTE_FIELD_MAX_LENGTH = 2000


@dataclass(frozen=True, eq=True)
class ScrumNote:
    """Daily stand-up entry.

    Attributes:
        id: Note identifier.
        date: The day the note covers (day granularity, immutable).
        what_i_did: What the owner worked on (required).
        next_steps: What the owner plans next (required).
        user_id: Owner of the note (immutable).
        created_at: Creation time (UTC).
        updated_at: Last edit time (UTC).
        blockers: Optional impediments, empty string when none.
    """

    id: UUID
    date: date
    what_i_did: str
    next_steps: str
    user_id: UUID
    created_at: datetime
    updated_at: datetime
    blockers: str = field(default="")

    def belongs_to(self, user_id: UUID) -> bool:
        return self.user_id == user_id
