"""Scrum note rules domain service.

Enforces the one-note-per-user-per-day invariant and the field and
ownership rules for scrum note edits.

Date handling:
    Notes are keyed by calendar day. Callers pass either a `date` or a
    `datetime`; datetimes are converted to UTC first (naive values are
    taken to be UTC) and reduced to that UTC day. The default is the
    current UTC day.
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from uuid import UUID

from src.domain.errors.scrum_note import DuplicateNoteError
from src.domain.errors.validation import ValidationError
from src.domain.models.scrum_note import NOTE_FIELD_MAX_LENGTH, ScrumNote
from src.domain.models.user import UserRole
from src.domain.services.authorization_policy import require_modify_scrum_note


def _utc_day(value: datetime) -> date:
    if value.tzinfo is None:
        return value.date()
    return value.astimezone(timezone.utc).date()


def normalize_note_date(value: date | datetime | None, now: datetime) -> date:
    """Reduce a note date to day granularity.

    Args:
        value: Requested date, datetime, or None for "today".
        now: Current time from the time authority.

    Returns:
        The calendar day the note covers.
    """
    if value is None:
        return _utc_day(now)
    if isinstance(value, datetime):
        return _utc_day(value)
    return value


def _validate_required(field_name: str, value: str | None) -> str:
    if value is None or not value.strip():
        raise ValidationError(field_name, "cannot be empty")
    trimmed = value.strip()
    if len(trimmed) > NOTE_FIELD_MAX_LENGTH:
        raise ValidationError(
            field_name, f"cannot exceed {NOTE_FIELD_MAX_LENGTH} characters"
        )
    return trimmed


def _validate_optional(field_name: str, value: str | None) -> str:
    if value is None:
        return ""
    trimmed = value.strip()
    if len(trimmed) > NOTE_FIELD_MAX_LENGTH:
        raise ValidationError(
            field_name, f"cannot exceed {NOTE_FIELD_MAX_LENGTH} characters"
        )
    return trimmed


def ensure_unique(
    user_id: UUID, note_date: date, existing: ScrumNote | None
) -> None:
    """Reject a second note for the same user and day.

    Args:
        user_id: The note owner.
        note_date: The normalized day.
        existing: Result of the (user_id, note_date) lookup.

    Raises:
        DuplicateNoteError: If `existing` is not None.
    """
    if existing is not None:
        raise DuplicateNoteError(user_id, note_date)


def new_note(
    note_id: UUID,
    user_id: UUID,
    note_date: date,
    what_i_did: str,
    next_steps: str,
    now: datetime,
    blockers: str | None = None,
) -> ScrumNote:
    """Build a scrum note for an already normalized and checked day.

    Raises:
        ValidationError: If a required field is empty or any field is
            longer than 2000 characters.
    """
    return ScrumNote(
        id=note_id,
        date=note_date,
        what_i_did=_validate_required("what_i_did", what_i_did),
        next_steps=_validate_required("next_steps", next_steps),
        blockers=_validate_optional("blockers", blockers),
        user_id=user_id,
        created_at=now,
        updated_at=now,
    )


def update_note(
    note: ScrumNote,
    actor_id: UUID,
    actor_role: UserRole,
    now: datetime,
    what_i_did: str | None = None,
    next_steps: str | None = None,
    blockers: str | None = None,
) -> ScrumNote:
    """Edit the text fields of a note.

    Only what_i_did, next_steps and blockers change; date and owner are
    immutable. Fields left as None are kept.

    Raises:
        UnauthorizedError: If the actor is neither admin nor owner.
        ValidationError: If a supplied field is invalid.
    """
    require_modify_scrum_note(actor_id, actor_role, note)

    changes: dict[str, str] = {}
    if what_i_did is not None:
        changes["what_i_did"] = _validate_required("what_i_did", what_i_did)
    if next_steps is not None:
        changes["next_steps"] = _validate_required("next_steps", next_steps)
    if blockers is not None:
        changes["blockers"] = _validate_optional("blockers", blockers)

    return replace(note, updated_at=now, **changes)
