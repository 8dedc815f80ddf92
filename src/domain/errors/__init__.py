"""Domain errors for the task tracker.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from TrackerError.
"""

from src.domain.errors.authorization import UnauthorizedError
from src.domain.errors.not_found import NotFoundError
from src.domain.errors.scrum_note import DuplicateNoteError
from src.domain.errors.task import InvalidTransitionError, NotAssignableError
from src.domain.errors.validation import ValidationError

__all__: list[str] = [
    "DuplicateNoteError",
    "InvalidTransitionError",
    "NotAssignableError",
    "NotFoundError",
    "UnauthorizedError",
    "ValidationError",
]
