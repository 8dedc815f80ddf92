"""Field validation errors."""

from __future__ import annotations

from src.domain.exceptions import TrackerError


class ValidationError(TrackerError):
    """Raised when a field value violates a domain constraint.

    Attributes:
        field: Name of the offending field.
        reason: Human-readable description of the violation.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")
