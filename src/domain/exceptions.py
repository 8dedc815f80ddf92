"""Base exception classes for the tracker domain layer."""


class TrackerError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application:
    presentation callers translate TrackerError subclasses into their
    own transport representation, everything else is an internal failure.
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
