"""Time Authority Protocol - the single clock of the tracker.

Deadline checks, scrum note days, notification timestamps and the
retention cutoff all read the time from an injected TimeAuthorityProtocol,
so a test can freeze or advance it.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class TimeAuthorityProtocol(ABC):
    """Clock port.

    Example:
        class DeadlineChecker:
            def __init__(self, time_authority: TimeAuthorityProtocol) -> None:
                self._time = time_authority

            def is_overdue(self, task: Task) -> bool:
                return task.deadline < self._time.utcnow()

    Implementations:
        SystemTimeAuthority in src/infrastructure/adapters/ (wall clock),
        FakeTimeAuthority in tests/helpers/ (frozen, advanceable).
    """

    @abstractmethod
    def now(self) -> datetime:
        """Current time, timezone-aware."""
        ...

    @abstractmethod
    def utcnow(self) -> datetime:
        """Current UTC time, always timezone-aware."""
        ...
