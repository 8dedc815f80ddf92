"""
Domain layer - Pure business logic for the task tracker.

This layer contains:
- Domain models (User, Task, ScrumNote, Notification)
- Domain services (authorization, task state machine, note rules,
  notification factory)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure,
bootstrap or config. Only stdlib and typing imports are allowed.
"""

from src.domain.exceptions import TrackerError

__all__: list[str] = ["TrackerError"]
