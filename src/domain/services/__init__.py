"""Domain services for the task tracker.

Domain services contain business logic that doesn't naturally fit in
entities. They enforce the invariants and never perform I/O.

Available services:
- authorization_policy: role x action predicates and require_* guards
- task_state_machine: task creation, status moves, edits, assignment
- scrum_note_rules: one note per user per day, note edits
- notification_factory: deterministic notification constructors
"""

from src.domain.services import (
    authorization_policy,
    notification_factory,
    scrum_note_rules,
    task_state_machine,
)

__all__ = [
    "authorization_policy",
    "notification_factory",
    "scrum_note_rules",
    "task_state_machine",
]
