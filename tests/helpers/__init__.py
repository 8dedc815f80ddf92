"""Test helpers for tracker tests.

This package contains reusable test utilities and fake implementations
for dependency injection in unit tests.

Helpers:
    FakeTimeAuthority: Controllable time authority for deterministic tests
    make_user / make_task / make_note / make_notification: domain builders

Usage:
    from tests.helpers import FakeTimeAuthority, make_user
"""

from tests.helpers.builders import (
    T0,
    make_note,
    make_notification,
    make_task,
    make_user,
)
from tests.helpers.fake_time_authority import FakeTimeAuthority

__all__ = [
    "FakeTimeAuthority",
    "T0",
    "make_note",
    "make_notification",
    "make_task",
    "make_user",
]
