"""
Standup Tracker - team task tracker with daily scrum notes

Tasks, daily stand-up notes, two user roles (ADMIN, INTERN) and
notifications delivered both as persisted records and over live
per-recipient channels.

Core rules:
- Only admins create, edit, assign and delete tasks
- A completed task never goes back to TODO
- One scrum note per user per day
- Notification delivery never invalidates the write that triggered it
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
