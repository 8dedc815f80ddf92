"""Configuration module for the tracker.

Available Configurations:
- TrackerConfig: Environment, notification retention, inbox paging and
  live channel buffering
"""

from src.config.tracker_config import (
    DEFAULT_TRACKER_CONFIG,
    TEST_TRACKER_CONFIG,
    TrackerConfig,
)

__all__ = [
    "DEFAULT_TRACKER_CONFIG",
    "TEST_TRACKER_CONFIG",
    "TrackerConfig",
]
