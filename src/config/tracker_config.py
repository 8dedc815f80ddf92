"""Tracker configuration.

Defines the tunables of the tracker with environment variable overrides
for deployment.

Environment Variables:
- TRACKER_ENVIRONMENT: "production" (JSON logs) or "development" (default: production)
- NOTIFICATION_RETENTION_DAYS: Age in days after which notifications are purged (default: 30)
- NOTIFICATION_PAGE_SIZE: Default inbox page size (default: 10)
- NOTIFICATION_CHANNEL_QUEUE_SIZE: Per-subscription live push buffer (default: 100)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENVIRONMENTS = ("production", "development", "test")


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_str_env(key: str, default: str) -> str:
    value = os.environ.get(key, "").strip().lower()
    return value or default


@dataclass(frozen=True)
class TrackerConfig:
    """Configuration for the tracker.

    Attributes:
        environment: Deployment environment; selects the log renderer.
        notification_retention_days: Notifications older than this many
            days are removed by the purge. Default: 30.
        notification_page_size: Number of notifications returned by an
            inbox listing when no limit is given. Default: 10.
        channel_queue_size: Buffered live pushes per subscription before
            new ones are dropped. Default: 100.
    """

    environment: str = "production"
    notification_retention_days: int = 30
    notification_page_size: int = 10
    channel_queue_size: int = 100

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {ENVIRONMENTS}, got {self.environment!r}"
            )
        if self.notification_retention_days < 1:
            raise ValueError(
                "notification_retention_days must be positive, "
                f"got {self.notification_retention_days}"
            )
        if self.notification_page_size < 1:
            raise ValueError(
                f"notification_page_size must be positive, got {self.notification_page_size}"
            )
        if self.channel_queue_size < 1:
            raise ValueError(
                f"channel_queue_size must be positive, got {self.channel_queue_size}"
            )

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @classmethod
    def from_environment(cls) -> "TrackerConfig":
        """Create config from environment variables with defaults.

        Returns:
            TrackerConfig with values from environment or defaults.
        """
        return cls(
            environment=_get_str_env("TRACKER_ENVIRONMENT", "production"),
            notification_retention_days=_get_int_env("NOTIFICATION_RETENTION_DAYS", 30),
            notification_page_size=_get_int_env("NOTIFICATION_PAGE_SIZE", 10),
            channel_queue_size=_get_int_env("NOTIFICATION_CHANNEL_QUEUE_SIZE", 100),
        )


# Pre-defined configurations for common use cases

# Default production config
DEFAULT_TRACKER_CONFIG = TrackerConfig()

# Testing config with small buffers so overflow is easy to provoke
TEST_TRACKER_CONFIG = TrackerConfig(
    environment="test",
    notification_retention_days=7,
    notification_page_size=5,
    channel_queue_size=3,
)
