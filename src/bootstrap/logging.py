"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from src.config.tracker_config import TrackerConfig
from src.infrastructure.observability import configure_structlog


def configure_logging(config: TrackerConfig) -> None:
    """Configure structlog for the configured environment.

    Anything but production gets the console renderer.
    """
    configure_structlog(environment=config.environment)


__all__ = ["configure_logging"]
