"""Structured logging configuration with structlog.

Application services log through structlog; the in-memory stubs log
through the standard library. `configure_structlog` sets both up with
the same level so one LOG_LEVEL controls every log line.

Log Entry Format (production):
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "warning",
        "event": "notification_delivery_failed",
        "correlation_id": "uuid",
        "recipient_id": "uuid",
        "notification_type": "TASK_ASSIGNED",
        "stage": "persist",
        ...additional context
    }

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
import sys
from typing import cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import correlation_id_processor

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

PRODUCTION = "production"


def _get_log_level(level_name: str | None = None) -> int:
    """Resolve a log level name, falling back to LOG_LEVEL then INFO.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    name = (level_name or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_structlog(
    environment: str = PRODUCTION, level: str | None = None
) -> None:
    """Configure structlog and stdlib logging for the tracker.

    Should be called once at startup, from the composition root.

    Args:
        environment: 'production' for JSON output, anything else for
            colored console output.
        level: Log level name; LOG_LEVEL or INFO when None.
    """
    log_level = _get_log_level(level)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == PRODUCTION:
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Stub repositories log through the standard library
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        force=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "tracker"
) -> structlog.BoundLogger:
    """Get a logger with service and component already bound.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "tracker").
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
