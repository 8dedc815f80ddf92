"""Composition root for wiring dependencies.

This package centralizes infrastructure-aware wiring so the application
layer can depend on ports without importing infrastructure directly.
"""

from src.bootstrap.container import (
    TrackerContainer,
    build_container,
    get_container,
    reset_container,
)
from src.bootstrap.logging import configure_logging

__all__ = [
    "TrackerContainer",
    "build_container",
    "configure_logging",
    "get_container",
    "reset_container",
]
