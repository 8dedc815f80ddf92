"""
Infrastructure layer - External adapters for the tracker.

This layer contains:
- In-memory repository stubs
- In-memory live notification channel
- System clock
- Observability (structlog configuration, correlation ids)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""
