"""
Application layer - Use cases and orchestration for the tracker.

This layer contains:
- Use case implementations (service orchestration)
- Port definitions (abstract interfaces for infrastructure)
- Input records and notification payloads

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, bootstrap
"""
