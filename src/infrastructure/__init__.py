"""
Infrastructure layer - External adapters for Task Bank.

This layer contains:
- Identity generation adapters
- In-memory stubs of the storage port
- Observability (structlog configuration)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

from src.infrastructure.adapters import UUIDIdentityGenerator

__all__: list[str] = ["UUIDIdentityGenerator"]
