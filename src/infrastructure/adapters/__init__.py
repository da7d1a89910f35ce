"""Infrastructure adapters for Task Bank.

Adapters implement the ports defined in the application layer,
providing concrete implementations for external services.
"""

from src.infrastructure.adapters.uuid_identity_generator import UUIDIdentityGenerator

__all__: list[str] = ["UUIDIdentityGenerator"]
