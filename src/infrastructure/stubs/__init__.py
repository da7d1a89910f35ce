"""Infrastructure stubs for development and testing.

This module provides stub implementations of infrastructure ports
for use in development and testing environments.

Available stubs:
- TaskRepositoryStub: In-memory task storage
- IdentityGeneratorStub: Deterministic task identities

WARNING: These stubs are NOT for production use.
Production implementations are in src/infrastructure/adapters/.
"""

from src.infrastructure.stubs.identity_generator_stub import IdentityGeneratorStub
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub

__all__: list[str] = ["IdentityGeneratorStub", "TaskRepositoryStub"]
