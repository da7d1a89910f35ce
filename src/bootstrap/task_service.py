"""Bootstrap wiring for task service dependencies."""

from __future__ import annotations

from typing import Optional

from src.application.ports.identity_generator import IdentityGeneratorProtocol
from src.application.ports.task_repository import TaskRepositoryProtocol
from src.application.services.task_service import TaskService
from src.infrastructure.adapters.uuid_identity_generator import UUIDIdentityGenerator
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub

_task_repository: TaskRepositoryProtocol | None = None


def get_task_repository() -> TaskRepositoryProtocol:
    """Get task repository instance."""
    global _task_repository
    if _task_repository is None:
        _task_repository = TaskRepositoryStub()
    return _task_repository


def set_task_repository(repository: TaskRepositoryProtocol) -> None:
    """Set custom task repository (storage adapter or testing override)."""
    global _task_repository
    _task_repository = repository


def reset_task_repository() -> None:
    """Reset task repository singleton."""
    global _task_repository
    _task_repository = None


def create_task_service(
    repository: Optional[TaskRepositoryProtocol] = None,
    identity_generator: Optional[IdentityGeneratorProtocol] = None,
) -> TaskService:
    """Build a TaskService.

    Args:
        repository: Storage adapter; defaults to the shared repository.
        identity_generator: Identity source; defaults to UUIDIdentityGenerator.

    Returns:
        A wired TaskService.
    """
    return TaskService(
        task_repository=repository or get_task_repository(),
        identity_generator=identity_generator or UUIDIdentityGenerator(),
    )


__all__ = [
    "create_task_service",
    "get_task_repository",
    "reset_task_repository",
    "set_task_repository",
]
