"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- TaskRepositoryProtocol: Task aggregate storage (create/find/update/delete)
- IdentityGeneratorProtocol: Task identity generation
"""

from src.application.ports.identity_generator import IdentityGeneratorProtocol
from src.application.ports.task_repository import (
    CreateTaskData,
    TaskRepositoryProtocol,
    UpdateTaskData,
)

__all__: list[str] = [
    "CreateTaskData",
    "IdentityGeneratorProtocol",
    "TaskRepositoryProtocol",
    "UpdateTaskData",
]
