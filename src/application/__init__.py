"""
Application layer - Use cases and orchestration for Task Bank.

This layer contains:
- Application services (TaskService)
- Port definitions (abstract interfaces for infrastructure)
- DTOs crossing the layer boundary

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""

from src.application.ports import (
    CreateTaskData,
    IdentityGeneratorProtocol,
    TaskRepositoryProtocol,
    UpdateTaskData,
)

__all__: list[str] = [
    "CreateTaskData",
    "IdentityGeneratorProtocol",
    "TaskRepositoryProtocol",
    "UpdateTaskData",
]
