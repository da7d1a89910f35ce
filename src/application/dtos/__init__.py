"""Application DTOs (Data Transfer Objects).

These DTOs are used for data transfer within the application layer
and across layer boundaries. They are distinct from:
- Domain models (business objects with invariants)
- API models (Pydantic models for serialization)
"""

from src.application.dtos.task import (
    CreateTaskDTO,
    TaskAttachmentDTO,
    TaskDTO,
    UpdateTaskDTO,
)

__all__ = [
    "CreateTaskDTO",
    "TaskAttachmentDTO",
    "TaskDTO",
    "UpdateTaskDTO",
]
