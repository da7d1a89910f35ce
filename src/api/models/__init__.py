"""
API models (Pydantic DTOs) for Task Bank.

This module contains the Pydantic request/response models
used at the API boundary.
"""

from src.api.models.task import (
    CreateTaskRequest,
    TaskAttachmentResponse,
    TaskResponse,
    UpdateTaskRequest,
)

__all__: list[str] = [
    "CreateTaskRequest",
    "TaskAttachmentResponse",
    "TaskResponse",
    "UpdateTaskRequest",
]
