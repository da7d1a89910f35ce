"""
Domain layer - Pure business logic for Task Bank.

This layer contains:
- Domain models (Task aggregate, TaskAttachment)
- Value objects (FieldPatch)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or api.
"""

from src.domain.exceptions import TaskBankError
from src.domain.models import Task, TaskAttachment, TaskDetailsUpdate
from src.domain.value_objects import FieldPatch, PatchState

__all__: list[str] = [
    "TaskBankError",
    "Task",
    "TaskAttachment",
    "TaskDetailsUpdate",
    "FieldPatch",
    "PatchState",
]
