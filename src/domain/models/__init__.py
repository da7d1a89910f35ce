"""Domain models for Task Bank.

Contains the Task aggregate, its TaskAttachment value records and the
diagnostics produced by soft validation. These models contain no
infrastructure dependencies.
"""

from src.domain.models.task import (
    DEFAULT_MAX_POINTS,
    DIFFICULTY_MAX,
    DIFFICULTY_MIN,
    Task,
    TaskDetailsUpdate,
    is_difficulty_in_range,
)
from src.domain.models.task_attachment import TaskAttachment
from src.domain.models.task_diagnostic import TaskDiagnostic, TaskDiagnosticCode

__all__: list[str] = [
    "DEFAULT_MAX_POINTS",
    "DIFFICULTY_MAX",
    "DIFFICULTY_MIN",
    "Task",
    "TaskAttachment",
    "TaskDetailsUpdate",
    "TaskDiagnostic",
    "TaskDiagnosticCode",
    "is_difficulty_in_range",
]
