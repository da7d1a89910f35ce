"""Domain errors for Task Bank.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from TaskBankError.
"""

from src.domain.errors.task import (
    TaskAlreadyExistsError,
    TaskError,
    TaskMappingError,
    TaskNotFoundError,
    TaskValidationError,
)

__all__: list[str] = [
    "TaskError",
    "TaskValidationError",
    "TaskNotFoundError",
    "TaskAlreadyExistsError",
    "TaskMappingError",
]
