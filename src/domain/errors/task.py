"""Task domain errors.

This module provides exception classes for task-related failures:
construction-time validation, lookups that miss, duplicate identities
in storage, and malformed aggregates reaching the output mapper.

Soft validation problems (out-of-range difficulty, duplicate attachment
keys, blank attachment keys) are NOT errors. They are reported as
TaskDiagnostic records and logged, see src.domain.models.task_diagnostic.
"""

from __future__ import annotations

from typing import Optional

from src.domain.exceptions import TaskBankError


class TaskError(TaskBankError):
    """Base error for task-related operations."""

    pass


class TaskValidationError(TaskError):
    """Raised when a task or attachment is constructed with invalid data.

    Validation errors are fatal: the object is never created.

    Attributes:
        field: Name of the offending field (e.g. "description", "size_bytes").
    """

    def __init__(self, field: str, message: Optional[str] = None) -> None:
        """Initialize with the offending field and optional custom message.

        Args:
            field: Name of the field that failed validation.
            message: Optional custom error message.
        """
        msg = message or f"Invalid value for field '{field}'"
        super().__init__(msg)
        self.field = field


class TaskNotFoundError(TaskError):
    """Raised when a task cannot be found by its identifier.

    The service layer raises this for get and update misses so that an
    embedding transport can translate it into its own "not found" answer.

    Attributes:
        task_id: The identifier that was looked up.
    """

    def __init__(self, task_id: str, message: Optional[str] = None) -> None:
        """Initialize with the task ID and optional custom message.

        Args:
            task_id: The identifier of the task that was not found.
            message: Optional custom error message.
        """
        msg = message or f"Task with ID {task_id} not found"
        super().__init__(msg)
        self.task_id = task_id


class TaskAlreadyExistsError(TaskError):
    """Raised when storing a task whose identifier is already taken.

    Attributes:
        task_id: The duplicated identifier.
    """

    def __init__(self, task_id: str, message: Optional[str] = None) -> None:
        msg = message or f"Task with ID {task_id} already exists"
        super().__init__(msg)
        self.task_id = task_id


class TaskMappingError(TaskError):
    """Raised when a task aggregate cannot be mapped to an output record."""

    pass
