"""Non-fatal task diagnostics.

Soft validation in the Task aggregate never raises. Instead the operation
completes (leaving the offending value out) and returns a TaskDiagnostic
describing what was ignored, so callers can inspect or ignore it. The same
information is emitted as a structlog warning.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TaskDiagnosticCode(str, Enum):
    """Kinds of soft validation findings."""

    DIFFICULTY_OUT_OF_RANGE = "difficulty_out_of_range"
    DIFFICULTY_UPDATE_REJECTED = "difficulty_update_rejected"
    DESCRIPTION_UPDATE_REJECTED = "description_update_rejected"
    ATTACHMENT_MISSING = "attachment_missing"
    ATTACHMENT_DUPLICATE_KEY = "attachment_duplicate_key"
    ATTACHMENT_INVALID_KEY = "attachment_invalid_key"


@dataclass(frozen=True, eq=True)
class TaskDiagnostic:
    """A soft validation finding produced by a task operation.

    Attributes:
        code: What kind of finding this is.
        task_id: The task the finding refers to.
        message: Human-readable description.
        details: Extra context (offending value, attachment key, ...).
    """

    code: TaskDiagnosticCode
    task_id: str
    message: str
    details: dict[str, Any] = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation suitable for log or API payloads.
        """
        return {
            "code": self.code.value,
            "task_id": self.task_id,
            "message": self.message,
            "details": dict(self.details),
        }
