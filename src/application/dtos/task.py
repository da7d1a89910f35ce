"""Task DTOs.

Application-layer DTOs for the task service. The API layer converts
these to and from Pydantic models, keeping the application layer free of
any dependency on the API layer.

Inbound:
- CreateTaskDTO: fields for a new task (no id, no attachments)
- UpdateTaskDTO: partial update with presence-based semantics; this is
  the domain TaskDetailsUpdate, forwarded to the repository unchanged

Outbound:
- TaskDTO: task as presented to callers, with max_points resolved
- TaskAttachmentDTO: attachment as presented to callers
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from src.domain.models.task import Points, TaskDetailsUpdate
from src.domain.models.task_attachment import TaskAttachment

UpdateTaskDTO = TaskDetailsUpdate


@dataclass(frozen=True)
class CreateTaskDTO:
    """Request to create a task.

    Attributes:
        description: Exercise statement.
        answer_schema: Opaque expected-answer description.
        theme: Subject area.
        task_type: Type discriminator.
        difficulty: Difficulty, expected 1..10.
        number_ege: Optional exam catalogue number.
        max_points_override: Optional explicit maximum points.
    """

    description: str
    answer_schema: Any
    theme: str
    task_type: str
    difficulty: int
    number_ege: Optional[int] = None
    max_points_override: Optional[Points] = None

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> CreateTaskDTO:
        """Build a request from an inbound mapping.

        Accepts snake_case names and the camelCase wire names
        ("answerSchema", "type", "numberEGE", "maxPointsOverride").

        Raises:
            KeyError: If a required field is missing.
        """

        def _get(*keys: str, required: bool = False) -> Any:
            for key in keys:
                if key in payload:
                    return payload[key]
            if required:
                raise KeyError(keys[0])
            return None

        return cls(
            description=_get("description", required=True),
            answer_schema=_get("answer_schema", "answerSchema", required=True),
            theme=_get("theme", required=True),
            task_type=_get("task_type", "type", required=True),
            difficulty=_get("difficulty", required=True),
            number_ege=_get("number_ege", "numberEGE"),
            max_points_override=_get("max_points_override", "maxPointsOverride"),
        )


@dataclass(frozen=True)
class TaskAttachmentDTO:
    """Attachment as presented to callers.

    Attributes:
        key: Storage-system identifier.
        file_name: Original file name.
        mime_type: Format hint.
        size_bytes: Size in bytes.
        formatted_size: Human-readable size ("1.5 KB").
        url: Optional access link.
    """

    key: str
    file_name: str
    mime_type: str
    size_bytes: int
    formatted_size: str
    url: Optional[str] = None

    @classmethod
    def from_attachment(cls, attachment: TaskAttachment) -> TaskAttachmentDTO:
        """Map a domain attachment to its DTO."""
        return cls(
            formatted_size=attachment.get_formatted_size(),
            **attachment.to_dict(),
        )


@dataclass(frozen=True)
class TaskDTO:
    """Task as presented to callers.

    max_points is always the resolved value from calculate_max_points();
    max_points_override is the raw field, so callers can tell whether an
    override is in effect.

    Attributes:
        id: Task identity.
        description: Exercise statement.
        answer_schema: Opaque expected-answer description.
        theme: Subject area.
        task_type: Type discriminator.
        difficulty: Difficulty.
        attachments: Attachments in insertion order.
        max_points: Resolved maximum points.
        number_ege: Exam catalogue number, if any.
        max_points_override: Raw override, None when not in effect.
    """

    id: str
    description: str
    answer_schema: Any
    theme: str
    task_type: str
    difficulty: int
    max_points: Points
    attachments: tuple[TaskAttachmentDTO, ...] = field(default_factory=tuple)
    number_ege: Optional[int] = None
    max_points_override: Optional[Points] = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation for presentation layers.
        """
        return {
            "id": self.id,
            "description": self.description,
            "answer_schema": self.answer_schema,
            "theme": self.theme,
            "type": self.task_type,
            "difficulty": self.difficulty,
            "attachments": [
                {
                    "key": attachment.key,
                    "file_name": attachment.file_name,
                    "mime_type": attachment.mime_type,
                    "size_bytes": attachment.size_bytes,
                    "formatted_size": attachment.formatted_size,
                    "url": attachment.url,
                }
                for attachment in self.attachments
            ],
            "max_points": self.max_points,
            "number_ege": self.number_ege,
            "max_points_override": self.max_points_override,
        }
