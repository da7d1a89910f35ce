"""Task API request/response models.

Pydantic models for the task endpoints. Field names are snake_case in
Python and camelCase on the wire ("answerSchema", "numberEGE",
"maxPointsOverride", "maxPoints"); both spellings are accepted on input.

Partial updates:
    UpdateTaskRequest distinguishes an omitted field from an explicit null
    through ``model_fields_set``. Sending ``{"maxPointsOverride": null}``
    clears the override; omitting the key leaves it unchanged.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

Points = Union[int, float]


class CreateTaskRequest(BaseModel):
    """Request to create a task.

    Difficulty is deliberately unconstrained here: out-of-range values are
    accepted and reported as warnings by the domain.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "description": "2+2=?",
                "answerSchema": {"kind": "number", "maxScore": 2},
                "theme": "arithmetic",
                "type": "text-input",
                "difficulty": 1,
                "numberEGE": 1,
            }
        },
    )

    description: str = Field(..., description="Exercise statement")
    answer_schema: Any = Field(
        ...,
        alias="answerSchema",
        description="Expected-answer description; an optional numeric maxScore sets the default maximum",
    )
    theme: str = Field(..., description="Subject area")
    task_type: str = Field(
        ..., alias="type", description="Type discriminator, e.g. single-choice"
    )
    difficulty: int = Field(..., description="Difficulty, expected 1-10")
    number_ege: Optional[int] = Field(
        default=None, alias="numberEGE", description="Exam catalogue number"
    )
    max_points_override: Optional[Points] = Field(
        default=None,
        alias="maxPointsOverride",
        description="Explicit maximum points, overriding the answer schema",
    )

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        """Validate description is not empty."""
        if not v or not v.strip():
            raise ValueError("description is required and cannot be empty")
        return v


class UpdateTaskRequest(BaseModel):
    """Partial update of a task. Every field is optional."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={"example": {"difficulty": 7, "maxPointsOverride": None}},
    )

    description: Optional[str] = Field(default=None, description="Exercise statement")
    answer_schema: Any = Field(default=None, alias="answerSchema")
    theme: Optional[str] = Field(default=None)
    task_type: Optional[str] = Field(default=None, alias="type")
    difficulty: Optional[int] = Field(
        default=None, description="New difficulty; values outside 1-10 are ignored"
    )
    number_ege: Optional[int] = Field(default=None, alias="numberEGE")
    max_points_override: Optional[Points] = Field(
        default=None,
        alias="maxPointsOverride",
        description="Explicit maximum points; null clears the override",
    )

    def provided_values(self) -> dict[str, Any]:
        """Return only the fields the client actually sent, by field name."""
        return self.model_dump(include=self.model_fields_set)


class TaskAttachmentResponse(BaseModel):
    """Attachment of a task."""

    model_config = ConfigDict(populate_by_name=True)

    key: str = Field(..., description="Storage identifier of the file")
    file_name: str = Field(..., alias="fileName")
    mime_type: str = Field(..., alias="mimeType")
    size_bytes: int = Field(..., alias="sizeBytes", ge=0)
    formatted_size: str = Field(..., alias="formattedSize", examples=["1.5 KB"])
    url: Optional[str] = Field(default=None)


class TaskResponse(BaseModel):
    """A task as returned to clients.

    maxPoints is always the resolved value; maxPointsOverride is the raw
    override (null when none is in effect).
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., description="Task identity")
    description: str
    answer_schema: Any = Field(..., alias="answerSchema")
    theme: str
    task_type: str = Field(..., alias="type")
    difficulty: int
    attachments: list[TaskAttachmentResponse] = Field(default_factory=list)
    max_points: Points = Field(..., alias="maxPoints")
    number_ege: Optional[int] = Field(default=None, alias="numberEGE")
    max_points_override: Optional[Points] = Field(default=None, alias="maxPointsOverride")
