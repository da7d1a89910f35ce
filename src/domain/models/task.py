"""Task aggregate root.

This module defines the Task aggregate (an exam-style exercise item) and
TaskDetailsUpdate, the partial update it accepts.

Scoring:
    calculate_max_points() resolves in three tiers:
    1. max_points_override, when it holds a number
    2. a numeric "maxScore" key in answer_schema
    3. DEFAULT_MAX_POINTS

    At rest, "no override" and "override cleared" are both None and resolve
    identically. On the write path they differ: TaskDetailsUpdate carries the
    override as a FieldPatch, so an update can leave it alone, clear it, or
    set it.

Validation policy:
- Empty id or description fails construction (TaskValidationError)
- Difficulty outside 1..10 is accepted at construction with a warning,
  but rejected (field skipped) on update
- Attachment problems on add/remove are warnings, never errors

Note:
    Task is mutable on purpose: it is changed in place by update_details,
    add_attachment and remove_attachment. Only the id is fixed.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from structlog import get_logger

from src.domain.errors.task import TaskValidationError
from src.domain.models.task_attachment import TaskAttachment
from src.domain.models.task_diagnostic import TaskDiagnostic, TaskDiagnosticCode
from src.domain.value_objects.field_patch import FieldPatch

logger = get_logger()

Points = Union[int, float]

DIFFICULTY_MIN: int = 1
DIFFICULTY_MAX: int = 10

# Points awarded when neither an override nor the answer schema says otherwise.
DEFAULT_MAX_POINTS: int = 1

# Key read from answer_schema for the schema-derived maximum.
ANSWER_SCHEMA_MAX_SCORE_KEY = "maxScore"


def is_difficulty_in_range(difficulty: int) -> bool:
    """Return True if difficulty lies within DIFFICULTY_MIN..DIFFICULTY_MAX."""
    return DIFFICULTY_MIN <= difficulty <= DIFFICULTY_MAX


def _is_blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _schema_max_score(answer_schema: Any) -> Optional[Points]:
    """Read a numeric maxScore from an answer schema, if it has one."""
    if not isinstance(answer_schema, Mapping):
        return None
    max_score = answer_schema.get(ANSWER_SCHEMA_MAX_SCORE_KEY)
    if isinstance(max_score, bool) or not isinstance(max_score, (int, float)):
        return None
    return max_score


@dataclass(frozen=True)
class TaskDetailsUpdate:
    """Partial update for a task's descriptive and scoring fields.

    Only provided fields are applied. For the non-nullable fields
    (description, theme, task_type, difficulty) None means "not provided".
    The nullable fields (answer_schema, number_ege, max_points_override)
    are FieldPatch values so that "clear it" can be told apart from
    "leave it".

    Attributes:
        description: New description.
        theme: New theme.
        task_type: New type discriminator.
        difficulty: New difficulty; rejected if outside 1..10.
        answer_schema: Patch for the answer schema.
        number_ege: Patch for the exam catalogue number.
        max_points_override: Patch for the scoring override.
    """

    description: Optional[str] = None
    theme: Optional[str] = None
    task_type: Optional[str] = None
    difficulty: Optional[int] = None
    answer_schema: FieldPatch[Any] = field(default_factory=FieldPatch.not_provided)
    number_ege: FieldPatch[int] = field(default_factory=FieldPatch.not_provided)
    max_points_override: FieldPatch[Points] = field(
        default_factory=FieldPatch.not_provided
    )

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> TaskDetailsUpdate:
        """Build an update from an inbound mapping using key presence.

        Both snake_case and the camelCase wire names are accepted
        ("maxPointsOverride", "numberEGE", "answerSchema", "type").
        ``{"max_points_override": None}`` clears the override while a
        mapping without the key leaves it untouched.

        Args:
            payload: Inbound partial-update mapping.

        Returns:
            TaskDetailsUpdate with only the present fields provided.
        """

        def _first(*keys: str) -> Any:
            for key in keys:
                if key in payload:
                    return payload[key]
            return None

        return cls(
            description=_first("description"),
            theme=_first("theme"),
            task_type=_first("task_type", "type"),
            difficulty=_first("difficulty"),
            answer_schema=FieldPatch.from_mapping(payload, "answer_schema", "answerSchema"),
            number_ege=FieldPatch.from_mapping(payload, "number_ege", "numberEGE"),
            max_points_override=FieldPatch.from_mapping(
                payload, "max_points_override", "maxPointsOverride"
            ),
        )

    @property
    def is_empty(self) -> bool:
        """True when the update provides no field at all."""
        return not self.provided_fields()

    def provided_fields(self) -> list[str]:
        """Return the names of the fields this update provides."""
        names = [
            name
            for name in ("description", "theme", "task_type", "difficulty")
            if getattr(self, name) is not None
        ]
        names.extend(
            name
            for name in ("answer_schema", "number_ege", "max_points_override")
            if getattr(self, name).is_provided
        )
        return names


@dataclass
class Task:
    """An exam-style exercise item with attachments and scoring metadata.

    Attributes:
        id: Identity assigned at creation. Cannot be reassigned.
        description: Exercise statement. Never blank.
        answer_schema: Opaque expected-answer description. Only a numeric
            "maxScore" key is interpreted.
        theme: Subject area ("arithmetic", "graphs").
        task_type: Opaque discriminator ("single-choice", "text-input", ...).
        difficulty: Expected within 1..10; out-of-range values are kept
            at construction with a warning.
        attachments: Ordered attachments with unique keys.
        number_ege: Optional exam catalogue number.
        max_points_override: Explicit maximum points; None means no override.
        construction_diagnostics: Soft findings raised while constructing.
    """

    id: str
    description: str
    answer_schema: Any
    theme: str
    task_type: str
    difficulty: int
    attachments: list[TaskAttachment] = field(default_factory=list)
    number_ege: Optional[int] = None
    max_points_override: Optional[Points] = None
    construction_diagnostics: list[TaskDiagnostic] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate invariants after initialization.

        Raises:
            TaskValidationError: If id or description is blank, or two
                initial attachments share a key.
        """
        if _is_blank(self.id):
            raise TaskValidationError("id", "Task ID cannot be empty")
        if _is_blank(self.description):
            raise TaskValidationError("description", "Task description cannot be empty")

        # Own a private copy so the caller's list is never aliased.
        self.attachments = list(self.attachments)
        keys = [attachment.key for attachment in self.attachments]
        if len(keys) != len(set(keys)):
            raise TaskValidationError(
                "attachments", f"Task {self.id} has attachments with duplicate keys"
            )

        if not is_difficulty_in_range(self.difficulty):
            self.construction_diagnostics.append(
                self._diagnose(
                    TaskDiagnosticCode.DIFFICULTY_OUT_OF_RANGE,
                    f"Task difficulty is out of expected range "
                    f"({DIFFICULTY_MIN}-{DIFFICULTY_MAX}): {self.difficulty}",
                    difficulty=self.difficulty,
                )
            )

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "id" and "id" in self.__dict__:
            raise AttributeError("Task id cannot be reassigned")
        super().__setattr__(name, value)

    def _diagnose(
        self, code: TaskDiagnosticCode, message: str, **details: Any
    ) -> TaskDiagnostic:
        """Log a soft validation finding and return it as a diagnostic."""
        logger.warning(code.value, task_id=self.id, **details)
        return TaskDiagnostic(code=code, task_id=self.id, message=message, details=details)

    @property
    def attachment_keys(self) -> tuple[str, ...]:
        """Keys of the attachments, in insertion order."""
        return tuple(attachment.key for attachment in self.attachments)

    def calculate_max_points(self) -> Points:
        """Resolve the maximum achievable points for this task.

        Returns:
            The override if one is set, else the schema's numeric maxScore,
            else DEFAULT_MAX_POINTS.
        """
        if self.max_points_override is not None:
            return self.max_points_override
        max_score = _schema_max_score(self.answer_schema)
        if max_score is not None:
            return max_score
        return DEFAULT_MAX_POINTS

    def add_attachment(self, attachment: Optional[TaskAttachment]) -> Optional[TaskDiagnostic]:
        """Append an attachment unless it is missing or its key is taken.

        Adding is idempotent by key: a second attachment with an existing
        key is ignored and the original keeps its position.

        Args:
            attachment: The attachment to add.

        Returns:
            None if added, otherwise a diagnostic explaining why not.
        """
        if attachment is None:
            return self._diagnose(
                TaskDiagnosticCode.ATTACHMENT_MISSING,
                "Cannot add a missing attachment",
            )

        if attachment.key in self.attachment_keys:
            return self._diagnose(
                TaskDiagnosticCode.ATTACHMENT_DUPLICATE_KEY,
                f"Attachment with key {attachment.key} already exists",
                attachment_key=attachment.key,
            )

        self.attachments.append(attachment)
        logger.debug(
            "task_attachment_added",
            task_id=self.id,
            attachment_key=attachment.key,
            attachment_count=len(self.attachments),
        )
        return None

    def remove_attachment(self, key: Optional[str]) -> Optional[TaskDiagnostic]:
        """Remove the attachment with the given key.

        An unknown key is not an error; the collection stays as it is.

        Args:
            key: Key of the attachment to remove.

        Returns:
            None normally, or a diagnostic if the key is blank.
        """
        if _is_blank(key):
            return self._diagnose(
                TaskDiagnosticCode.ATTACHMENT_INVALID_KEY,
                "Cannot remove attachment with an empty or invalid key",
                attachment_key=key,
            )

        self.attachments = [
            attachment for attachment in self.attachments if attachment.key != key
        ]
        return None

    def update_details(self, update: TaskDetailsUpdate) -> list[TaskDiagnostic]:
        """Apply the provided fields of a partial update.

        Fields not provided are left untouched. A difficulty outside 1..10
        or a blank description is skipped with a diagnostic while the rest
        of the update still applies.

        Args:
            update: The partial update.

        Returns:
            Diagnostics for any skipped fields (empty if all applied).
        """
        diagnostics: list[TaskDiagnostic] = []

        if update.description is not None:
            if _is_blank(update.description):
                diagnostics.append(
                    self._diagnose(
                        TaskDiagnosticCode.DESCRIPTION_UPDATE_REJECTED,
                        "Attempt to set an empty description. Value not updated.",
                    )
                )
            else:
                self.description = update.description

        if update.theme is not None:
            self.theme = update.theme

        if update.task_type is not None:
            self.task_type = update.task_type

        if update.difficulty is not None:
            if is_difficulty_in_range(update.difficulty):
                self.difficulty = update.difficulty
            else:
                diagnostics.append(
                    self._diagnose(
                        TaskDiagnosticCode.DIFFICULTY_UPDATE_REJECTED,
                        f"Attempt to set difficulty out of expected range "
                        f"({DIFFICULTY_MIN}-{DIFFICULTY_MAX}): {update.difficulty}. "
                        "Value not updated.",
                        difficulty=update.difficulty,
                        current_difficulty=self.difficulty,
                    )
                )

        self.answer_schema = update.answer_schema.apply(self.answer_schema)
        self.number_ege = update.number_ege.apply(self.number_ege)
        self.max_points_override = update.max_points_override.apply(
            self.max_points_override
        )

        return diagnostics
