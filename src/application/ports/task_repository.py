"""Task repository protocol.

This module defines the storage contract for Task aggregates together with
the data shapes each operation accepts. Concrete storage adapters implement
TaskRepositoryProtocol; the application layer depends only on this port.

Contract:
- create() persists the identity it is given; it does not invent one
- find_by_id() and update() return None for unknown ids (not an error)
- update() applies only provided fields (see TaskDetailsUpdate)
- delete_by_id() returns False for unknown ids (not an error)
- find_all() is unfiltered; ordering is adapter-defined
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Protocol, runtime_checkable

from src.domain.models.task import Points, Task, TaskDetailsUpdate

# Partial update accepted by TaskRepositoryProtocol.update().
UpdateTaskData = TaskDetailsUpdate


@dataclass(frozen=True)
class CreateTaskData:
    """Everything needed to construct and persist a new task.

    Attachments are not part of creation: a new task starts with an empty
    collection and attachments are added once uploads complete.

    Attributes:
        id: Identity generated by the calling service.
        description: Exercise statement.
        answer_schema: Opaque expected-answer description.
        theme: Subject area.
        task_type: Type discriminator.
        difficulty: Difficulty (soft-validated by Task).
        number_ege: Optional exam catalogue number.
        max_points_override: Optional explicit maximum points.
    """

    id: str
    description: str
    answer_schema: Any
    theme: str
    task_type: str
    difficulty: int
    number_ege: Optional[int] = field(default=None)
    max_points_override: Optional[Points] = field(default=None)

    def build_task(self) -> Task:
        """Construct the Task aggregate described by this data.

        Returns:
            A new Task with no attachments.

        Raises:
            TaskValidationError: If id or description is blank.
        """
        return Task(
            id=self.id,
            description=self.description,
            answer_schema=self.answer_schema,
            theme=self.theme,
            task_type=self.task_type,
            difficulty=self.difficulty,
            number_ege=self.number_ege,
            max_points_override=self.max_points_override,
        )


@runtime_checkable
class TaskRepositoryProtocol(Protocol):
    """Protocol for task storage operations.

    Every operation may suspend on a remote call. Callers treat the
    operations as sequential; concurrency control, if any, is an
    adapter-internal concern.
    """

    async def create(self, data: CreateTaskData) -> Task:
        """Persist a new task.

        Args:
            data: Creation data including the generated id.

        Returns:
            The persisted Task with a non-empty id.

        Raises:
            TaskValidationError: If the data does not form a valid Task.
        """
        ...

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """Find a task by its identifier.

        Args:
            task_id: Identifier of the task.

        Returns:
            The Task if found, None otherwise.
        """
        ...

    async def find_all(self) -> list[Task]:
        """List every stored task.

        Returns:
            All tasks, in adapter-defined order.
        """
        ...

    async def update(self, task_id: str, data: UpdateTaskData) -> Optional[Task]:
        """Apply a partial update to a stored task.

        Args:
            task_id: Identifier of the task to update.
            data: The partial update; fields not provided stay unchanged.

        Returns:
            The updated Task, or None if no task has this id.
        """
        ...

    async def delete_by_id(self, task_id: str) -> bool:
        """Delete a task by its identifier.

        Args:
            task_id: Identifier of the task to delete.

        Returns:
            True if a task existed and was removed, False otherwise.
        """
        ...
