"""Task Repository Stub.

This module provides an in-memory stub implementation of
TaskRepositoryProtocol for testing and development purposes.

Stored tasks are deep copies: mutating a Task returned by the stub does
not change what is stored until it goes back through update().
"""

from __future__ import annotations

import copy
from typing import Optional

from src.application.ports.task_repository import (
    CreateTaskData,
    TaskRepositoryProtocol,
    UpdateTaskData,
)
from src.domain.errors.task import TaskAlreadyExistsError
from src.domain.models.task import Task


class TaskRepositoryStub(TaskRepositoryProtocol):
    """In-memory stub for the task repository.

    Tasks are kept in a dictionary keyed by id, so find_all() returns them
    in insertion order.
    """

    def __init__(self) -> None:
        """Initialize with empty storage."""
        self._tasks: dict[str, Task] = {}

    def clear(self) -> None:
        """Clear all stored data for test cleanup."""
        self._tasks.clear()

    def count(self) -> int:
        """Return the number of stored tasks."""
        return len(self._tasks)

    def add_task(self, task: Task) -> None:
        """Store a task directly, replacing any task with the same id.

        Test helper for seeding tasks that already carry attachments.

        Args:
            task: The task to store.
        """
        self._tasks[task.id] = copy.deepcopy(task)

    async def create(self, data: CreateTaskData) -> Task:
        """Persist a new task built from the creation data.

        Args:
            data: Creation data including the generated id.

        Returns:
            The persisted Task.

        Raises:
            TaskValidationError: If the data does not form a valid Task.
            TaskAlreadyExistsError: If the id is already stored.
        """
        if data.id in self._tasks:
            raise TaskAlreadyExistsError(data.id)

        task = data.build_task()
        self._tasks[task.id] = copy.deepcopy(task)
        return task

    async def find_by_id(self, task_id: str) -> Optional[Task]:
        """Find a task by its identifier.

        Args:
            task_id: Identifier of the task.

        Returns:
            A copy of the stored Task, or None if not found.
        """
        task = self._tasks.get(task_id)
        return copy.deepcopy(task) if task is not None else None

    async def find_all(self) -> list[Task]:
        """List every stored task.

        Returns:
            Copies of all stored tasks in insertion order.
        """
        return [copy.deepcopy(task) for task in self._tasks.values()]

    async def update(self, task_id: str, data: UpdateTaskData) -> Optional[Task]:
        """Apply a partial update to a stored task.

        Args:
            task_id: Identifier of the task to update.
            data: The partial update.

        Returns:
            A copy of the updated Task, or None if not found.
        """
        stored = self._tasks.get(task_id)
        if stored is None:
            return None

        task = copy.deepcopy(stored)
        task.update_details(data)
        self._tasks[task_id] = task
        return copy.deepcopy(task)

    async def delete_by_id(self, task_id: str) -> bool:
        """Delete a task by its identifier.

        Args:
            task_id: Identifier of the task to delete.

        Returns:
            True if the task existed and was removed, False otherwise.
        """
        return self._tasks.pop(task_id, None) is not None
