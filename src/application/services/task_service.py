"""Task Service.

This service orchestrates the task CRUD flows: it generates identities,
shapes inbound requests into the data the repository port expects, calls
the port, and maps results to TaskDTO output records.

Outcome conventions:
- get/update of an unknown id raise TaskNotFoundError
- delete of an unknown id returns False
- every TaskDTO carries max_points resolved at mapping time
"""

from __future__ import annotations

from src.application.dtos.task import (
    CreateTaskDTO,
    TaskAttachmentDTO,
    TaskDTO,
    UpdateTaskDTO,
)
from src.application.ports.identity_generator import IdentityGeneratorProtocol
from src.application.ports.task_repository import (
    CreateTaskData,
    TaskRepositoryProtocol,
)
from src.application.services.base import LoggingMixin
from src.domain.errors.task import TaskMappingError, TaskNotFoundError
from src.domain.models.task import Task


class TaskService(LoggingMixin):
    """Coordinates task creation, retrieval, update and deletion.

    Dependencies are injected: the storage adapter through
    TaskRepositoryProtocol and identity generation through
    IdentityGeneratorProtocol.
    """

    def __init__(
        self,
        task_repository: TaskRepositoryProtocol,
        identity_generator: IdentityGeneratorProtocol,
    ) -> None:
        """Initialize the Task Service.

        Args:
            task_repository: Storage port for Task aggregates.
            identity_generator: Source of new task identities.
        """
        self._task_repository = task_repository
        self._identity_generator = identity_generator
        self._init_logger()

    async def create_task(self, request: CreateTaskDTO) -> TaskDTO:
        """Create a task with a freshly generated identity.

        Args:
            request: The creation request.

        Returns:
            TaskDTO for the persisted task.

        Raises:
            TaskValidationError: If the request does not form a valid Task.
        """
        task_id = self._identity_generator.new_id()
        log = self._log_operation("create_task", task_id=task_id)

        data = CreateTaskData(
            id=task_id,
            description=request.description,
            answer_schema=request.answer_schema,
            theme=request.theme,
            task_type=request.task_type,
            difficulty=request.difficulty,
            number_ege=request.number_ege,
            max_points_override=request.max_points_override,
        )
        saved_task = await self._task_repository.create(data)

        log.info("task_created", theme=saved_task.theme, task_type=saved_task.task_type)
        return self.map_task_to_dto(saved_task)

    async def get_task_by_id(self, task_id: str) -> TaskDTO:
        """Get a task by identity.

        Args:
            task_id: Identifier of the task.

        Returns:
            TaskDTO for the task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        task = await self._task_repository.find_by_id(task_id)
        if task is None:
            self._log_operation("get_task_by_id", task_id=task_id).info("task_not_found")
            raise TaskNotFoundError(task_id)
        return self.map_task_to_dto(task)

    async def get_all_tasks(self) -> list[TaskDTO]:
        """Get every stored task.

        Returns:
            TaskDTOs in repository order.
        """
        tasks = await self._task_repository.find_all()
        return [self.map_task_to_dto(task) for task in tasks]

    async def update_task(self, task_id: str, request: UpdateTaskDTO) -> TaskDTO:
        """Apply a partial update to a task.

        The request is forwarded to the repository unchanged, so a cleared
        override stays distinguishable from an omitted one.

        Args:
            task_id: Identifier of the task.
            request: The partial update.

        Returns:
            TaskDTO for the updated task.

        Raises:
            TaskNotFoundError: If no task has this id.
        """
        log = self._log_operation(
            "update_task",
            task_id=task_id,
            fields=request.provided_fields(),
        )

        updated_task = await self._task_repository.update(task_id, request)
        if updated_task is None:
            log.info("task_not_found")
            raise TaskNotFoundError(task_id, f"Task with ID {task_id} not found for update")

        log.info("task_updated")
        return self.map_task_to_dto(updated_task)

    async def delete_task(self, task_id: str) -> bool:
        """Delete a task.

        Args:
            task_id: Identifier of the task.

        Returns:
            True if the task existed and was deleted, False otherwise.
        """
        deleted = await self._task_repository.delete_by_id(task_id)
        self._log_operation("delete_task", task_id=task_id).info(
            "task_deleted" if deleted else "task_delete_noop"
        )
        return deleted

    @staticmethod
    def map_task_to_dto(task: Task) -> TaskDTO:
        """Map a Task aggregate to its output record.

        Args:
            task: The Task aggregate.

        Returns:
            TaskDTO with max_points resolved now.

        Raises:
            TaskMappingError: If the aggregate is missing or has no id.
        """
        if task is None or not getattr(task, "id", None):
            raise TaskMappingError("Invalid task domain model received for DTO mapping")

        return TaskDTO(
            id=task.id,
            description=task.description,
            answer_schema=task.answer_schema,
            theme=task.theme,
            task_type=task.task_type,
            difficulty=task.difficulty,
            attachments=tuple(
                TaskAttachmentDTO.from_attachment(attachment)
                for attachment in task.attachments
            ),
            max_points=task.calculate_max_points(),
            number_ege=task.number_ege,
            max_points_override=task.max_points_override,
        )
