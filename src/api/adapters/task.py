"""Task API adapter.

Converts between the task API models and the application DTOs.
"""

from src.api.models.task import (
    CreateTaskRequest,
    TaskAttachmentResponse,
    TaskResponse,
    UpdateTaskRequest,
)
from src.application.dtos.task import CreateTaskDTO, TaskDTO, UpdateTaskDTO


class TaskRequestAdapter:
    """Adapts task API requests to application DTOs and DTOs to responses."""

    @staticmethod
    def to_create_dto(request: CreateTaskRequest) -> CreateTaskDTO:
        """Convert a create request to the application DTO."""
        return CreateTaskDTO(
            description=request.description,
            answer_schema=request.answer_schema,
            theme=request.theme,
            task_type=request.task_type,
            difficulty=request.difficulty,
            number_ege=request.number_ege,
            max_points_override=request.max_points_override,
        )

    @staticmethod
    def to_update_dto(request: UpdateTaskRequest) -> UpdateTaskDTO:
        """Convert an update request to the application DTO.

        Only fields present in the request are carried over, so an explicit
        null and an omitted field stay distinguishable.
        """
        return UpdateTaskDTO.from_mapping(request.provided_values())

    @staticmethod
    def to_response(task: TaskDTO) -> TaskResponse:
        """Convert a task DTO to the API response."""
        return TaskResponse(
            id=task.id,
            description=task.description,
            answer_schema=task.answer_schema,
            theme=task.theme,
            task_type=task.task_type,
            difficulty=task.difficulty,
            attachments=[
                TaskAttachmentResponse(
                    key=attachment.key,
                    file_name=attachment.file_name,
                    mime_type=attachment.mime_type,
                    size_bytes=attachment.size_bytes,
                    formatted_size=attachment.formatted_size,
                    url=attachment.url,
                )
                for attachment in task.attachments
            ],
            max_points=task.max_points,
            number_ege=task.number_ege,
            max_points_override=task.max_points_override,
        )
