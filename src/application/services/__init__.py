"""Application services - Use case orchestration.

This module contains application services that orchestrate domain
operations and coordinate with infrastructure adapters.

Available services:
- TaskService: Task CRUD orchestration with resolved scoring
"""

from src.application.services.base import LoggingMixin
from src.application.services.task_service import TaskService

__all__ = ["LoggingMixin", "TaskService"]
