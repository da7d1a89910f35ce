"""API adapters for transforming between application and API models."""

from src.api.adapters.task import TaskRequestAdapter

__all__: list[str] = ["TaskRequestAdapter"]
