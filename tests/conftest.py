"""
Pytest configuration and shared fixtures for Task Bank tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async port mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
"""

from __future__ import annotations

import pytest

from src.domain.models.task import Task
from src.domain.models.task_attachment import TaskAttachment


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from src import __version__

    return __version__


@pytest.fixture
def make_task():
    """Factory for valid tasks; keyword arguments override defaults."""

    def _make_task(**overrides: object) -> Task:
        fields: dict[str, object] = {
            "id": "task-0001",
            "description": "2+2=?",
            "answer_schema": {"kind": "number", "maxScore": 2},
            "theme": "arithmetic",
            "task_type": "text-input",
            "difficulty": 5,
        }
        fields.update(overrides)
        return Task(**fields)  # type: ignore[arg-type]

    return _make_task


@pytest.fixture
def make_attachment():
    """Factory for valid attachments; keyword arguments override defaults."""

    def _make_attachment(key: str = "files/diagram.png", **overrides: object) -> TaskAttachment:
        fields: dict[str, object] = {
            "key": key,
            "file_name": "diagram.png",
            "mime_type": "image/png",
            "size_bytes": 2048,
        }
        fields.update(overrides)
        return TaskAttachment(**fields)  # type: ignore[arg-type]

    return _make_attachment
