"""Unit tests for task service and logging bootstrap wiring."""

from __future__ import annotations

from typing import Any

import pytest
import structlog

from src.application.services.task_service import TaskService
from src.bootstrap.logging import configure_logging
from src.bootstrap.task_service import (
    create_task_service,
    get_task_repository,
    reset_task_repository,
    set_task_repository,
)
from src.config import TEST_TASK_BANK_CONFIG
from src.infrastructure.adapters.uuid_identity_generator import UUIDIdentityGenerator
from src.infrastructure.stubs.identity_generator_stub import IdentityGeneratorStub
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub


@pytest.fixture(autouse=True)
def _reset_repository():
    """Reset the shared repository around each test."""
    reset_task_repository()
    yield
    reset_task_repository()


class TestTaskRepositorySingleton:
    """Tests for the shared repository accessors."""

    def test_default_is_stub(self) -> None:
        """The default repository is the in-memory stub."""
        assert isinstance(get_task_repository(), TaskRepositoryStub)

    def test_is_shared(self) -> None:
        """Repeated calls return the same instance."""
        assert get_task_repository() is get_task_repository()

    def test_set_and_reset(self) -> None:
        """A custom repository can be installed and reset."""
        custom = TaskRepositoryStub()
        set_task_repository(custom)
        assert get_task_repository() is custom

        reset_task_repository()

        assert get_task_repository() is not custom


class TestCreateTaskService:
    """Tests for create_task_service()."""

    def test_defaults(self) -> None:
        """Defaults use the shared repository and UUID ids."""
        service = create_task_service()

        assert isinstance(service, TaskService)
        assert service._task_repository is get_task_repository()
        assert isinstance(service._identity_generator, UUIDIdentityGenerator)

    def test_overrides(self) -> None:
        """Explicit dependencies are used as given."""
        repository = TaskRepositoryStub()
        generator = IdentityGeneratorStub()

        service = create_task_service(repository=repository, identity_generator=generator)

        assert service._task_repository is repository
        assert service._identity_generator is generator


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_applies_given_config(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """The config's environment selects the renderer."""
        captured: dict[str, Any] = {}
        monkeypatch.setattr(structlog, "configure", lambda **kwargs: captured.update(kwargs))

        applied = configure_logging(TEST_TASK_BANK_CONFIG)

        assert applied is TEST_TASK_BANK_CONFIG
        assert isinstance(captured["processors"][-1], structlog.dev.ConsoleRenderer)

    def test_reads_environment_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a config the environment is read."""
        monkeypatch.setattr(structlog, "configure", lambda **kwargs: None)
        monkeypatch.setenv("TASK_BANK_ENVIRONMENT", "development")
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        applied = configure_logging()

        assert applied.environment == "development"
        assert applied.log_level == "ERROR"
