"""Unit tests for TaskRepositoryStub."""

from __future__ import annotations

import pytest

from src.application.ports.task_repository import CreateTaskData, TaskRepositoryProtocol
from src.domain.errors.task import TaskAlreadyExistsError, TaskValidationError
from src.domain.models.task import TaskDetailsUpdate
from src.domain.value_objects.field_patch import FieldPatch
from src.infrastructure.stubs.task_repository_stub import TaskRepositoryStub


def create_data(task_id: str = "task-0001", **overrides: object) -> CreateTaskData:
    """Helper to create valid creation data."""
    fields: dict[str, object] = {
        "id": task_id,
        "description": "2+2=?",
        "answer_schema": {"maxScore": 2},
        "theme": "arithmetic",
        "task_type": "text-input",
        "difficulty": 5,
    }
    fields.update(overrides)
    return CreateTaskData(**fields)  # type: ignore[arg-type]


@pytest.fixture
def stub() -> TaskRepositoryStub:
    """Create a fresh stub instance."""
    return TaskRepositoryStub()


class TestTaskRepositoryStubProtocol:
    """Tests for protocol compliance."""

    def test_implements_protocol(self, stub: TaskRepositoryStub) -> None:
        """Stub implements TaskRepositoryProtocol."""
        assert isinstance(stub, TaskRepositoryProtocol)


class TestCreate:
    """Tests for create()."""

    @pytest.mark.asyncio
    async def test_create_stores_task(self, stub: TaskRepositoryStub) -> None:
        """Created task is retrievable and starts without attachments."""
        created = await stub.create(create_data(max_points_override=3, number_ege=12))

        assert created.id == "task-0001"
        assert created.attachments == []
        assert created.max_points_override == 3
        assert created.number_ege == 12
        assert stub.count() == 1
        assert await stub.find_by_id("task-0001") == created

    @pytest.mark.asyncio
    async def test_duplicate_id_raises(self, stub: TaskRepositoryStub) -> None:
        """A second create with the same id is refused."""
        await stub.create(create_data())

        with pytest.raises(TaskAlreadyExistsError) as exc_info:
            await stub.create(create_data(description="other"))

        assert exc_info.value.task_id == "task-0001"
        assert stub.count() == 1

    @pytest.mark.asyncio
    async def test_invalid_data_is_not_stored(self, stub: TaskRepositoryStub) -> None:
        """Validation errors propagate and nothing is stored."""
        with pytest.raises(TaskValidationError):
            await stub.create(create_data(description=""))

        assert stub.count() == 0


class TestFind:
    """Tests for find_by_id() and find_all()."""

    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, stub: TaskRepositoryStub) -> None:
        """Unknown id is not an error."""
        assert await stub.find_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_find_all_in_insertion_order(self, stub: TaskRepositoryStub) -> None:
        """Tasks come back in the order they were created."""
        for task_id in ("c", "a", "b"):
            await stub.create(create_data(task_id))

        tasks = await stub.find_all()

        assert [task.id for task in tasks] == ["c", "a", "b"]

    @pytest.mark.asyncio
    async def test_returned_tasks_are_copies(self, stub: TaskRepositoryStub) -> None:
        """Mutating a returned task does not change storage."""
        created = await stub.create(create_data())
        created.theme = "changed"
        found = await stub.find_by_id("task-0001")
        assert found is not None
        found.theme = "changed too"

        stored = await stub.find_by_id("task-0001")

        assert stored is not None
        assert stored.theme == "arithmetic"

    @pytest.mark.asyncio
    async def test_add_task_seeds_attachments(
        self, stub: TaskRepositoryStub, make_task, make_attachment
    ) -> None:
        """add_task() stores a task as given, attachments included."""
        stub.add_task(make_task(attachments=[make_attachment("a")]))

        found = await stub.find_by_id("task-0001")

        assert found is not None
        assert found.attachment_keys == ("a",)


class TestUpdate:
    """Tests for update()."""

    @pytest.mark.asyncio
    async def test_update_applies_provided_fields(self, stub: TaskRepositoryStub) -> None:
        """Provided fields change and are persisted."""
        await stub.create(create_data())

        updated = await stub.update(
            "task-0001",
            TaskDetailsUpdate(theme="algebra", max_points_override=FieldPatch.set_to(10)),
        )

        assert updated is not None
        assert updated.theme == "algebra"
        assert updated.calculate_max_points() == 10
        stored = await stub.find_by_id("task-0001")
        assert stored is not None
        assert stored.max_points_override == 10

    @pytest.mark.asyncio
    async def test_update_clears_override(self, stub: TaskRepositoryStub) -> None:
        """A cleared override is persisted as None."""
        await stub.create(create_data(max_points_override=10))

        updated = await stub.update(
            "task-0001", TaskDetailsUpdate(max_points_override=FieldPatch.cleared())
        )

        assert updated is not None
        assert updated.max_points_override is None
        assert updated.calculate_max_points() == 2

    @pytest.mark.asyncio
    async def test_empty_update_keeps_task(self, stub: TaskRepositoryStub) -> None:
        """An empty update leaves the stored task unchanged."""
        created = await stub.create(create_data(max_points_override=10))

        updated = await stub.update("task-0001", TaskDetailsUpdate())

        assert updated == created

    @pytest.mark.asyncio
    async def test_update_missing_returns_none(self, stub: TaskRepositoryStub) -> None:
        """Unknown id yields None."""
        assert await stub.update("missing", TaskDetailsUpdate(theme="x")) is None


class TestDelete:
    """Tests for delete_by_id() and clear()."""

    @pytest.mark.asyncio
    async def test_delete_existing(self, stub: TaskRepositoryStub) -> None:
        """Deleting a stored task returns True and removes it."""
        await stub.create(create_data())

        assert await stub.delete_by_id("task-0001") is True
        assert await stub.find_by_id("task-0001") is None

    @pytest.mark.asyncio
    async def test_delete_missing(self, stub: TaskRepositoryStub) -> None:
        """Deleting an unknown id returns False."""
        assert await stub.delete_by_id("missing") is False

    @pytest.mark.asyncio
    async def test_clear(self, stub: TaskRepositoryStub) -> None:
        """clear() empties storage."""
        await stub.create(create_data("a"))
        await stub.create(create_data("b"))

        stub.clear()

        assert stub.count() == 0
        assert await stub.find_all() == []
