"""Unit tests for TaskFactory."""

from typing import Any

import pytest

from modval.domain.models.task_result import TaskResult
from modval.domain.tasks import Task, TaskFactory, ValidationTask


class MockTask(Task):
    """Mock task for testing."""

    def __init__(self, label: str = "default") -> None:
        self.label = label

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {"name": "mock", "description": "Mock task for testing"}

    def execute(self) -> TaskResult:
        return TaskResult(success=True, exit_code=0)


class TestTaskFactory:
    """Tests for TaskFactory."""

    def test_validate_task_registered_by_default(self) -> None:
        assert "validate" in TaskFactory.list_tasks()
        assert TaskFactory._registry["validate"] is ValidationTask

    def test_register_and_create(self) -> None:
        TaskFactory.register("mock", MockTask)

        task = TaskFactory.create("mock")

        assert isinstance(task, MockTask)
        assert task.label == "default"

    def test_create_passes_kwargs(self) -> None:
        TaskFactory.register("mock", MockTask)

        task = TaskFactory.create("mock", label="custom")

        assert task.label == "custom"

    def test_create_unknown_raises_keyerror(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            TaskFactory.create("unknown")

        assert "unknown" in str(exc_info.value)
        assert "validate" in str(exc_info.value)

    def test_get_metadata(self) -> None:
        TaskFactory.register("mock", MockTask)

        assert TaskFactory.get_metadata("mock") == {"name": "mock", "description": "Mock task for testing"}
        assert TaskFactory.get_metadata("unknown") is None

    def test_get_all_metadata(self) -> None:
        TaskFactory.register("mock", MockTask)

        names = [meta["name"] for meta in TaskFactory.get_all_metadata()]

        assert "validate" in names
        assert "mock" in names
