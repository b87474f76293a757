from typing import Any

from .task import Task


class TaskFactory:
    """Factory for creating task instances (Factory pattern)."""

    _registry: dict[str, type[Task]] = {}

    @classmethod
    def register(cls, key: str, task_class: type[Task]) -> None:
        """
        Register a task implementation.

        Args:
            key: Task identifier (e.g., "validate")
            task_class: The task class to register
        """
        cls._registry[key] = task_class

    @classmethod
    def create(cls, task_key: str, **kwargs: Any) -> Task:
        """
        Create a task instance.

        Args:
            task_key: Registered task identifier
            **kwargs: Constructor arguments for the task

        Returns:
            Instantiated Task

        Raises:
            KeyError: If task_key is not registered
        """
        if task_key not in cls._registry:
            available = ", ".join(cls.list_tasks())
            raise KeyError(
                f"Task: '{task_key}' not found. "
                f"Available tasks: {available}"
            )

        return cls._registry[task_key](**kwargs)

    @classmethod
    def list_tasks(cls) -> list[str]:
        return list(cls._registry.keys())

    @classmethod
    def get_all_metadata(cls) -> list[dict[str, Any]]:
        return [task_class.get_metadata() for task_class in cls._registry.values()]

    @classmethod
    def get_metadata(cls, task_key: str) -> dict[str, Any] | None:
        if task_key not in cls._registry:
            return None
        return cls._registry[task_key].get_metadata()
