from abc import ABC, abstractmethod
from typing import Any

from modval.domain.models.task_result import TaskResult


class Task(ABC):
    """Abstract interface for build tasks invoked directly by an orchestrator."""

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        """Return task metadata for discovery commands.

        Returns:
            dict with keys: name, description
        """
        return {
            "name": "unknown",
            "description": "No description available",
        }

    @abstractmethod
    def execute(self) -> TaskResult:
        """Run the task to completion.

        Returns:
            TaskResult with success set from the task's outcome

        Raises:
            TaskError: If the task could not be run at all
        """
        ...
