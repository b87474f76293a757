"""Domain-level exceptions for modval."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modval.domain.models.task_result import TaskResult


class TaskError(Exception):
    """Base class for task failures."""

    pass


class ProcessLaunchError(TaskError):
    """Raised when the validator process could not be started."""

    pass


class ArtifactResolutionError(TaskError):
    """Raised when a dependency configuration or artifact cannot be resolved."""

    pass


class ValidationFailedError(TaskError):
    """Raised when the validator ran and exited with a non-zero status.

    The finished TaskResult is kept on the exception so callers can inspect
    the exit code and captured output.
    """

    def __init__(self, result: "TaskResult") -> None:
        super().__init__(f"Model validation failed (exit {result.exit_code})")
        self.result = result
