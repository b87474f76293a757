"""Domain models for modval."""

from .artifact import Artifact, ArtifactCoordinate
from .process_outcome import ProcessOutcome
from .task_config import CliConfig, ValidateTaskConfig
from .task_result import TaskResult


__all__ = [
    "Artifact",
    "ArtifactCoordinate",
    "ProcessOutcome",
    "CliConfig",
    "ValidateTaskConfig",
    "TaskResult",
]
