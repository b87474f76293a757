from typing import Literal
from pydantic import BaseModel, Field


class BaseOutput(BaseModel):
    schema_version: int = 1
    command: Literal["validate", "classpath", "tasks"]
    exit_code: int
    error: str | None = None


class ValidateOutput(BaseOutput):
    """Output for validate command.

    process_exit_code is the validator's own exit status; it is omitted when
    the validator never ran (resolution or launch errors).
    """

    command: Literal["validate"] = "validate"
    success: bool = False
    process_exit_code: int | None = None
    arguments: list[str] = Field(default_factory=list)
    classpath: list[str] = Field(default_factory=list)
    stdout: str | None = None
    stderr: str | None = None


class ClasspathOutput(BaseOutput):
    command: Literal["classpath"] = "classpath"
    classpath: list[str] = Field(default_factory=list)


class TaskSummary(BaseModel):
    """Summary of a registered task for list output."""
    name: str
    description: str


class TasksOutput(BaseOutput):
    command: Literal["tasks"] = "tasks"
    tasks: list[TaskSummary] = Field(default_factory=list)
