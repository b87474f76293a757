"""Task result model returned by Task.execute()."""

from pydantic import BaseModel, Field

from modval.domain.errors import ValidationFailedError


class TaskResult(BaseModel):
    """Result of running a task.

    success is True iff the validator process exited with status 0. The
    remaining fields keep what is needed to diagnose a failure:
    - exit_code, stdout, stderr: captured from the validator process
    - arguments: the argument list passed after the main class
    - classpath: the resolved classpath entries, in order
    """

    success: bool
    exit_code: int
    stdout: str = ""
    stderr: str = ""
    arguments: list[str] = Field(default_factory=list)
    classpath: list[str] = Field(default_factory=list)

    @property
    def output(self) -> str:
        """Combined stdout and stderr, stdout first."""
        return "\n".join(part for part in (self.stdout, self.stderr) if part)

    def raise_for_failure(self) -> None:
        """Raise ValidationFailedError if the task did not succeed."""
        if not self.success:
            raise ValidationFailedError(self)
