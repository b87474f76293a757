"""Outcome of a finished child process."""

from pydantic import BaseModel


class ProcessOutcome(BaseModel):
    exit_code: int
    stdout: str = ""
    stderr: str = ""
