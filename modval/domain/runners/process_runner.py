from abc import ABC, abstractmethod
from typing import Any, Sequence

from modval.domain.classpath import Classpath
from modval.domain.models.process_outcome import ProcessOutcome


class ProcessRunner(ABC):
    """Abstract interface for launching the validator process (Strategy pattern)."""

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {
            "name": "unknown",
            "description": "No description available",
        }

    @abstractmethod
    def validate(self) -> None:
        """Verify the runtime needed to launch processes is available.

        Raises:
            ProcessLaunchError: If the runtime is missing
        """
        ...

    @abstractmethod
    def run(self, classpath: Classpath, arguments: Sequence[str]) -> ProcessOutcome:
        """Run the validator with the given classpath and arguments.

        Blocks until the process exits. A non-zero exit status is returned in
        the outcome, not raised.

        Raises:
            ProcessLaunchError: If the process could not be started
        """
        ...
