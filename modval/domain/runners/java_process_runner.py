"""Process runner that launches the validator CLI in a JVM subprocess.

Command line: <java> [jvm_args...] -cp <classpath> <main_class> [arguments...]

No timeout is applied; the call blocks until the JVM exits.
"""

import asyncio
import logging
import shutil
from pathlib import Path
from typing import Any, Sequence

from modval.domain.classpath import Classpath
from modval.domain.constants import DEFAULT_JAVA_EXECUTABLE, DEFAULT_MAIN_CLASS
from modval.domain.errors import ProcessLaunchError
from modval.domain.models.process_outcome import ProcessOutcome
from modval.domain.runners.process_runner import ProcessRunner

logger = logging.getLogger(__name__)


class JavaProcessRunner(ProcessRunner):
    """Runs a Java main class with an explicit classpath."""

    def __init__(
        self,
        java_executable: str = DEFAULT_JAVA_EXECUTABLE,
        main_class: str = DEFAULT_MAIN_CLASS,
        jvm_args: Sequence[str] | None = None,
        working_dir: Path | str | None = None,
    ) -> None:
        self._java_executable = java_executable
        self._main_class = main_class
        self._jvm_args = list(jvm_args or [])
        self._working_dir = str(working_dir) if working_dir is not None else None

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {
            "name": "java",
            "description": "Java main class via subprocess",
        }

    def validate(self) -> None:
        if shutil.which(self._java_executable) is None:
            raise ProcessLaunchError(
                f"Java executable not found: {self._java_executable}. "
                "Install a JDK or set cli.java_executable in .modval/config.yml"
            )

    def build_command(self, classpath: Classpath, arguments: Sequence[str]) -> list[str]:
        return [
            self._java_executable,
            *self._jvm_args,
            "-cp",
            classpath.to_argument(),
            self._main_class,
            *arguments,
        ]

    def run(self, classpath: Classpath, arguments: Sequence[str]) -> ProcessOutcome:
        return asyncio.run(self._async_run(classpath, arguments))

    async def _async_run(self, classpath: Classpath, arguments: Sequence[str]) -> ProcessOutcome:
        command = self.build_command(classpath, arguments)

        if self._working_dir is not None and not Path(self._working_dir).is_dir():
            raise ProcessLaunchError(f"Working directory not found: {self._working_dir}")

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                cwd=self._working_dir,
            )
            stdout_data, stderr_data = await process.communicate()
        except FileNotFoundError as e:
            raise ProcessLaunchError(
                f"Java executable not found: {self._java_executable}"
            ) from e
        except PermissionError as e:
            raise ProcessLaunchError(
                f"Java executable is not runnable: {self._java_executable}"
            ) from e
        except OSError as e:
            raise ProcessLaunchError(f"Failed to launch validator: {e}") from e

        stdout = stdout_data.decode(errors="replace") if stdout_data else ""
        stderr = stderr_data.decode(errors="replace") if stderr_data else ""

        # Log stderr even on success (may contain warnings)
        if stderr:
            logger.debug(f"Validator stderr: {stderr}")

        return ProcessOutcome(exit_code=process.returncode, stdout=stdout, stderr=stderr)
