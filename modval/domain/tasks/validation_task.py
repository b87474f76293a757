"""Validates models by running the validator CLI in a separate JVM.

The CLI runs in its own process so it sees exactly the classpath built here
and not whatever happens to be loaded by the calling build.

The CLI version is picked by searching the runtime dependencies:
1. the CLI artifact itself, if present, is used from its location
2. otherwise the version of the model library artifact, if present
3. otherwise the configured fallback version
This keeps the CLI binary-compatible with the model library the caller
already depends on.
"""

import logging
import re
from typing import Any

from modval.domain.classpath import Classpath, find_artifact, find_artifact_location
from modval.domain.constants import VALIDATE_COMMAND
from modval.domain.dependencies import DependencyConfigurations
from modval.domain.errors import ArtifactResolutionError
from modval.domain.models.artifact import Artifact, ArtifactCoordinate
from modval.domain.models.task_config import ValidateTaskConfig
from modval.domain.models.task_result import TaskResult
from modval.domain.resolvers.artifact_resolver import ArtifactResolver
from modval.domain.runners.process_runner import ProcessRunner
from modval.domain.tasks.task import Task

logger = logging.getLogger(__name__)


class ValidationTask(Task):
    """Runs `validate <model paths...>` through the validator CLI."""

    def __init__(
        self,
        config: ValidateTaskConfig,
        dependencies: DependencyConfigurations,
        resolver: ArtifactResolver,
        runner: ProcessRunner,
    ) -> None:
        self.config = config
        self._dependencies = dependencies
        self._resolver = resolver
        self._runner = runner

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {
            "name": "validate",
            "description": "Validate models with the external validator CLI",
        }

    def build_arguments(self) -> list[str]:
        return [VALIDATE_COMMAND, *(str(path) for path in self.config.model_paths)]

    def resolve_classpath(self) -> Classpath:
        """Explicit classpath (or the configured default) plus the CLI classpath."""
        if self.config.classpath is not None:
            resolved = Classpath(self.config.classpath)
        else:
            resolved = self._dependencies.classpath(self.config.classpath_configuration)
        return resolved + self.resolve_cli_classpath()

    def resolve_cli_classpath(self) -> Classpath:
        """Locate the validator CLI implementation.

        Raises:
            ArtifactResolutionError: If no version can be determined or the
                CLI artifact is not available
        """
        cli = self.config.cli
        runtime = self._runtime_dependencies()

        location = find_artifact_location(runtime, re.escape(cli.artifact))
        if location is not None:
            logger.debug(f"Using {cli.artifact} from runtime dependencies: {location}")
            return Classpath([location])

        model_library = find_artifact(runtime, cli.model_artifact)
        if model_library is not None and model_library.version:
            version = model_library.version
            logger.debug(f"Detected {model_library.name} {version}; using matching {cli.artifact}")
        elif cli.fallback_version:
            version = cli.fallback_version
            logger.debug(f"No {cli.model_artifact} dependency found; using {cli.artifact} {version}")
        else:
            raise ArtifactResolutionError(
                f"Cannot determine {cli.artifact} version: no '{cli.model_artifact}' "
                f"dependency in '{self.config.runtime_configuration}' and no "
                "cli.fallback_version configured"
            )

        coordinate = ArtifactCoordinate(group=cli.group, name=cli.artifact, version=version)
        return self._resolver.classpath(coordinate)

    def execute(self) -> TaskResult:
        arguments = self.build_arguments()
        classpath = self.resolve_classpath()

        logger.debug(f"Executing validation with args: {' '.join(arguments)}")
        self._runner.validate()
        outcome = self._runner.run(classpath, arguments)

        result = TaskResult(
            success=outcome.exit_code == 0,
            exit_code=outcome.exit_code,
            stdout=outcome.stdout,
            stderr=outcome.stderr,
            arguments=arguments,
            classpath=[str(entry) for entry in classpath],
        )
        if not result.success:
            logger.error(f"Model validation failed (exit {result.exit_code})")
            logger.debug(f"Validator output:\n{result.output}")
        return result

    def _runtime_dependencies(self) -> list[Artifact]:
        name = self.config.runtime_configuration
        if name not in self._dependencies.names():
            logger.debug(f"Runtime configuration '{name}' not declared; skipping version detection")
            return []
        return self._dependencies.resolve(name)
