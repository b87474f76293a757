"""
Named dependency configurations.

A dependency configuration (e.g. "runtimeClasspath") is an ordered list of
entries declared in project config. Each entry is either:
- a coordinate string "group:name:version", located through an ArtifactResolver
- a file dependency {"path": ...}, a directory or archive used as-is

Relative file paths are resolved against the project root.
"""

import logging
from pathlib import Path
from typing import Mapping, Sequence

from pydantic import BaseModel, ConfigDict

from modval.domain.classpath import Classpath
from modval.domain.errors import ArtifactResolutionError
from modval.domain.models.artifact import Artifact, ArtifactCoordinate
from modval.domain.resolvers.artifact_resolver import ArtifactResolver

logger = logging.getLogger(__name__)


class FileDependency(BaseModel):
    """A dependency given directly by path."""

    model_config = ConfigDict(extra="forbid")

    path: str


DependencyEntry = str | FileDependency


class DependencyConfigurations:
    """Resolves named dependency configurations to located artifacts."""

    def __init__(
        self,
        configurations: Mapping[str, Sequence[DependencyEntry]],
        resolver: ArtifactResolver,
        project_root: Path | None = None,
    ) -> None:
        self._configurations = {name: list(entries) for name, entries in configurations.items()}
        self._resolver = resolver
        self._project_root = project_root or Path.cwd()

    def names(self) -> list[str]:
        return list(self._configurations.keys())

    def resolve(self, name: str) -> list[Artifact]:
        """Locate every dependency of the named configuration, in declared order.

        Raises:
            ArtifactResolutionError: If the configuration is unknown or an
                entry cannot be parsed or located
        """
        if name not in self._configurations:
            available = ", ".join(self._configurations.keys()) or "(none)"
            raise ArtifactResolutionError(
                f"Dependency configuration: '{name}' not found. "
                f"Available configurations: {available}"
            )

        artifacts = [self._resolve_entry(name, entry) for entry in self._configurations[name]]
        logger.debug(f"Resolved configuration '{name}' to {len(artifacts)} artifact(s)")
        return artifacts

    def classpath(self, name: str) -> Classpath:
        return Classpath.of_artifacts(self.resolve(name))

    def _resolve_entry(self, configuration: str, entry: DependencyEntry) -> Artifact:
        if isinstance(entry, FileDependency):
            path = Path(entry.path).expanduser()
            if not path.is_absolute():
                path = self._project_root / path
            return Artifact(location=path)

        try:
            coordinate = ArtifactCoordinate.parse(entry)
        except ValueError as e:
            raise ArtifactResolutionError(
                f"Invalid dependency in configuration '{configuration}': {e}"
            ) from e
        return self._resolver.resolve(coordinate)
