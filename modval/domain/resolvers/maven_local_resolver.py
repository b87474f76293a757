"""Artifact resolver backed by a Maven-layout local repository.

Layout: <root>/<group with dots as slashes>/<name>/<version>/<name>-<version>.jar
"""

import logging
from pathlib import Path
from typing import Any

from modval.domain.constants import DEFAULT_REPOSITORY
from modval.domain.errors import ArtifactResolutionError
from modval.domain.models.artifact import ArtifactCoordinate
from modval.domain.resolvers.artifact_resolver import ArtifactResolver

logger = logging.getLogger(__name__)


class MavenLocalResolver(ArtifactResolver):
    """Locates artifacts in a local Maven repository (default ~/.m2/repository)."""

    def __init__(self, root: Path | str | None = None) -> None:
        self.root = Path(root if root is not None else DEFAULT_REPOSITORY).expanduser()

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {
            "name": "maven-local",
            "description": "Maven-layout local artifact repository",
        }

    def artifact_path(self, coordinate: ArtifactCoordinate) -> Path:
        group_dir = Path(*coordinate.group.split("."))
        filename = f"{coordinate.name}-{coordinate.version}.jar"
        return self.root / group_dir / coordinate.name / coordinate.version / filename

    def locate(self, coordinate: ArtifactCoordinate) -> Path:
        path = self.artifact_path(coordinate)
        if not path.is_file():
            raise ArtifactResolutionError(
                f"Artifact {coordinate} not found in repository {self.root} "
                f"(expected {path})"
            )
        logger.debug(f"Located {coordinate} at {path}")
        return path
