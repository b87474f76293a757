from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from modval.domain.classpath import Classpath
from modval.domain.models.artifact import Artifact, ArtifactCoordinate


class ArtifactResolver(ABC):
    """Maps artifact coordinates to locations on disk (Strategy pattern).

    Resolvers do not compute dependency graphs. They only locate artifacts the
    host build system has already made available.
    """

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {
            "name": "unknown",
            "description": "No description available",
        }

    @abstractmethod
    def locate(self, coordinate: ArtifactCoordinate) -> Path:
        """Return the location of the artifact.

        Raises:
            ArtifactResolutionError: If the artifact is not available
        """
        ...

    def resolve(self, coordinate: ArtifactCoordinate) -> Artifact:
        return Artifact.from_coordinate(coordinate, self.locate(coordinate))

    def classpath(self, coordinate: ArtifactCoordinate) -> Classpath:
        return Classpath([self.locate(coordinate)])
