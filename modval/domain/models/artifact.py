"""Artifact models: coordinates and located dependencies."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ArtifactCoordinate(BaseModel):
    """Identifies an artifact in a repository as group:name:version."""

    model_config = ConfigDict(frozen=True)

    group: str
    name: str
    version: str

    @classmethod
    def parse(cls, notation: str) -> "ArtifactCoordinate":
        """Parse 'group:name:version' notation.

        Raises:
            ValueError: If the notation does not have exactly three non-empty parts
        """
        parts = notation.strip().split(":")
        if len(parts) != 3 or not all(parts):
            raise ValueError(
                f"Invalid artifact coordinate: '{notation}'. Expected group:name:version"
            )
        group, name, version = parts
        return cls(group=group, name=name, version=version)

    def __str__(self) -> str:
        return f"{self.group}:{self.name}:{self.version}"


class Artifact(BaseModel):
    """A dependency that has been located on disk.

    File dependencies (plain directories or archives added by path) carry no
    coordinate; group, name and version are None for them.
    """

    model_config = ConfigDict(frozen=True)

    location: Path
    group: str | None = None
    name: str | None = None
    version: str | None = None

    @classmethod
    def from_coordinate(cls, coordinate: ArtifactCoordinate, location: Path) -> "Artifact":
        return cls(
            location=location,
            group=coordinate.group,
            name=coordinate.name,
            version=coordinate.version,
        )

    @property
    def coordinate(self) -> ArtifactCoordinate | None:
        if self.group is None or self.name is None or self.version is None:
            return None
        return ArtifactCoordinate(group=self.group, name=self.name, version=self.version)
