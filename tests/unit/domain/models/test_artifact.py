"""Tests for artifact models."""

from pathlib import Path

import pytest

from modval.domain.models.artifact import Artifact, ArtifactCoordinate


class TestArtifactCoordinate:
    """Tests for coordinate parsing."""

    def test_parse_valid_notation(self) -> None:
        coordinate = ArtifactCoordinate.parse("software.amazon.smithy:smithy-model:1.49.0")

        assert coordinate.group == "software.amazon.smithy"
        assert coordinate.name == "smithy-model"
        assert coordinate.version == "1.49.0"
        assert str(coordinate) == "software.amazon.smithy:smithy-model:1.49.0"

    def test_parse_strips_whitespace(self) -> None:
        coordinate = ArtifactCoordinate.parse("  g:n:1  ")
        assert str(coordinate) == "g:n:1"

    @pytest.mark.parametrize("notation", ["g:n", "g:n:v:extra", "g::1", ""])
    def test_parse_rejects_invalid_notation(self, notation: str) -> None:
        with pytest.raises(ValueError, match="Invalid artifact coordinate"):
            ArtifactCoordinate.parse(notation)


class TestArtifact:
    """Tests for located artifacts."""

    def test_from_coordinate(self) -> None:
        coordinate = ArtifactCoordinate.parse("g:n:1")
        artifact = Artifact.from_coordinate(coordinate, Path("/repo/n-1.jar"))

        assert artifact.location == Path("/repo/n-1.jar")
        assert artifact.coordinate == coordinate

    def test_file_dependency_has_no_coordinate(self) -> None:
        artifact = Artifact(location=Path("build/classes"))
        assert artifact.name is None
        assert artifact.coordinate is None
