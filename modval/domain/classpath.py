"""
Classpath handling and artifact lookup.

A Classpath is an ordered set of code locations (directories or archives).
Union keeps the first occurrence of each location, so the classpath the
caller configured always precedes locations added afterwards.
"""

import os
import re
from pathlib import Path
from typing import Iterable, Iterator

from modval.domain.models.artifact import Artifact


class Classpath:
    """Ordered, duplicate-free collection of code locations."""

    def __init__(self, entries: Iterable[Path | str] = ()) -> None:
        self._entries: list[Path] = []
        seen: set[Path] = set()
        for entry in entries:
            path = Path(entry)
            if path in seen:
                continue
            seen.add(path)
            self._entries.append(path)

    @classmethod
    def of_artifacts(cls, artifacts: Iterable[Artifact]) -> "Classpath":
        return cls(artifact.location for artifact in artifacts)

    @property
    def entries(self) -> list[Path]:
        return list(self._entries)

    def union(self, other: Iterable[Path | str]) -> "Classpath":
        """Return a new classpath with other's entries appended after ours."""
        return Classpath([*self._entries, *other])

    def __add__(self, other: Iterable[Path | str]) -> "Classpath":
        return self.union(other)

    def to_argument(self) -> str:
        """Render for a -cp flag using the platform path separator."""
        return os.pathsep.join(str(entry) for entry in self._entries)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Classpath):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Classpath({[str(entry) for entry in self._entries]!r})"


def find_artifact(
    dependencies: Iterable[Artifact], name: str | re.Pattern[str]
) -> Artifact | None:
    """Find the first dependency whose artifact name fully matches name.

    Args:
        dependencies: Located dependencies, in resolution order
        name: Artifact name pattern (a plain string is treated as a regex)

    Returns:
        The first matching Artifact, or None. File dependencies never match.
    """
    pattern = re.compile(name) if isinstance(name, str) else name
    for artifact in dependencies:
        if artifact.name is not None and pattern.fullmatch(artifact.name):
            return artifact
    return None


def find_artifact_location(
    dependencies: Iterable[Artifact], name: str | re.Pattern[str]
) -> Path | None:
    """Return the location of the first dependency matching name, if any."""
    artifact = find_artifact(dependencies, name)
    return artifact.location if artifact is not None else None
