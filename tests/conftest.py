from pathlib import Path
from typing import Any, Callable, Sequence

import pytest

from modval.domain.classpath import Classpath
from modval.domain.models.artifact import ArtifactCoordinate
from modval.domain.models.process_outcome import ProcessOutcome
from modval.domain.resolvers.artifact_resolver import ArtifactResolver
from modval.domain.runners.process_runner import ProcessRunner
from modval.domain.tasks.task_factory import TaskFactory


class FakeResolver(ArtifactResolver):
    """Resolver that maps every coordinate to <root>/<name>-<version>.jar."""

    def __init__(self, root: Path) -> None:
        self.root = root
        self.requests: list[ArtifactCoordinate] = []

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {"name": "fake", "description": "Fake resolver for testing"}

    def locate(self, coordinate: ArtifactCoordinate) -> Path:
        self.requests.append(coordinate)
        return self.root / f"{coordinate.name}-{coordinate.version}.jar"


class FakeRunner(ProcessRunner):
    """Runner that records calls and returns a canned outcome."""

    def __init__(self, exit_code: int = 0, stdout: str = "", stderr: str = "") -> None:
        self.outcome = ProcessOutcome(exit_code=exit_code, stdout=stdout, stderr=stderr)
        self.calls: list[tuple[Classpath, list[str]]] = []

    @classmethod
    def get_metadata(cls) -> dict[str, Any]:
        return {"name": "fake", "description": "Fake runner for testing"}

    def validate(self) -> None:
        pass  # Always valid

    def run(self, classpath: Classpath, arguments: Sequence[str]) -> ProcessOutcome:
        self.calls.append((classpath, list(arguments)))
        return self.outcome


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Isolated project directory for tests."""
    root = tmp_path / "project"
    root.mkdir()
    return root.resolve()


@pytest.fixture
def repo_dir(tmp_path: Path) -> Path:
    """Root used by the fake resolver for located artifacts."""
    return tmp_path / "repo"


@pytest.fixture
def fake_resolver(repo_dir: Path) -> FakeResolver:
    return FakeResolver(repo_dir)


@pytest.fixture
def make_runner() -> Callable[..., FakeRunner]:
    """Factory for FakeRunner instances with a chosen exit code and output."""
    return FakeRunner


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture(autouse=True)
def _restore_task_registry():
    """Restore the TaskFactory registry after each test."""
    original_registry = dict(TaskFactory._registry)
    yield
    TaskFactory._registry.clear()
    TaskFactory._registry.update(original_registry)
