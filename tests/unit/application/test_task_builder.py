"""Tests for building the validate task from configuration."""

from pathlib import Path

from modval.application.config_models import ModvalConfig
from modval.application.task_builder import build_validate_config, build_validation_task
from modval.domain.resolvers import MavenLocalResolver
from modval.domain.runners import JavaProcessRunner
from modval.domain.tasks import ValidationTask


def _config(**data) -> ModvalConfig:
    return ModvalConfig.model_validate(data)


class TestBuildValidateConfig:
    """Tests for merging CLI overrides over loaded config."""

    def test_uses_configured_models(self, project_root) -> None:
        (project_root / "shapes").mkdir()

        config = build_validate_config(_config(models=["shapes"]), project_root=project_root)

        assert config.model_paths == [project_root / "shapes"]

    def test_cli_model_sources_replace_configured(self, project_root) -> None:
        (project_root / "shapes").mkdir()
        (project_root / "other.smithy").write_text("")

        config = build_validate_config(
            _config(models=["shapes"]),
            project_root=project_root,
            model_sources=["other.smithy"],
        )

        assert config.model_paths == [project_root / "other.smithy"]

    def test_no_classpath_override_by_default(self, project_root) -> None:
        config = build_validate_config(_config(), project_root=project_root)
        assert config.classpath is None

    def test_configured_classpath_resolved_against_project_root(self, project_root) -> None:
        config = build_validate_config(
            _config(validate={"classpath": ["libs/a.jar", "/abs/b.jar"]}),
            project_root=project_root,
        )

        assert config.classpath == [project_root / "libs" / "a.jar", Path("/abs/b.jar")]

    def test_cli_classpath_replaces_configured(self, project_root) -> None:
        config = build_validate_config(
            _config(validate={"classpath": ["libs/a.jar"]}),
            project_root=project_root,
            classpath=["/cli/c.jar"],
        )

        assert config.classpath == [Path("/cli/c.jar")]

    def test_empty_cli_classpath_keeps_configured(self, project_root) -> None:
        config = build_validate_config(
            _config(validate={"classpath": ["/abs/a.jar"]}),
            project_root=project_root,
            classpath=[],
        )

        assert config.classpath == [Path("/abs/a.jar")]

    def test_configuration_and_fallback_overrides(self, project_root) -> None:
        config = build_validate_config(
            _config(cli={"fallback_version": "1.40.0"}),
            project_root=project_root,
            configuration="smithyBuild",
            fallback_version="1.49.0",
        )

        assert config.classpath_configuration == "smithyBuild"
        assert config.cli.fallback_version == "1.49.0"


class TestBuildValidationTask:
    """Tests for task assembly."""

    def test_builds_validation_task_with_defaults(self, project_root, tmp_path) -> None:
        cfg = _config(repository=str(tmp_path / "m2"), cli={"java_executable": "/opt/java"})

        task = build_validation_task(cfg, project_root=project_root)

        assert isinstance(task, ValidationTask)
        assert isinstance(task._resolver, MavenLocalResolver)
        assert task._resolver.root == tmp_path / "m2"
        assert isinstance(task._runner, JavaProcessRunner)
        assert task._runner._java_executable == "/opt/java"

    def test_end_to_end_with_fakes(self, project_root, fake_resolver, fake_runner, repo_dir) -> None:
        (project_root / "model").mkdir()
        cfg = _config(
            configurations={
                "runtimeClasspath": [
                    {"path": "build/classes"},
                    "software.amazon.smithy:smithy-model:1.42.0",
                ]
            }
        )

        task = build_validation_task(
            cfg, project_root=project_root, resolver=fake_resolver, runner=fake_runner
        )
        result = task.execute()

        assert result.success is True
        classpath, arguments = fake_runner.calls[0]
        assert arguments == ["validate", str(project_root / "model")]
        assert classpath.entries == [
            project_root / "build" / "classes",
            repo_dir / "smithy-model-1.42.0.jar",
            repo_dir / "smithy-cli-1.42.0.jar",
        ]
