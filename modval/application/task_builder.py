"""Assembles tasks from loaded configuration and CLI overrides."""

import logging
from pathlib import Path
from typing import Sequence

from modval.application.config_models import ModvalConfig
from modval.application.model_discovery import discover_models
from modval.domain.dependencies import DependencyConfigurations
from modval.domain.models.task_config import ValidateTaskConfig
from modval.domain.resolvers import ArtifactResolver, MavenLocalResolver
from modval.domain.runners import JavaProcessRunner, ProcessRunner
from modval.domain.tasks import TaskFactory, ValidationTask

logger = logging.getLogger(__name__)


def _resolve_path(value: str | Path, project_root: Path) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else project_root / path


def build_validate_config(
    cfg: ModvalConfig,
    *,
    project_root: Path,
    model_sources: Sequence[str | Path] | None = None,
    classpath: Sequence[str | Path] | None = None,
    configuration: str | None = None,
    fallback_version: str | None = None,
) -> ValidateTaskConfig:
    """Merge CLI overrides over the loaded config.

    CLI model sources replace configured ones; an empty or missing CLI
    classpath leaves the configured override (if any) in place.
    """
    sources = list(model_sources) if model_sources else cfg.models
    model_paths = discover_models(sources, project_root)

    explicit_classpath = list(classpath) if classpath else cfg.validate_.classpath
    resolved_classpath = (
        [_resolve_path(entry, project_root) for entry in explicit_classpath]
        if explicit_classpath is not None
        else None
    )

    cli = cfg.cli
    if fallback_version:
        cli = cli.model_copy(update={"fallback_version": fallback_version})

    return ValidateTaskConfig(
        model_paths=model_paths,
        classpath=resolved_classpath,
        classpath_configuration=configuration or cfg.validate_.classpath_configuration,
        runtime_configuration=cfg.validate_.runtime_configuration,
        cli=cli,
    )


def build_validation_task(
    cfg: ModvalConfig,
    *,
    project_root: Path,
    model_sources: Sequence[str | Path] | None = None,
    classpath: Sequence[str | Path] | None = None,
    configuration: str | None = None,
    fallback_version: str | None = None,
    resolver: ArtifactResolver | None = None,
    runner: ProcessRunner | None = None,
) -> ValidationTask:
    """Create the validate task with its collaborators.

    resolver and runner default to a MavenLocalResolver on cfg.repository and
    a JavaProcessRunner configured from cfg.cli; tests pass fakes.
    """
    task_config = build_validate_config(
        cfg,
        project_root=project_root,
        model_sources=model_sources,
        classpath=classpath,
        configuration=configuration,
        fallback_version=fallback_version,
    )

    resolver = resolver or MavenLocalResolver(cfg.repository)
    runner = runner or JavaProcessRunner(
        java_executable=task_config.cli.java_executable,
        main_class=task_config.cli.main_class,
        jvm_args=task_config.cli.jvm_args,
        working_dir=project_root,
    )
    dependencies = DependencyConfigurations(cfg.configurations, resolver, project_root=project_root)

    task = TaskFactory.create(
        "validate",
        config=task_config,
        dependencies=dependencies,
        resolver=resolver,
        runner=runner,
    )
    logger.debug(f"Built validate task for {len(task_config.model_paths)} model source(s)")
    return task  # type: ignore[return-value]
