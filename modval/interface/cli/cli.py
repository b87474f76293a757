import click
import logging
from pathlib import Path
from pydantic import BaseModel

from modval.interface.cli.output_models import (
    ClasspathOutput,
    TaskSummary,
    TasksOutput,
    ValidateOutput,
)
from modval.application.config_loader import load_config
from modval.application.task_builder import build_validation_task

logger = logging.getLogger(__name__)


def _json_emit(model: BaseModel) -> None:
    # Single-line JSON, omit None fields (e.g., ValidateOutput.process_exit_code on error).
    click.echo(model.model_dump_json(exclude_none=True), nl=True)


def _get_json_mode(ctx: click.Context) -> bool:
    obj = ctx.obj or {}
    return bool(obj.get("json", False))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _classpath_options(func):
    """Options shared by commands that resolve the validation classpath."""
    func = click.option(
        "--project-root",
        "project_root",
        type=click.Path(exists=True, file_okay=False, path_type=Path),
        default=None,
        help="Project directory holding .modval/config.yml (default: current directory).",
    )(func)
    func = click.option(
        "--fallback-version",
        "fallback_version",
        type=str,
        default=None,
        help="CLI version used when none is found among runtime dependencies.",
    )(func)
    func = click.option(
        "--configuration",
        type=str,
        default=None,
        help="Dependency configuration for the default classpath.",
    )(func)
    func = click.option(
        "--classpath",
        "classpath",
        multiple=True,
        type=str,
        help="Explicit classpath entry (repeatable); replaces the default configuration.",
    )(func)
    return func


def _build_task(
    project_root: Path | None,
    model_paths: tuple[str, ...],
    classpath: tuple[str, ...],
    configuration: str | None,
    fallback_version: str | None,
):
    root = (project_root or Path.cwd()).resolve()
    logger.debug(f"Using project root: {root}")
    cfg = load_config(project_root=root, user_home=Path.home())
    return build_validation_task(
        cfg,
        project_root=root,
        model_sources=list(model_paths),
        classpath=list(classpath),
        configuration=configuration,
        fallback_version=fallback_version,
    )


@click.group(help="Validate models with an external validator CLI.")
@click.option("--json", "json_output", is_flag=True, help="Emit machine-readable JSON on stdout.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr.")
@click.pass_context
def cli(ctx: click.Context, json_output: bool, verbose: bool) -> None:
    ctx.ensure_object(dict)
    ctx.obj["json"] = bool(json_output)
    _configure_logging(verbose)


@cli.command("validate")
@click.argument("model_paths", nargs=-1, type=str)
@_classpath_options
@click.pass_context
def validate_cmd(
    ctx: click.Context,
    model_paths: tuple[str, ...],
    classpath: tuple[str, ...],
    configuration: str | None,
    fallback_version: str | None,
    project_root: Path | None,
) -> None:
    """Validate models.

    Examples:
        modval validate                     # configured or default model sources
        modval validate model/ extra.smithy
        modval validate --classpath build/libs/deps.jar --fallback-version 1.49.0
    """
    try:
        task = _build_task(project_root, model_paths, classpath, configuration, fallback_version)
        result = task.execute()
        exit_code = 0 if result.success else 1

        if _get_json_mode(ctx):
            _json_emit(
                ValidateOutput(
                    exit_code=exit_code,
                    success=result.success,
                    process_exit_code=result.exit_code,
                    arguments=result.arguments,
                    classpath=result.classpath,
                    stdout=result.stdout or None,
                    stderr=result.stderr or None,
                )
            )
            raise click.exceptions.Exit(exit_code)

        if result.stdout:
            click.echo(result.stdout.rstrip("\n"))
        if result.stderr:
            click.echo(result.stderr.rstrip("\n"), err=True)

        if not result.success:
            click.echo(f"Validation failed (exit {result.exit_code})", err=True)
            raise click.exceptions.Exit(1)

        click.echo("Validation passed")

    except click.exceptions.Exit:
        raise
    except Exception as e:
        if _get_json_mode(ctx):
            _json_emit(ValidateOutput(exit_code=1, error=str(e)))
            raise click.exceptions.Exit(1)
        raise click.ClickException(str(e)) from e


@cli.command("classpath")
@_classpath_options
@click.pass_context
def classpath_cmd(
    ctx: click.Context,
    classpath: tuple[str, ...],
    configuration: str | None,
    fallback_version: str | None,
    project_root: Path | None,
) -> None:
    """Print the classpath the validator would run with, one entry per line."""
    try:
        task = _build_task(project_root, (), classpath, configuration, fallback_version)
        entries = [str(entry) for entry in task.resolve_classpath()]

        if _get_json_mode(ctx):
            _json_emit(ClasspathOutput(exit_code=0, classpath=entries))
            raise click.exceptions.Exit(0)

        for entry in entries:
            click.echo(entry)

    except click.exceptions.Exit:
        raise
    except Exception as e:
        if _get_json_mode(ctx):
            _json_emit(ClasspathOutput(exit_code=1, error=str(e)))
            raise click.exceptions.Exit(1)
        raise click.ClickException(str(e)) from e


@cli.command("tasks")
@click.pass_context
def tasks_cmd(ctx: click.Context) -> None:
    """List registered tasks."""
    from modval.domain.tasks import TaskFactory

    summaries = [
        TaskSummary(name=meta["name"], description=meta["description"])
        for meta in TaskFactory.get_all_metadata()
    ]

    if _get_json_mode(ctx):
        _json_emit(TasksOutput(exit_code=0, tasks=summaries))
        raise click.exceptions.Exit(0)

    for summary in summaries:
        click.echo(f"  {summary.name:<12} {summary.description}")
