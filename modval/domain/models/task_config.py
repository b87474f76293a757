"""Configuration structs passed explicitly to tasks."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from modval.domain.constants import (
    DEFAULT_CLI_ARTIFACT,
    DEFAULT_CLI_GROUP,
    DEFAULT_CONFIGURATION,
    DEFAULT_JAVA_EXECUTABLE,
    DEFAULT_MAIN_CLASS,
    DEFAULT_MODEL_ARTIFACT,
)


class CliConfig(BaseModel):
    """Describes the validator CLI implementation and how to run it.

    fallback_version has no built-in default: it is used only when neither the
    CLI artifact nor the model library artifact is found among the runtime
    dependencies, and must then be configured explicitly.
    """

    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    group: str = DEFAULT_CLI_GROUP
    artifact: str = DEFAULT_CLI_ARTIFACT
    model_artifact: str = DEFAULT_MODEL_ARTIFACT
    fallback_version: str | None = None
    main_class: str = DEFAULT_MAIN_CLASS
    java_executable: str = DEFAULT_JAVA_EXECUTABLE
    jvm_args: list[str] = Field(default_factory=list)


class ValidateTaskConfig(BaseModel):
    """Inputs of the validation task.

    classpath, when set, replaces the classpath computed from
    classpath_configuration. The validator implementation classpath is added
    in both cases.
    """

    model_config = ConfigDict(extra="forbid", protected_namespaces=())

    model_paths: list[Path] = Field(default_factory=list)
    classpath: list[Path] | None = None
    classpath_configuration: str = DEFAULT_CONFIGURATION
    runtime_configuration: str = DEFAULT_CONFIGURATION
    cli: CliConfig = Field(default_factory=CliConfig)
