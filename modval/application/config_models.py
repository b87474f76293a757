"""Project configuration models.

Config structure (.modval/config.yml):
    repository: ~/.m2/repository
    models:
      - model
    validate:
      classpath: null
      classpath_configuration: runtimeClasspath
      runtime_configuration: runtimeClasspath
    cli:
      fallback_version: 1.49.0
    configurations:
      runtimeClasspath:
        - software.amazon.smithy:smithy-model:1.49.0
        - path: build/classes
"""

from pydantic import BaseModel, ConfigDict, Field

from modval.domain.constants import DEFAULT_CONFIGURATION, DEFAULT_REPOSITORY
from modval.domain.dependencies import DependencyEntry
from modval.domain.models.task_config import CliConfig


class ValidateSection(BaseModel):
    """Settings of the validate task that are not model paths."""

    model_config = ConfigDict(extra="forbid")

    classpath: list[str] | None = None
    classpath_configuration: str = DEFAULT_CONFIGURATION
    runtime_configuration: str = DEFAULT_CONFIGURATION


class ModvalConfig(BaseModel):
    """Top-level configuration after merging defaults, user and project files."""

    model_config = ConfigDict(extra="forbid")

    repository: str = str(DEFAULT_REPOSITORY)
    models: list[str] = Field(default_factory=list)
    validate_: ValidateSection = Field(default_factory=ValidateSection, alias="validate")
    cli: CliConfig = Field(default_factory=CliConfig)
    configurations: dict[str, list[DependencyEntry]] = Field(default_factory=dict)
