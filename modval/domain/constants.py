from pathlib import Path

# Subcommand passed to the validator CLI
VALIDATE_COMMAND = "validate"

# Dependency configuration used for both the default classpath and version detection
DEFAULT_CONFIGURATION = "runtimeClasspath"

# Validator implementation
DEFAULT_CLI_GROUP = "software.amazon.smithy"
DEFAULT_CLI_ARTIFACT = "smithy-cli"
DEFAULT_MODEL_ARTIFACT = "smithy-model"
DEFAULT_MAIN_CLASS = "software.amazon.smithy.cli.SmithyCli"
DEFAULT_JAVA_EXECUTABLE = "java"

# Model sources looked up under the project root when none are configured
DEFAULT_MODEL_SOURCES = ("model", "src/main/smithy")

# Config files
CONFIG_DIRNAME = ".modval"
CONFIG_FILENAME = "config.yml"

DEFAULT_REPOSITORY = Path("~/.m2/repository")
