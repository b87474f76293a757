from .artifact_resolver import ArtifactResolver
from .maven_local_resolver import MavenLocalResolver

__all__ = ["ArtifactResolver", "MavenLocalResolver"]
