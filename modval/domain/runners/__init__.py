from .process_runner import ProcessRunner
from .java_process_runner import JavaProcessRunner

__all__ = ["ProcessRunner", "JavaProcessRunner"]
