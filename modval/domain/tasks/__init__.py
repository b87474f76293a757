from .task import Task
from .task_factory import TaskFactory
from .validation_task import ValidationTask

# Register built-in tasks
TaskFactory.register("validate", ValidationTask)

__all__ = ["Task", "TaskFactory", "ValidationTask"]
