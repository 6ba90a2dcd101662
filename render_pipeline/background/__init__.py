from .task import Task, TaskRunner

__all__ = ["Task", "TaskRunner"]
