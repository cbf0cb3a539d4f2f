from tasktrack.models.task_models import Task, TaskPayload

__all__ = ["Task", "TaskPayload"]
