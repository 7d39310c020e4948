"""API schemas for TaskBoard Server."""

from .health import HealthResponse
from .tasks import Task, TaskBase, TaskRequest

__all__ = [
    "HealthResponse",
    "Task",
    "TaskBase",
    "TaskRequest",
]
