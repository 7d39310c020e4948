"""Services for TaskBoard Server."""

from .seed import seed_example_tasks
from .task_store import TaskNotFoundError, TaskStore

__all__ = [
    "TaskNotFoundError",
    "TaskStore",
    "seed_example_tasks",
]
