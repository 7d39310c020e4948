"""In-memory task store for TaskBoard Server."""

import threading
from typing import Dict, List

from loguru import logger

from ..api.schemas.tasks import Task, TaskBase

DEFAULT_STATUS = "todo"


class TaskNotFoundError(LookupError):
    """Raised when an operation targets a task id that is not stored."""

    def __init__(self, task_id: int):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class TaskStore:
    """Authoritative collection of tasks plus the next-id counter.

    Every public method holds one exclusive lock for its whole body, so all
    operations are totally ordered. Identifiers are never reused: the counter
    only moves forward, even after deletions.
    """

    def __init__(self, first_id: int = 1):
        self._tasks: Dict[int, Task] = {}
        self._next_id = first_id
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def contains(self, task_id: int) -> bool:
        with self._lock:
            return task_id in self._tasks

    def list_tasks(self) -> List[Task]:
        """Return all tasks ordered by id."""
        with self._lock:
            return [self._tasks[task_id] for task_id in sorted(self._tasks)]

    def create_task(self, data: TaskBase) -> Task:
        """Store a new task under the next id.

        Any id carried by ``data`` is ignored. An empty status becomes
        ``"todo"``.
        """
        with self._lock:
            task_id = self._next_id
            fields = _task_fields(data)
            if not fields["status"]:
                fields["status"] = DEFAULT_STATUS
            task = Task(id=task_id, **fields)
            self._tasks[task_id] = task
            self._next_id += 1
            logger.debug("Created task {}", task_id)
            return task

    def update_task(self, task_id: int, data: TaskBase) -> Task:
        """Replace every field of an existing task except its id."""
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            task = Task(id=task_id, **_task_fields(data))
            self._tasks[task_id] = task
            logger.debug("Updated task {}", task_id)
            return task

    def delete_task(self, task_id: int) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
            logger.debug("Deleted task {}", task_id)


def _task_fields(data: TaskBase) -> dict:
    return data.model_dump(include=set(TaskBase.model_fields))
