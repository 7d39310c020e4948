"""Example tasks loaded into a fresh store at startup."""

from datetime import date
from typing import Optional

from loguru import logger

from ..api.schemas.tasks import TaskBase
from .task_store import TaskStore


def seed_example_tasks(store: TaskStore, today: Optional[date] = None) -> None:
    """Create the two example tasks.

    On a fresh store they receive ids 1 and 2 and the next id is 3. Dates are
    written as ``YYYY-MM-DD``.
    """
    day = (today or date.today()).isoformat()

    store.create_task(TaskBase(text="Learn Go", status="todo", startDate=day))
    store.create_task(
        TaskBase(text="Learn React", status="done", startDate=day, endDate=day)
    )
    logger.info("Seeded {} example tasks", len(store))
