"""FastAPI dependencies for TaskBoard Server."""

from fastapi import Request

from ..services.task_store import TaskStore


def get_task_store(request: Request) -> TaskStore:
    """Return the store attached to the application by ``create_app``."""
    return request.app.state.task_store
