"""API routers for TaskBoard Server."""

from . import health, tasks

__all__ = ["health", "tasks"]
