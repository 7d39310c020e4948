"""FastAPI application factory for TaskBoard Server."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from ..config.settings import Settings, get_settings
from ..services.seed import seed_example_tasks
from ..services.task_store import TaskStore
from .errors import register_exception_handlers
from .routers import health, tasks

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type"]


def create_app(task_store: Optional[TaskStore] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Without an explicit ``task_store`` a fresh store is created and seeded
    with the example tasks.
    """
    settings = get_settings()

    if task_store is None:
        task_store = TaskStore()
        seed_example_tasks(task_store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup
        logger.info(
            "{} starting up on {}:{}",
            settings.APP_NAME,
            settings.API_HOST,
            settings.API_PORT,
        )
        yield
        # Shutdown
        logger.info("{} shutting down", settings.APP_NAME)

    app = FastAPI(
        title="TaskBoard Server API",
        description="In-memory task tracking service",
        version=settings.APP_VERSION,
        lifespan=lifespan,
        docs_url="/docs" if settings.API_DEBUG else None,
        redoc_url="/redoc" if settings.API_DEBUG else None,
    )
    app.state.task_store = task_store

    _add_middleware(app, settings)
    register_exception_handlers(app)
    _add_routes(app)

    return app


def _add_middleware(app: FastAPI, settings: Settings) -> None:
    """Add middleware to the application."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )


def _add_routes(app: FastAPI) -> None:
    """Add routes to the application."""
    app.include_router(health.router, prefix="/health", tags=["health"])
    app.include_router(tasks.router, prefix="/tasks", tags=["tasks"])
