"""Health check router for TaskBoard Server."""

from fastapi import APIRouter, Depends

from ...config.settings import get_settings
from ...services.task_store import TaskStore
from ..dependencies import get_task_store
from ..schemas.health import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check(store: TaskStore = Depends(get_task_store)):
    """Health check endpoint."""
    settings = get_settings()

    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
        environment=settings.APP_ENVIRONMENT,
        tasks=len(store),
    )


@router.get("/ready")
async def readiness_check():
    """Readiness check endpoint."""
    return {"status": "ready"}


@router.get("/live")
async def liveness_check():
    """Liveness check endpoint."""
    return {"status": "alive"}
