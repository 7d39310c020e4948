"""Health check schemas for TaskBoard Server."""

from pydantic import BaseModel, ConfigDict


class HealthResponse(BaseModel):
    """Health check response model."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": "healthy",
                "version": "0.1.0",
                "environment": "development",
                "tasks": 2,
            }
        }
    )

    status: str
    version: str
    environment: str
    tasks: int
