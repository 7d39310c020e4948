"""Task schemas for TaskBoard Server."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class TaskBase(BaseModel):
    """Caller-supplied task fields.

    Input is accepted under the wire names only (``startDate``, ``endDate``);
    ``null`` maps to the field's zero value.
    """

    text: str = Field("", description="Free-form task text")
    completed: bool = Field(False, description="Whether the task is done")
    status: str = Field("", description="Free-form status, e.g. 'todo' or 'done'")
    start_date: str = Field("", alias="startDate", description="Start date string")
    end_date: str = Field("", alias="endDate", description="End date string")

    @field_validator("text", "status", "start_date", "end_date", mode="before")
    @classmethod
    def _null_string(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("completed", mode="before")
    @classmethod
    def _null_bool(cls, value: Any) -> Any:
        return False if value is None else value


class TaskRequest(TaskBase):
    """Request body for creating or replacing a task."""

    id: Optional[int] = Field(
        None, description="Ignored; identifiers are assigned by the server"
    )


class TaskIdentity(BaseModel):
    id: int = Field(..., description="Task ID assigned by the server")


class Task(TaskBase, TaskIdentity):
    """A stored task. ``id`` comes first when serialized."""

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 3,
                "text": "Buy milk",
                "completed": False,
                "status": "todo",
                "startDate": "",
                "endDate": "",
            }
        },
    )
