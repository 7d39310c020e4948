"""Tasks router for TaskBoard Server."""

from typing import List

from fastapi import APIRouter, Depends, Request, Response, status

from ...services.task_store import TaskNotFoundError, TaskStore
from ..dependencies import get_task_store
from ..errors import parse_task_body, parse_task_id
from ..schemas.tasks import Task

router = APIRouter()


@router.get("", response_model=List[Task])
async def list_tasks(store: TaskStore = Depends(get_task_store)):
    """List all tasks."""
    return store.list_tasks()


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(request: Request, store: TaskStore = Depends(get_task_store)):
    """Create a task. Any id in the body is ignored."""
    data = parse_task_body(await request.body())
    return store.create_task(data)


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    request: Request,
    store: TaskStore = Depends(get_task_store),
):
    """Replace a task. The path id wins over any id in the body."""
    tid = parse_task_id(task_id)
    if not store.contains(tid):
        raise TaskNotFoundError(tid)
    data = parse_task_body(await request.body())
    return store.update_task(tid, data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: str, store: TaskStore = Depends(get_task_store)):
    """Delete a task."""
    store.delete_task(parse_task_id(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
