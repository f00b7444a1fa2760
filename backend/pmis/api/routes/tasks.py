"""Task Routes — CRUD over /api/tasks, filterable by ?projectId=."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from pmis.api.dependencies import get_storage
from pmis.api.routes.route_helpers import get_or_404, parse_body, project_id_filter
from pmis.core.errors import ResourceNotFoundError
from pmis.infrastructure.storage import Storage
from pmis.schemas.tasks import Task, TaskCreate, TaskUpdate

router = APIRouter(prefix="/api/tasks", tags=["tasks"])


@router.get("", response_model=list[Task])
async def list_tasks(
    project_id: int | None = Depends(project_id_filter),
    storage: Storage = Depends(get_storage),
):
    return await storage.tasks.list(project_id=project_id)


@router.get("/{task_id}", response_model=Task)
async def get_task(task_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(storage.tasks, task_id, "Task")


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
async def create_task(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(TaskCreate, payload, "task")
    return await storage.tasks.create(body.model_dump())


@router.put("/{task_id}", response_model=Task)
async def update_task(
    task_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    body = parse_body(TaskUpdate, payload, "task")
    task = await storage.tasks.update(task_id, body.changes())
    if task is None:
        raise ResourceNotFoundError("Task", task_id)
    return task


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(task_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.tasks.delete(task_id):
        raise ResourceNotFoundError("Task", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
