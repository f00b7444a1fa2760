"""Project Routes — CRUD over /api/projects.

Invariants:
    - POST validates the full insert schema; PUT validates a partial one
    - 400 on invalid body (no record written), 404 on unknown id, 204 on delete
    - Deleting a project leaves its tasks/orders/phases/documents untouched
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from pmis.api.dependencies import get_storage
from pmis.api.routes.route_helpers import get_or_404, parse_body
from pmis.core.errors import ResourceNotFoundError
from pmis.infrastructure.storage import Storage
from pmis.schemas.projects import Project, ProjectCreate, ProjectUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=list[Project])
async def list_projects(storage: Storage = Depends(get_storage)):
    return await storage.projects.list()


@router.get("/{project_id}", response_model=Project)
async def get_project(project_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(storage.projects, project_id, "Project")


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
async def create_project(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(ProjectCreate, payload, "project")
    project = await storage.projects.create(body.model_dump())
    logger.info(
        f"Project created: {project.name}",
        extra={"entity": "Project", "entity_id": project.id},
    )
    return project


@router.put("/{project_id}", response_model=Project)
async def update_project(
    project_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    body = parse_body(ProjectUpdate, payload, "project")
    project = await storage.projects.update(project_id, body.changes())
    if project is None:
        raise ResourceNotFoundError("Project", project_id)
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.projects.delete(project_id):
        raise ResourceNotFoundError("Project", project_id)
    logger.info("Project deleted", extra={"entity": "Project", "entity_id": project_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
