"""Project Phase Routes — CRUD over /api/project-phases, filterable by ?projectId=."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from pmis.api.dependencies import get_storage
from pmis.api.routes.route_helpers import get_or_404, parse_body, project_id_filter
from pmis.core.errors import ResourceNotFoundError
from pmis.infrastructure.storage import Storage
from pmis.schemas.phases import ProjectPhase, ProjectPhaseCreate, ProjectPhaseUpdate

router = APIRouter(prefix="/api/project-phases", tags=["planning"])


@router.get("", response_model=list[ProjectPhase])
async def list_phases(
    project_id: int | None = Depends(project_id_filter),
    storage: Storage = Depends(get_storage),
):
    return await storage.project_phases.list(project_id=project_id)


@router.get("/{phase_id}", response_model=ProjectPhase)
async def get_phase(phase_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(storage.project_phases, phase_id, "Project phase")


@router.post("", response_model=ProjectPhase, status_code=status.HTTP_201_CREATED)
async def create_phase(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(ProjectPhaseCreate, payload, "project phase")
    return await storage.project_phases.create(body.model_dump())


@router.put("/{phase_id}", response_model=ProjectPhase)
async def update_phase(
    phase_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    body = parse_body(ProjectPhaseUpdate, payload, "project phase")
    phase = await storage.project_phases.update(phase_id, body.changes())
    if phase is None:
        raise ResourceNotFoundError("Project phase", phase_id)
    return phase


@router.delete("/{phase_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_phase(phase_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.project_phases.delete(phase_id):
        raise ResourceNotFoundError("Project phase", phase_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
