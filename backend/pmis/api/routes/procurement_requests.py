"""Procurement Request Routes — CRUD over /api/procurement-requests.

Invariants:
    - requestNumber is unique across requests: 409 on create/update clash
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from pmis.api.dependencies import get_storage
from pmis.api.routes.route_helpers import (
    ensure_unique, get_or_404, parse_body, project_id_filter,
)
from pmis.core.errors import ResourceNotFoundError
from pmis.infrastructure.storage import Storage
from pmis.schemas.procurement import (
    ProcurementRequest, ProcurementRequestCreate, ProcurementRequestUpdate,
)

router = APIRouter(prefix="/api/procurement-requests", tags=["procurement"])

_LABEL = "procurement request"


@router.get("", response_model=list[ProcurementRequest])
async def list_requests(
    project_id: int | None = Depends(project_id_filter),
    storage: Storage = Depends(get_storage),
):
    return await storage.procurement_requests.list(project_id=project_id)


@router.get("/{request_id}", response_model=ProcurementRequest)
async def get_request(request_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(
        storage.procurement_requests, request_id, "Procurement request",
    )


@router.post("", response_model=ProcurementRequest, status_code=status.HTTP_201_CREATED)
async def create_request(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(ProcurementRequestCreate, payload, _LABEL)
    await ensure_unique(
        storage.procurement_requests, "request_number", body.request_number,
        "Request number",
    )
    return await storage.procurement_requests.create(body.model_dump())


@router.put("/{request_id}", response_model=ProcurementRequest)
async def update_request(
    request_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    body = parse_body(ProcurementRequestUpdate, payload, _LABEL)
    changes = body.changes()
    await get_or_404(storage.procurement_requests, request_id, "Procurement request")
    await ensure_unique(
        storage.procurement_requests, "request_number", changes.get("request_number"),
        "Request number", exclude_id=request_id,
    )
    request = await storage.procurement_requests.update(request_id, changes)
    if request is None:
        raise ResourceNotFoundError("Procurement request", request_id)
    return request


@router.delete("/{request_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_request(request_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.procurement_requests.delete(request_id):
        raise ResourceNotFoundError("Procurement request", request_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
