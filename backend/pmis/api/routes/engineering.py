"""Engineering Document Routes — CRUD over /api/engineering, filterable by ?projectId=."""

from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from pmis.api.dependencies import get_storage
from pmis.api.routes.route_helpers import get_or_404, parse_body, project_id_filter
from pmis.core.errors import ResourceNotFoundError
from pmis.infrastructure.storage import Storage
from pmis.schemas.engineering import (
    EngineeringDocument, EngineeringDocumentCreate, EngineeringDocumentUpdate,
)

router = APIRouter(prefix="/api/engineering", tags=["engineering"])


@router.get("", response_model=list[EngineeringDocument])
async def list_documents(
    project_id: int | None = Depends(project_id_filter),
    storage: Storage = Depends(get_storage),
):
    return await storage.engineering_documents.list(project_id=project_id)


@router.get("/{document_id}", response_model=EngineeringDocument)
async def get_document(document_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(storage.engineering_documents, document_id, "Document")


@router.post("", response_model=EngineeringDocument, status_code=status.HTTP_201_CREATED)
async def create_document(
    payload: Any = Body(...), storage: Storage = Depends(get_storage),
):
    body = parse_body(EngineeringDocumentCreate, payload, "document")
    return await storage.engineering_documents.create(body.model_dump())


@router.put("/{document_id}", response_model=EngineeringDocument)
async def update_document(
    document_id: int,
    payload: Any = Body(...),
    storage: Storage = Depends(get_storage),
):
    body = parse_body(EngineeringDocumentUpdate, payload, "document")
    document = await storage.engineering_documents.update(document_id, body.changes())
    if document is None:
        raise ResourceNotFoundError("Document", document_id)
    return document


@router.delete("/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_document(document_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.engineering_documents.delete(document_id):
        raise ResourceNotFoundError("Document", document_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
