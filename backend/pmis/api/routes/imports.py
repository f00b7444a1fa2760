"""File Import Routes — multipart upload plus status polling over /api/import.

Invariants:
    - Exactly one "file" field; missing → 400, disallowed type → 415, too large → 413
    - Rejected uploads create no record
    - Accepted uploads answer 201 with status "processing"; the processing job
      runs as a background task after the response is sent
"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, File, UploadFile, status

from pmis.api.dependencies import get_app_settings, get_import_processor, get_storage
from pmis.api.routes.route_helpers import get_or_404
from pmis.config import Settings
from pmis.core.domain_types import ALLOWED_IMPORT_TYPES, ImportStatus
from pmis.core.errors import FileTooLargeError, MissingUploadError, UnsupportedFileTypeError
from pmis.infrastructure.storage import Storage
from pmis.schemas.imports import ImportedFile, ImportedFileCreate
from pmis.services.import_processor import ImportProcessor

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/import", tags=["import"])

_CHUNK_SIZE = 1024 * 1024


@router.post("", response_model=ImportedFile, status_code=status.HTTP_201_CREATED)
async def upload_file(
    background_tasks: BackgroundTasks,
    file: UploadFile | None = File(None),
    storage: Storage = Depends(get_storage),
    processor: ImportProcessor = Depends(get_import_processor),
    settings: Settings = Depends(get_app_settings),
):
    """Accept a CSV/Excel/PDF upload and queue it for processing."""
    if file is None:
        raise MissingUploadError()
    content_type = _base_content_type(file.content_type)
    if content_type not in ALLOWED_IMPORT_TYPES:
        raise UnsupportedFileTypeError(file.content_type)
    content = await _read_limited(file, settings.import_max_bytes)

    record = await storage.imported_files.create(ImportedFileCreate(
        file_name=file.filename or "upload",
        file_type=content_type,
        file_size=len(content),
        status=ImportStatus.PROCESSING,
        uploaded_by=settings.default_user_id,
    ).model_dump())
    processor.submit(record.id)
    background_tasks.add_task(processor.run, record.id, content)
    logger.info(
        f"Import accepted: {record.file_name} ({record.file_size} bytes)",
        extra={"file_id": record.id},
    )
    return record


@router.get("", response_model=list[ImportedFile])
async def list_imports(storage: Storage = Depends(get_storage)):
    return await storage.imported_files.list()


@router.get("/{file_id}", response_model=ImportedFile)
async def get_import(file_id: int, storage: Storage = Depends(get_storage)):
    return await get_or_404(storage.imported_files, file_id, "File")


def _base_content_type(content_type: str | None) -> str:
    return (content_type or "").split(";", 1)[0].strip().lower()


async def _read_limited(upload: UploadFile, max_bytes: int) -> bytes:
    chunks: list[bytes] = []
    size = 0
    while chunk := await upload.read(_CHUNK_SIZE):
        size += len(chunk)
        if size > max_bytes:
            raise FileTooLargeError(max_bytes)
        chunks.append(chunk)
    return b"".join(chunks)
