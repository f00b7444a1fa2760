"""Imported File Schemas — upload records tracked through processing."""

from typing import Any

from pydantic import Field

from pmis.core.domain_types import ImportStatus
from pmis.schemas.base import ApiModel, RecordMixin


class ImportedFileCreate(ApiModel):
    file_name: str
    file_type: str
    file_size: int = Field(ge=0)
    status: ImportStatus = ImportStatus.PROCESSING
    processed_data: dict[str, Any] | None = None
    error_message: str | None = None
    uploaded_by: int | None = None


class ImportedFile(RecordMixin, ImportedFileCreate):
    pass
