"""Engineering Document Schemas — versioned drawings, specs and reports."""

from pydantic import Field

from pmis.core.domain_types import DocumentStatus
from pmis.schemas.base import ApiModel, PartialModel, RecordMixin


class EngineeringDocumentCreate(ApiModel):
    project_id: int | None = None
    title: str = Field(min_length=1)
    document_type: str = Field(min_length=1)
    version: str = "1.0"
    file_path: str | None = None
    status: DocumentStatus = DocumentStatus.DRAFT
    created_by: int | None = None


class EngineeringDocumentUpdate(PartialModel):
    non_nullable = frozenset({"title", "document_type", "version", "status"})

    project_id: int | None = None
    title: str | None = Field(None, min_length=1)
    document_type: str | None = Field(None, min_length=1)
    version: str | None = None
    file_path: str | None = None
    status: DocumentStatus | None = None
    created_by: int | None = None


class EngineeringDocument(RecordMixin, EngineeringDocumentCreate):
    pass
