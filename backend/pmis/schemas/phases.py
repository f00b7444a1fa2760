"""Project Phase Schemas — scheduled stages of a project with their deliverables."""

from datetime import datetime

from pydantic import Field

from pmis.core.domain_types import PhaseStatus
from pmis.schemas.base import ApiModel, DecimalString, PartialModel, RecordMixin


class ProjectPhaseCreate(ApiModel):
    project_id: int
    phase_name: str = Field(min_length=1)
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    dependencies: list[str] = Field(default_factory=list)
    deliverables: list[str] = Field(default_factory=list)
    budget: DecimalString | None = None
    progress: int = Field(0, ge=0, le=100)
    status: PhaseStatus = PhaseStatus.NOT_STARTED


class ProjectPhaseUpdate(PartialModel):
    non_nullable = frozenset({
        "project_id", "phase_name", "dependencies", "deliverables",
        "progress", "status",
    })

    project_id: int | None = None
    phase_name: str | None = Field(None, min_length=1)
    description: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    dependencies: list[str] | None = None
    deliverables: list[str] | None = None
    budget: DecimalString | None = None
    progress: int | None = Field(None, ge=0, le=100)
    status: PhaseStatus | None = None


class ProjectPhase(RecordMixin, ProjectPhaseCreate):
    pass
