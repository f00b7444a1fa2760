"""Project Schemas — the aggregate that owns tasks, orders, phases and documents.

Invariants:
    - name is required and non-empty
    - progress is bounded 0-100
    - budget is a decimal string; numeric input is accepted and stringified
"""

from datetime import datetime
from typing import Any

from pydantic import Field

from pmis.core.domain_types import ProjectStatus
from pmis.schemas.base import ApiModel, DecimalString, PartialModel, RecordMixin


class ProjectCreate(ApiModel):
    name: str = Field(min_length=1, max_length=500)
    description: str | None = None
    status: ProjectStatus = ProjectStatus.PLANNING
    progress: int = Field(0, ge=0, le=100)
    budget: DecimalString | None = None
    due_date: datetime | None = None
    start_date: datetime | None = None
    created_by: int | None = None
    category: str = "general"
    priority: str = "medium"
    objectives: list[str] = Field(default_factory=list)
    stakeholders: list[str] = Field(default_factory=list)
    milestones: list[dict[str, Any]] = Field(default_factory=list)
    requirements: str | None = None
    risk_assessment: str | None = None


class ProjectUpdate(PartialModel):
    non_nullable = frozenset({
        "name", "status", "progress", "category", "priority",
        "objectives", "stakeholders", "milestones",
    })

    name: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    status: ProjectStatus | None = None
    progress: int | None = Field(None, ge=0, le=100)
    budget: DecimalString | None = None
    due_date: datetime | None = None
    start_date: datetime | None = None
    created_by: int | None = None
    category: str | None = None
    priority: str | None = None
    objectives: list[str] | None = None
    stakeholders: list[str] | None = None
    milestones: list[dict[str, Any]] | None = None
    requirements: str | None = None
    risk_assessment: str | None = None


class Project(RecordMixin, ProjectCreate):
    pass
