"""Task Schemas — work items scoped to a project and assigned to a user."""

from datetime import datetime

from pydantic import Field

from pmis.core.domain_types import Priority, TaskStatus
from pmis.schemas.base import ApiModel, PartialModel, RecordMixin


class TaskCreate(ApiModel):
    project_id: int | None = None
    title: str = Field(min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus = TaskStatus.PENDING
    assigned_to: int | None = None
    due_date: datetime | None = None
    priority: Priority = Priority.MEDIUM


class TaskUpdate(PartialModel):
    non_nullable = frozenset({"title", "status", "priority"})

    project_id: int | None = None
    title: str | None = Field(None, min_length=1, max_length=500)
    description: str | None = None
    status: TaskStatus | None = None
    assigned_to: int | None = None
    due_date: datetime | None = None
    priority: Priority | None = None


class Task(RecordMixin, TaskCreate):
    pass
