"""Domain Types — status vocabularies and identity aliases for PMIS entities.

Invariants:
    - Every closed set of states is an Enum — no raw string matching in logic
    - Entity ids are positive integers assigned by the storage layer

Design Decisions:
    - str Enums: serialize to JSON without custom encoders
    - NewType ids: zero runtime cost, still distinguishable to a type checker
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", int)
UserId = NewType("UserId", int)
ProjectId = NewType("ProjectId", int)


# ─── Enums ───────────────────────────────────────────────────────

class ProjectStatus(str, Enum):
    PLANNING = "planning"
    IN_PROGRESS = "in-progress"
    REVIEW = "review"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


ACTIVE_PROJECT_STATUSES = frozenset({
    ProjectStatus.PLANNING.value, ProjectStatus.IN_PROGRESS.value,
})


class TaskStatus(str, Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class Urgency(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class OrderStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    ORDERED = "ordered"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class RequestStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class PhaseStatus(str, Enum):
    NOT_STARTED = "not-started"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    ON_HOLD = "on-hold"


class DocumentStatus(str, Enum):
    DRAFT = "draft"
    REVIEW = "review"
    APPROVED = "approved"
    REJECTED = "rejected"


class ImportStatus(str, Enum):
    """Wire-visible status of an ImportedFile record."""
    PROCESSING = "processing"
    COMPLETED = "completed"
    FAILED = "failed"


class ImportJobState(str, Enum):
    """Internal lifecycle of an import processing job."""
    QUEUED = "queued"
    PROCESSING = "processing"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


# Content types accepted by the file import endpoint
ALLOWED_IMPORT_TYPES = frozenset({
    "text/csv",
    "application/vnd.ms-excel",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/pdf",
})
