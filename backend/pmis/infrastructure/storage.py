"""Storage — the access layer: one repository per entity plus aggregate queries.

Invariants:
    - The request layer reaches entity state only through a Storage instance
    - Both backends are assembled from the same entity table (_ENTITIES)
    - Filters: project_id on project-scoped entities, user_id on notifications
    - delete() is not exposed by the routes for users, imported files, notifications

Design Decisions:
    - Explicitly constructed and handed to the app (no module-level singleton):
      every test builds its own Storage
    - Uniqueness is NOT enforced here; the routes check it with find_by()
"""

import logging
from dataclasses import dataclass
from typing import Any

from pmis.config import Settings
from pmis.core.dashboard_stats import compute_dashboard_stats
from pmis.core.repository_protocols import EntityRepository, field_equals
from pmis.infrastructure.database import DatabaseSessionManager
from pmis.infrastructure.memory_repository import InMemoryRepository
from pmis.infrastructure.sql_repository import SqlRepository
from pmis.models import (
    UserRow, ProjectRow, TaskRow, ProcurementOrderRow, ProcurementRequestRow,
    ProjectPhaseRow, EngineeringDocumentRow, ImportedFileRow, NotificationRow,
)
from pmis.schemas.engineering import EngineeringDocument
from pmis.schemas.imports import ImportedFile
from pmis.schemas.notifications import Notification
from pmis.schemas.phases import ProjectPhase
from pmis.schemas.procurement import ProcurementOrder, ProcurementRequest
from pmis.schemas.projects import Project
from pmis.schemas.tasks import Task
from pmis.schemas.users import User, UserCreate

logger = logging.getLogger(__name__)

# attribute -> (entity name, record model, ORM model, filterable fields)
_ENTITIES: dict[str, tuple[str, type, type, tuple[str, ...]]] = {
    "users": ("User", User, UserRow, ()),
    "projects": ("Project", Project, ProjectRow, ()),
    "tasks": ("Task", Task, TaskRow, ("project_id",)),
    "procurement_orders": (
        "ProcurementOrder", ProcurementOrder, ProcurementOrderRow, ("project_id",),
    ),
    "procurement_requests": (
        "ProcurementRequest", ProcurementRequest, ProcurementRequestRow, ("project_id",),
    ),
    "project_phases": (
        "ProjectPhase", ProjectPhase, ProjectPhaseRow, ("project_id",),
    ),
    "engineering_documents": (
        "EngineeringDocument", EngineeringDocument, EngineeringDocumentRow, ("project_id",),
    ),
    "imported_files": ("ImportedFile", ImportedFile, ImportedFileRow, ()),
    "notifications": ("Notification", Notification, NotificationRow, ("user_id",)),
}


@dataclass
class Storage:
    """Access layer facade over the per-entity repositories."""

    users: EntityRepository[User]
    projects: EntityRepository[Project]
    tasks: EntityRepository[Task]
    procurement_orders: EntityRepository[ProcurementOrder]
    procurement_requests: EntityRepository[ProcurementRequest]
    project_phases: EntityRepository[ProjectPhase]
    engineering_documents: EntityRepository[EngineeringDocument]
    imported_files: EntityRepository[ImportedFile]
    notifications: EntityRepository[Notification]
    backend: str = "memory"
    db: DatabaseSessionManager | None = None

    async def get_user_by_username(self, username: str) -> User | None:
        return await self.users.find_by("username", username)

    async def mark_notification_read(self, notification_id: int) -> bool:
        updated = await self.notifications.update(notification_id, {"read": True})
        return updated is not None

    async def dashboard_stats(self) -> dict[str, Any]:
        projects = await self.projects.list()
        team_members = await self.users.count()
        return compute_dashboard_stats(projects, team_members)

    async def seed_default_admin(self, settings: Settings) -> User:
        """Create the administrator account unless it already exists."""
        existing = await self.get_user_by_username(settings.admin_username)
        if existing is not None:
            return existing
        admin = UserCreate(
            username=settings.admin_username,
            password=settings.admin_password,
            email=settings.admin_email,
            full_name=settings.admin_full_name,
            role="admin",
        )
        user = await self.users.create(admin.model_dump())
        logger.info(
            "Seeded default admin user",
            extra={"entity": "User", "entity_id": user.id},
        )
        return user

    async def health_check(self) -> bool:
        if self.db is None:
            return True
        return await self.db.health_check()

    async def close(self) -> None:
        if self.db is not None:
            await self.db.dispose()


def build_memory_storage() -> Storage:
    """Fresh, empty in-memory storage (not seeded)."""
    repositories = {
        attr: InMemoryRepository(
            record_model, name, {f: field_equals(f) for f in filters},
        )
        for attr, (name, record_model, _, filters) in _ENTITIES.items()
    }
    return Storage(**repositories, backend="memory")


def build_sql_storage(db: DatabaseSessionManager) -> Storage:
    """SQL-backed storage over an already-initialized database."""
    repositories = {
        attr: SqlRepository(db, orm_model, record_model, name, filters)
        for attr, (name, record_model, orm_model, filters) in _ENTITIES.items()
    }
    return Storage(**repositories, backend="sql", db=db)


async def build_storage(settings: Settings) -> Storage:
    """Build the configured backend and seed the default admin."""
    if settings.storage_backend == "sql":
        db = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        await db.create_all()
        storage = build_sql_storage(db)
    else:
        storage = build_memory_storage()
    await storage.seed_default_admin(settings)
    logger.info(f"Storage ready ({storage.backend} backend)")
    return storage
