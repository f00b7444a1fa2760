"""ORM Models — SQLAlchemy tables backing the sql storage backend.

Invariants:
    - All models inherit from Base (db/base.py)
    - Column names equal the snake_case schema field names, so rows convert
      straight to Pydantic records
    - Foreign keys are plain integers without constraints: deleting a project
      leaves its tasks in place, as the in-memory backend does
    - sqlite_autoincrement: ids are never reused after a delete

Design Decisions:
    - All models imported here so Base.metadata is complete before create_all
"""

from pmis.models.user import UserRow  # noqa: F401
from pmis.models.project import ProjectRow  # noqa: F401
from pmis.models.task import TaskRow  # noqa: F401
from pmis.models.procurement import ProcurementOrderRow, ProcurementRequestRow  # noqa: F401
from pmis.models.project_phase import ProjectPhaseRow  # noqa: F401
from pmis.models.engineering_document import EngineeringDocumentRow  # noqa: F401
from pmis.models.imported_file import ImportedFileRow  # noqa: F401
from pmis.models.notification import NotificationRow  # noqa: F401
