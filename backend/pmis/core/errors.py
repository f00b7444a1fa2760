"""Error Hierarchy — typed, categorized exceptions for every PMIS failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope {"error": message}
    - No internal details leaked in user-facing messages (validation detail stays in logs)

Design Decisions:
    - Single hierarchy with PmisError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data travels with the error, not the message
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    UPLOAD = "upload"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability — logged, never sent to the client."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity: str | None = None
    entity_id: int | None = None
    debug_info: dict[str, Any] | None = None


class PmisError(Exception):
    """Base exception for all PMIS errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message}

    def log_extra(self) -> dict:
        """Structured fields for the JSON log formatter."""
        return {
            "error_code": self.code,
            "entity": self.context.entity,
            "entity_id": self.context.entity_id,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class EntityValidationError(PmisError):
    """Request body failed the entity schema. Details are logged only."""
    def __init__(
        self, label: str, details: list[dict] | None = None,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.debug_info = {"errors": details or []}
        super().__init__(
            f"Invalid {label} data", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.details = details or []


class MissingUploadError(PmisError):
    """Import request carried no file."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "No file uploaded", "NO_FILE_UPLOADED", ErrorCategory.UPLOAD,
            ErrorSeverity.WARNING, context, 400,
        )


class ResourceNotFoundError(PmisError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext(entity=resource_type, entity_id=resource_id)
        super().__init__(
            f"{resource_type} not found", "RESOURCE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, ctx, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class DuplicateValueError(PmisError):
    """A value declared unique is already taken by another record."""
    def __init__(
        self, label: str, value: object, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{label} '{value}' already exists", "DUPLICATE_VALUE",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, context, 409,
        )
        self.label = label
        self.value = value


class FileTooLargeError(PmisError):
    """Upload exceeded the configured size limit."""
    def __init__(self, max_bytes: int, context: ErrorContext | None = None):
        super().__init__(
            f"File exceeds the {max_bytes // (1024 * 1024)}MB upload limit",
            "FILE_TOO_LARGE", ErrorCategory.UPLOAD,
            ErrorSeverity.WARNING, context, 413,
        )
        self.max_bytes = max_bytes


class UnsupportedFileTypeError(PmisError):
    """Upload content type is not in the import allow-list."""
    def __init__(self, content_type: str | None, context: ErrorContext | None = None):
        super().__init__(
            f"Unsupported file type: {content_type or 'unknown'}. "
            "Accepted types are CSV, Excel (.xls/.xlsx) and PDF",
            "UNSUPPORTED_FILE_TYPE", ErrorCategory.UPLOAD,
            ErrorSeverity.WARNING, context, 415,
        )
        self.content_type = content_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(PmisError):
    """Persistent backend operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Storage {operation} failed: {message}",
            "STORAGE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
