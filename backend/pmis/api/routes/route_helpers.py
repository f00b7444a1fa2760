"""Route Helpers — validation, lookup and uniqueness checks shared by all routes.

Invariants:
    - parse_body raises EntityValidationError (400) with a generic message;
      Pydantic details travel only in the error context for logging
    - get_or_404 raises ResourceNotFoundError (404) for a missing id
    - ensure_unique raises DuplicateValueError (409) when another record holds the value
    - project_id_filter treats a blank ?projectId= as no filter
"""

from typing import Any, TypeVar

from fastapi import Query
from pydantic import BaseModel, ValidationError

from pmis.core.errors import (
    DuplicateValueError, EntityValidationError, ErrorContext, ResourceNotFoundError,
)
from pmis.core.repository_protocols import EntityRepository

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def parse_body(schema: type[SchemaT], payload: Any, label: str) -> SchemaT:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise EntityValidationError(
            label, e.errors(include_url=False, include_context=False),
        )


async def get_or_404(repository: EntityRepository, entity_id: int, resource: str):
    record = await repository.get(entity_id)
    if record is None:
        raise ResourceNotFoundError(resource, entity_id)
    return record


async def ensure_unique(
    repository: EntityRepository,
    field: str,
    value: Any,
    label: str,
    exclude_id: int | None = None,
) -> None:
    """Reject a value another record already holds (the record itself excluded)."""
    if value is None:
        return
    holder = await repository.find_by(field, value)
    if holder is not None and holder.id != exclude_id:
        raise DuplicateValueError(
            label, value,
            ErrorContext(entity=repository.entity_name, entity_id=holder.id),
        )


def project_id_filter(
    project_id: str | None = Query(None, alias="projectId"),
) -> int | None:
    """?projectId= query filter; absent or blank means every record."""
    if project_id is None or not project_id.strip():
        return None
    try:
        return int(project_id)
    except ValueError:
        raise EntityValidationError(
            "request", [{"loc": ("query", "projectId"), "input": project_id}],
        )
