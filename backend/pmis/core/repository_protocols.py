"""Boundary Protocols — the storage contract between the request layer and backends.

Invariants:
    - Routes and services depend on these Protocols, never on a concrete backend
    - get/update on a missing id return None; delete returns False — never raise
    - update merges only the supplied fields into the stored record
    - Ids are assigned by the backend once, monotonically, and never reused

Design Decisions:
    - Protocol over ABC: the in-memory and SQL repositories share no base class
    - Async methods: the SQL backend does IO; the in-memory one simply never awaits
"""

from typing import Any, Callable, Protocol, TypeVar

from pydantic import BaseModel


RecordT = TypeVar("RecordT", bound=BaseModel)

# (record, filter value) -> keep?
FilterPredicate = Callable[[Any, Any], bool]


class EntityRepository(Protocol[RecordT]):
    """Per-entity CRUD contract — implemented by infrastructure/."""

    entity_name: str

    async def list(self, **filters: Any) -> list[RecordT]: ...
    async def get(self, entity_id: int) -> RecordT | None: ...
    async def create(self, values: dict[str, Any]) -> RecordT: ...
    async def update(
        self, entity_id: int, changes: dict[str, Any],
    ) -> RecordT | None: ...
    async def delete(self, entity_id: int) -> bool: ...
    async def find_by(self, field: str, value: Any) -> RecordT | None: ...
    async def count(self) -> int: ...


def field_equals(field: str) -> FilterPredicate:
    """Build an equality predicate over one record attribute."""
    def predicate(record: Any, value: Any) -> bool:
        return getattr(record, field) == value
    return predicate
