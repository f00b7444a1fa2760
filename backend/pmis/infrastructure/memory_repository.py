"""In-Memory Repository — one generic map-backed store per entity type.

Invariants:
    - Ids come from a per-repository counter starting at 1; never reused after delete
    - list() preserves insertion order; filters are equality predicates, None = no filter
    - update() shallow-merges the supplied fields; absent fields stay untouched
    - Missing ids yield None / False, never an exception
    - Callers receive deep copies: stored records change only through update()

Design Decisions:
    - One generic class instead of a copy per entity; per-entity filtering is
      injected as named predicates (see core/repository_protocols.field_equals)
    - No locking: the event loop never switches tasks inside these methods
"""

import builtins
import logging
from datetime import datetime, timezone
from typing import Any, Generic

from pmis.core.repository_protocols import FilterPredicate, RecordT

logger = logging.getLogger(__name__)


class InMemoryRepository(Generic[RecordT]):
    """Map-backed EntityRepository."""

    def __init__(
        self,
        record_model: type[RecordT],
        entity_name: str,
        filters: dict[str, FilterPredicate] | None = None,
    ):
        self.entity_name = entity_name
        self._record_model = record_model
        self._filters = dict(filters or {})
        self._records: dict[int, RecordT] = {}
        self._next_id = 1

    async def list(self, **filters: Any) -> list[RecordT]:
        active = self._resolve_filters(filters)
        return [
            _detached(record) for record in self._records.values()
            if all(predicate(record, value) for predicate, value in active)
        ]

    async def get(self, entity_id: int) -> RecordT | None:
        record = self._records.get(entity_id)
        return _detached(record) if record is not None else None

    async def create(self, values: dict[str, Any]) -> RecordT:
        entity_id = self._next_id
        self._next_id += 1
        record = self._record_model.model_validate({
            **values, "id": entity_id, "created_at": datetime.now(timezone.utc),
        })
        self._records[entity_id] = record
        logger.debug(
            f"Created {self.entity_name} {entity_id}",
            extra={"entity": self.entity_name, "entity_id": entity_id},
        )
        return _detached(record)

    async def update(
        self, entity_id: int, changes: dict[str, Any],
    ) -> RecordT | None:
        existing = self._records.get(entity_id)
        if existing is None:
            return None
        updated = existing.model_copy(update=changes, deep=True)
        self._records[entity_id] = updated
        return _detached(updated)

    async def delete(self, entity_id: int) -> bool:
        removed = self._records.pop(entity_id, None) is not None
        if removed:
            logger.debug(
                f"Deleted {self.entity_name} {entity_id}",
                extra={"entity": self.entity_name, "entity_id": entity_id},
            )
        return removed

    async def find_by(self, field: str, value: Any) -> RecordT | None:
        for record in self._records.values():
            if getattr(record, field) == value:
                return _detached(record)
        return None

    async def count(self) -> int:
        return len(self._records)

    # `list` above shadows the builtin inside this class body
    def _resolve_filters(
        self, filters: dict[str, Any],
    ) -> builtins.list[tuple[FilterPredicate, Any]]:
        active = []
        for name, value in filters.items():
            if value is None:
                continue
            predicate = self._filters.get(name)
            if predicate is None:
                raise ValueError(
                    f"{self.entity_name} cannot be filtered by {name!r}",
                )
            active.append((predicate, value))
        return active


def _detached(record: RecordT) -> RecordT:
    return record.model_copy(deep=True)
