"""SQL Repository — EntityRepository over one SQLAlchemy table.

Invariants:
    - Same observable contract as InMemoryRepository (see core/repository_protocols)
    - Ids come from the table's autoincrement sequence; never reused
    - Rows are converted to Pydantic records inside the session that loaded them
    - Only declared filter columns may be filtered on
"""

import logging
from datetime import datetime, timezone
from typing import Any, Generic

from sqlalchemy import func, select

from pmis.core.repository_protocols import RecordT
from pmis.infrastructure.database import DatabaseSessionManager

logger = logging.getLogger(__name__)


class SqlRepository(Generic[RecordT]):
    """Table-backed EntityRepository."""

    def __init__(
        self,
        db: DatabaseSessionManager,
        orm_model: type,
        record_model: type[RecordT],
        entity_name: str,
        filter_fields: tuple[str, ...] = (),
    ):
        self.entity_name = entity_name
        self._db = db
        self._orm = orm_model
        self._record_model = record_model
        self._filter_fields = frozenset(filter_fields)

    async def list(self, **filters: Any) -> list[RecordT]:
        query = select(self._orm).order_by(self._orm.id)
        for name, value in filters.items():
            if value is None:
                continue
            if name not in self._filter_fields:
                raise ValueError(
                    f"{self.entity_name} cannot be filtered by {name!r}",
                )
            query = query.where(getattr(self._orm, name) == value)
        async with self._db.session() as session:
            result = await session.execute(query)
            return [self._to_record(row) for row in result.scalars().all()]

    async def get(self, entity_id: int) -> RecordT | None:
        async with self._db.session() as session:
            row = await session.get(self._orm, entity_id)
            return self._to_record(row) if row is not None else None

    async def create(self, values: dict[str, Any]) -> RecordT:
        async with self._db.session() as session:
            row = self._orm(**values, created_at=datetime.now(timezone.utc))
            session.add(row)
            await session.commit()
            await session.refresh(row)
            logger.debug(
                f"Created {self.entity_name} {row.id}",
                extra={"entity": self.entity_name, "entity_id": row.id},
            )
            return self._to_record(row)

    async def update(
        self, entity_id: int, changes: dict[str, Any],
    ) -> RecordT | None:
        async with self._db.session() as session:
            row = await session.get(self._orm, entity_id)
            if row is None:
                return None
            for name, value in changes.items():
                setattr(row, name, value)
            await session.commit()
            await session.refresh(row)
            return self._to_record(row)

    async def delete(self, entity_id: int) -> bool:
        async with self._db.session() as session:
            row = await session.get(self._orm, entity_id)
            if row is None:
                return False
            await session.delete(row)
            await session.commit()
            return True

    async def find_by(self, field: str, value: Any) -> RecordT | None:
        query = select(self._orm).where(getattr(self._orm, field) == value).limit(1)
        async with self._db.session() as session:
            row = (await session.execute(query)).scalars().first()
            return self._to_record(row) if row is not None else None

    async def count(self) -> int:
        query = select(func.count()).select_from(self._orm)
        async with self._db.session() as session:
            return (await session.execute(query)).scalar_one()

    def _to_record(self, row: Any) -> RecordT:
        return self._record_model.model_validate(row)
