"""Database Session Manager — async engine for the SQL storage backend.

Invariants:
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions surface as StorageError (core/errors.py)
    - Pool sizing only applies to server databases; SQLite uses the dialect default

Design Decisions:
    - Constructed explicitly by build_storage and owned by Storage, not a module
      singleton: each app (or test) gets its own engine
    - expire_on_commit=False: records are converted after commit without reloads
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    DBAPIError, IntegrityError, OperationalError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

from pmis.core.errors import StorageError
from pmis.db.base import Base

logger = logging.getLogger(__name__)

# Most specific first: IntegrityError and OperationalError subclass DBAPIError
_STORAGE_FAILURES: tuple[tuple[type[SQLAlchemyError], str, str], ...] = (
    (IntegrityError, "Integrity constraint violated", "commit"),
    (OperationalError, "Connection or operational error", "execute"),
    (DBAPIError, "Database driver error", "query"),
    (SQLAlchemyError, "Database operation failed", "unknown"),
)


def to_storage_error(exc: SQLAlchemyError) -> StorageError:
    for exc_type, message, operation in _STORAGE_FAILURES:
        if isinstance(exc, exc_type):
            return StorageError(message, operation)
    return StorageError("Database operation failed", "unknown")


class DatabaseSessionManager:
    """Owns the async engine for one database URL."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        is_sqlite = database_url.startswith("sqlite")
        engine_kwargs: dict = {"pool_pre_ping": True}
        if not is_sqlite:
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Session that rolls back and raises StorageError on any DB failure."""
        async with self._session_factory() as session:
            try:
                yield session
            except SQLAlchemyError as e:
                await session.rollback()
                error = to_storage_error(e)
                logger.error(
                    f"{error.message}: {e}", extra={"error_code": error.code},
                )
                raise error from e

    async def create_all(self) -> None:
        """Create missing tables (alembic owns real migrations)."""
        import pmis.models  # noqa: F401  (populates Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """SELECT 1 round trip, for the readiness probe."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except (StorageError, OSError) as e:
            logger.warning(f"Storage not ready: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()
