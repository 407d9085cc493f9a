"""PostgreSQL-backed configuration store."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cloudstrat.core.exceptions import RecordNotFoundError, StoreAccessError
from cloudstrat.core.models import ConfigurationRecord, RecordKey
from cloudstrat.db.repository import ConfigurationRecordRepository
from cloudstrat.store.base import ConfigStore, bind_record

logger = logging.getLogger(__name__)

# asyncpg raises plain OSError when the server is unreachable
DATABASE_ERRORS = (SQLAlchemyError, OSError)


class SQLConfigStore(ConfigStore):
    """
    Configuration store backed by the ``configuration_records`` table.

    Creating a missing record is an ``INSERT ... ON CONFLICT DO NOTHING``
    followed by a read in the same transaction, so racing creators all see
    the row that won.

    The engine is created on first use and disposed by ``close``; a closed
    store reconnects on its next call.
    """

    def __init__(
        self,
        database_url: str,
        *,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
    ) -> None:
        self._database_url = database_url
        self._echo = echo
        self._pool_size = pool_size
        self._max_overflow = max_overflow
        self._engine: AsyncEngine | None = None
        self._sessions: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        """Get the database engine, creating it if necessary."""
        if self._engine is None:
            self._engine = create_async_engine(
                self._database_url,
                echo=self._echo,
                pool_size=self._pool_size,
                max_overflow=self._max_overflow,
                pool_pre_ping=True,
            )
        return self._engine

    @asynccontextmanager
    async def _transaction(self) -> AsyncIterator[ConfigurationRecordRepository]:
        """Repository on a session that commits on success and rolls back on error."""
        if self._sessions is None:
            self._sessions = async_sessionmaker(
                self.engine,
                expire_on_commit=False,
                autoflush=False,
            )
        async with self._sessions() as session:
            try:
                yield ConfigurationRecordRepository(session)
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def close(self) -> None:
        if self._engine is not None:
            await self._engine.dispose()
            self._engine = None
            self._sessions = None

    async def ping(self) -> bool:
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except DATABASE_ERRORS as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True

    async def get_or_default(
        self,
        key: RecordKey,
        default: ConfigurationRecord,
    ) -> ConfigurationRecord:
        try:
            async with self._transaction() as repo:
                created = await repo.insert_if_absent(bind_record(default, key))
                model = await repo.get_by_key(key)
                record = model.to_record() if model is not None else None
        except DATABASE_ERRORS as e:
            raise StoreAccessError(f"database error: {e}", key.name, key.scope) from e

        if created:
            logger.info(f"Created default configuration record {key}")
        if record is None:
            raise StoreAccessError(
                f"configuration record {key} was deleted while being read",
                key.name,
                key.scope,
            )
        return record

    async def get(self, key: RecordKey) -> ConfigurationRecord:
        try:
            async with self._transaction() as repo:
                model = await repo.get_by_key(key)
                record = model.to_record() if model is not None else None
        except DATABASE_ERRORS as e:
            raise StoreAccessError(f"database error: {e}", key.name, key.scope) from e
        if record is None:
            raise RecordNotFoundError(key.name, key.scope)
        return record

    async def put(self, record: ConfigurationRecord) -> ConfigurationRecord:
        key = record.key
        try:
            async with self._transaction() as repo:
                await repo.upsert(record)
        except DATABASE_ERRORS as e:
            raise StoreAccessError(f"database error: {e}", key.name, key.scope) from e
        return record

    async def delete(self, key: RecordKey) -> bool:
        try:
            async with self._transaction() as repo:
                return await repo.delete_by_key(key)
        except DATABASE_ERRORS as e:
            raise StoreAccessError(f"database error: {e}", key.name, key.scope) from e
