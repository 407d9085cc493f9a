"""Repository for configuration record rows."""

from sqlalchemy import delete, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from cloudstrat.core.models import ConfigurationRecord, RecordKey
from cloudstrat.db.models import ConfigurationRecordModel


class ConfigurationRecordRepository:
    """Async queries over the configuration_records table."""

    model = ConfigurationRecordModel

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_key(self, key: RecordKey) -> ConfigurationRecordModel | None:
        """Find a record by name and scope."""
        stmt = select(self.model).where(
            self.model.name == key.name,
            self.model.scope == key.scope,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def insert_if_absent(self, record: ConfigurationRecord) -> bool:
        """Insert a record unless one with the same name and scope exists."""
        stmt = (
            insert(self.model)
            .values(name=record.name, scope=record.scope, data=record.data)
            .on_conflict_do_nothing(index_elements=["name", "scope"])
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    async def upsert(self, record: ConfigurationRecord) -> None:
        """Insert a record or replace the data of the existing one."""
        stmt = insert(self.model).values(
            name=record.name,
            scope=record.scope,
            data=record.data,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=["name", "scope"],
            set_={"data": stmt.excluded.data, "updated_at": func.now()},
        )
        await self._session.execute(stmt)

    async def delete_by_key(self, key: RecordKey) -> bool:
        """Delete a record by name and scope."""
        stmt = delete(self.model).where(
            self.model.name == key.name,
            self.model.scope == key.scope,
        )
        result = await self._session.execute(stmt)
        return result.rowcount > 0
