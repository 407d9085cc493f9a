"""Abstract configuration store accessor."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cloudstrat.core.models import ConfigurationRecord, RecordKey


def bind_record(record: ConfigurationRecord, key: RecordKey) -> ConfigurationRecord:
    """Copy a record under the identity given by ``key``."""
    return record.model_copy(update={"name": key.name, "scope": key.scope}, deep=True)


class ConfigStore(ABC):
    """
    Persistent store of configuration records.

    Implementations own all concurrency control on the records they hold.
    ``get_or_default`` must be atomic, or at least idempotent, when several
    callers race to create the same record: every caller observes the single
    record that ends up stored.
    """

    async def connect(self) -> None:
        """Open connections to the backing service."""

    async def close(self) -> None:
        """Release connections to the backing service."""

    async def ping(self) -> bool:
        """Check that the backing service is reachable."""
        return True

    @abstractmethod
    async def get_or_default(
        self,
        key: RecordKey,
        default: ConfigurationRecord,
    ) -> ConfigurationRecord:
        """
        Read a record, creating it from ``default`` if it does not exist.

        Args:
            key: Name and scope of the record
            default: Record body to store when none exists yet

        Returns:
            The stored record

        Raises:
            StoreAccessError: If the backing service fails
        """
        ...

    @abstractmethod
    async def get(self, key: RecordKey) -> ConfigurationRecord:
        """
        Read an existing record.

        Raises:
            RecordNotFoundError: If no record exists for ``key``
            StoreAccessError: If the backing service fails
        """
        ...

    @abstractmethod
    async def put(self, record: ConfigurationRecord) -> ConfigurationRecord:
        """Create or replace a record."""
        ...

    @abstractmethod
    async def delete(self, key: RecordKey) -> bool:
        """Delete a record, returning whether it existed."""
        ...

    async def __aenter__(self) -> ConfigStore:
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
