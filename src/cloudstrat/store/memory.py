"""In-process configuration store."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable

from cloudstrat.core.exceptions import RecordNotFoundError
from cloudstrat.core.models import ConfigurationRecord, RecordKey
from cloudstrat.store.base import ConfigStore, bind_record

logger = logging.getLogger(__name__)


class MemoryConfigStore(ConfigStore):
    """
    Configuration store held in a dictionary.

    Records are copied on the way in and out, so callers always work with a
    snapshot. Used for local development and tests.
    """

    def __init__(self, records: Iterable[ConfigurationRecord] = ()) -> None:
        self._records: dict[RecordKey, ConfigurationRecord] = {
            record.key: record.model_copy(deep=True) for record in records
        }
        self._lock = asyncio.Lock()

    async def get_or_default(
        self,
        key: RecordKey,
        default: ConfigurationRecord,
    ) -> ConfigurationRecord:
        async with self._lock:
            record = self._records.get(key)
            if record is None:
                record = bind_record(default, key)
                self._records[key] = record
                logger.info(f"Created default configuration record {key}")
            return record.model_copy(deep=True)

    async def get(self, key: RecordKey) -> ConfigurationRecord:
        async with self._lock:
            record = self._records.get(key)
            if record is None:
                raise RecordNotFoundError(key.name, key.scope)
            return record.model_copy(deep=True)

    async def put(self, record: ConfigurationRecord) -> ConfigurationRecord:
        async with self._lock:
            self._records[record.key] = record.model_copy(deep=True)
        return record

    async def delete(self, key: RecordKey) -> bool:
        async with self._lock:
            return self._records.pop(key, None) is not None
