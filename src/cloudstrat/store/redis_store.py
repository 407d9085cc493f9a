"""Redis-backed configuration store."""

from __future__ import annotations

import logging

import redis.asyncio as aioredis
from pydantic import ValidationError
from redis.exceptions import RedisError

from cloudstrat.core.exceptions import RecordNotFoundError, StoreAccessError
from cloudstrat.core.models import ConfigurationRecord, RecordKey
from cloudstrat.store.base import ConfigStore, bind_record

logger = logging.getLogger(__name__)


class RedisConfigStore(ConfigStore):
    """
    Configuration store keeping each record as one JSON string in Redis.

    Records live at ``cloudstrat:config:{scope}:{name}``. Creating a missing
    record uses ``SET NX`` so concurrent creators converge on one value.
    """

    PREFIX = "cloudstrat:config"

    def __init__(self, redis_url: str, *, max_connections: int = 20) -> None:
        self._redis_url = redis_url
        self._max_connections = max_connections
        self._pool: aioredis.ConnectionPool | None = None
        self._redis: aioredis.Redis | None = None

    @classmethod
    def redis_key(cls, key: RecordKey) -> str:
        """Redis key holding the record identified by ``key``."""
        return f"{cls.PREFIX}:{key.scope}:{key.name}"

    async def connect(self) -> None:
        """Connect to Redis."""
        self._pool = aioredis.ConnectionPool.from_url(
            self._redis_url,
            max_connections=self._max_connections,
            decode_responses=True,
        )
        self._redis = aioredis.Redis(connection_pool=self._pool)

    async def close(self) -> None:
        """Close the Redis connection."""
        if self._redis:
            await self._redis.aclose()
        if self._pool:
            await self._pool.disconnect()
        self._redis = None
        self._pool = None

    async def ping(self) -> bool:
        if not self._redis:
            return False
        try:
            return bool(await self._redis.ping())
        except RedisError as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    def _client(self, key: RecordKey) -> aioredis.Redis:
        if self._redis is None:
            raise StoreAccessError(
                "redis configuration store is not connected",
                key.name,
                key.scope,
            )
        return self._redis

    def _parse(self, key: RecordKey, value: str) -> ConfigurationRecord:
        try:
            return ConfigurationRecord.model_validate_json(value)
        except ValidationError as e:
            raise StoreAccessError(
                f"stored configuration record {key} is corrupt",
                key.name,
                key.scope,
            ) from e

    async def get_or_default(
        self,
        key: RecordKey,
        default: ConfigurationRecord,
    ) -> ConfigurationRecord:
        client = self._client(key)
        name = self.redis_key(key)
        try:
            created = await client.set(name, bind_record(default, key).model_dump_json(), nx=True)
            value = await client.get(name)
        except RedisError as e:
            raise StoreAccessError(f"redis error: {e}", key.name, key.scope) from e

        if created:
            logger.info(f"Created default configuration record {key}")
        if value is None:
            raise StoreAccessError(
                f"configuration record {key} was deleted while being read",
                key.name,
                key.scope,
            )
        return self._parse(key, value)

    async def get(self, key: RecordKey) -> ConfigurationRecord:
        client = self._client(key)
        try:
            value = await client.get(self.redis_key(key))
        except RedisError as e:
            raise StoreAccessError(f"redis error: {e}", key.name, key.scope) from e
        if value is None:
            raise RecordNotFoundError(key.name, key.scope)
        return self._parse(key, value)

    async def put(self, record: ConfigurationRecord) -> ConfigurationRecord:
        key = record.key
        client = self._client(key)
        try:
            await client.set(self.redis_key(key), record.model_dump_json())
        except RedisError as e:
            raise StoreAccessError(f"redis error: {e}", key.name, key.scope) from e
        return record

    async def delete(self, key: RecordKey) -> bool:
        client = self._client(key)
        try:
            result = await client.delete(self.redis_key(key))
        except RedisError as e:
            raise StoreAccessError(f"redis error: {e}", key.name, key.scope) from e
        return result > 0
