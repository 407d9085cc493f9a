"""Tests for building stores from settings."""

from __future__ import annotations

import pytest

from cloudstrat.config import CloudstratSettings
from cloudstrat.core.exceptions import ConfigurationError
from cloudstrat.core.types import StoreBackend
from cloudstrat.store.factory import create_store
from cloudstrat.store.memory import MemoryConfigStore
from cloudstrat.store.redis_store import RedisConfigStore
from cloudstrat.store.sql_store import SQLConfigStore


def _settings(**overrides) -> CloudstratSettings:
    return CloudstratSettings(_env_file=None, **overrides)


class TestCreateStore:
    """Tests for create_store."""

    def test_memory_backend(self):
        assert isinstance(create_store(_settings(store_backend=StoreBackend.MEMORY)), MemoryConfigStore)

    def test_redis_backend(self):
        store = create_store(
            _settings(store_backend=StoreBackend.REDIS, redis_url="redis://cache:6379/2")
        )
        assert isinstance(store, RedisConfigStore)

    def test_postgres_backend(self):
        store = create_store(
            _settings(
                store_backend=StoreBackend.POSTGRES,
                database_url="postgresql+asyncpg://u:p@db:5432/strategies",
            )
        )
        assert isinstance(store, SQLConfigStore)

    @pytest.mark.parametrize(
        "backend,field",
        [(StoreBackend.REDIS, "redis_url"), (StoreBackend.POSTGRES, "database_url")],
    )
    def test_missing_url_raises(self, backend: StoreBackend, field: str):
        """Backends without a connection URL should be rejected."""
        with pytest.raises(ConfigurationError) as exc_info:
            create_store(_settings(store_backend=backend, **{field: None}))

        assert exc_info.value.details["store_backend"] == backend.value


class TestRedisKeys:
    """Tests for Redis key layout."""

    def test_redis_key_format(self, record_key):
        assert RedisConfigStore.redis_key(record_key) == "cloudstrat:config:test-namespace:test-strategies"
