"""Tests for the library client."""

from __future__ import annotations

import pytest

from cloudstrat.client import CloudstratClient, read_storage_strategy
from cloudstrat.core.exceptions import TierUndefinedError
from cloudstrat.core.types import ResourceType
from cloudstrat.store.memory import MemoryConfigStore


class TestCloudstratClient:
    """Tests for CloudstratClient."""

    async def test_requires_initialization(self, mock_settings):
        """Using the client outside its context should fail clearly."""
        client = CloudstratClient(mock_settings)

        with pytest.raises(RuntimeError, match="not initialized"):
            await client.read_storage_strategy(ResourceType.POSTGRES, "production")

    async def test_reads_from_injected_store(self, mock_settings, populated_store):
        """An injected store should be used with the record identity from settings."""
        async with CloudstratClient(mock_settings, store=populated_store) as client:
            strategy = await client.read_storage_strategy(ResourceType.REDIS, "production")

        assert strategy.payload() == {"nodeType": "cache.r5.large", "replicas": 2}

    async def test_injected_store_is_not_closed(self, mock_settings):
        """The client should only close stores it created."""
        closed = []

        class TrackingStore(MemoryConfigStore):
            async def close(self) -> None:
                closed.append(True)

        async with CloudstratClient(mock_settings, store=TrackingStore()):
            pass

        assert closed == []

    async def test_manager_uses_settings_identity(self, mock_settings, memory_store):
        async with CloudstratClient(mock_settings, store=memory_store) as client:
            assert client.manager.config_name == mock_settings.config_name
            assert client.manager.config_scope == mock_settings.default_scope

    async def test_builds_store_from_settings(self, mock_settings):
        """Without an injected store the default record should be synthesized."""
        async with CloudstratClient(mock_settings) as client:
            strategy = await client.read_storage_strategy(ResourceType.BLOB_STORAGE, "development")

        assert strategy.is_empty

    async def test_errors_propagate(self, mock_settings, populated_store):
        async with CloudstratClient(mock_settings, store=populated_store) as client:
            with pytest.raises(TierUndefinedError):
                await client.read_storage_strategy(ResourceType.POSTGRES, "qa")


class TestConvenienceFunction:
    """Tests for the module-level read_storage_strategy."""

    async def test_read_storage_strategy(self, mock_settings):
        strategy = await read_storage_strategy(
            ResourceType.POSTGRES, "production", settings=mock_settings
        )
        assert strategy.resource_type == "postgres"
        assert strategy.is_empty
