"""Main library client for standalone usage."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cloudstrat.config import CloudstratSettings
from cloudstrat.core.models import StrategyConfig
from cloudstrat.core.types import ResourceType
from cloudstrat.store.factory import create_store
from cloudstrat.strategy.resolver import StoreConfigManager

if TYPE_CHECKING:
    from cloudstrat.store.base import ConfigStore

logger = logging.getLogger(__name__)


class CloudstratClient:
    """
    Main client for the cloudstrat library.

    Wires settings, a configuration store and a StoreConfigManager together.

    Usage:
        async with CloudstratClient() as client:
            strategy = await client.read_storage_strategy(ResourceType.POSTGRES, "production")
            postgres_strategy = strategy.decode(MyPostgresStrategy)

    Settings are loaded from environment variables or can be passed explicitly.
    The default record scope is derived from the settings once, when the
    client is initialized.
    """

    def __init__(
        self,
        settings: CloudstratSettings | None = None,
        *,
        store: ConfigStore | None = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            settings: Application settings. If not provided, loaded from environment.
            store: Store to read from. If not provided, built from settings and
                closed together with the client.
        """
        self._settings = settings or CloudstratSettings()
        self._store = store
        self._owns_store = store is None
        self._manager: StoreConfigManager | None = None

    async def __aenter__(self) -> CloudstratClient:
        """Initialize resources on context entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Clean up resources on context exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize client resources."""
        if self._store is None:
            self._store = create_store(self._settings)
            await self._store.connect()
            logger.info(f"Connected {self._settings.store_backend} configuration store")

        self._manager = StoreConfigManager.from_settings(self._store, self._settings)

    async def close(self) -> None:
        """Close all resources."""
        if self._store is not None and self._owns_store:
            await self._store.close()
            self._store = None
        self._manager = None

    @property
    def manager(self) -> StoreConfigManager:
        """The strategy manager, once initialized."""
        if self._manager is None:
            raise RuntimeError(
                "Client not initialized. Use 'async with CloudstratClient() as client:'"
            )
        return self._manager

    async def read_storage_strategy(
        self,
        resource_type: ResourceType | str,
        tier: str,
    ) -> StrategyConfig:
        """Resolve the strategy for a resource type and deployment tier."""
        return await self.manager.read_storage_strategy(resource_type, tier)


async def read_storage_strategy(
    resource_type: ResourceType | str,
    tier: str,
    *,
    settings: CloudstratSettings | None = None,
) -> StrategyConfig:
    """
    Resolve a single strategy (convenience function).

    For repeated lookups, use CloudstratClient to keep the store connection open.
    """
    async with CloudstratClient(settings) as client:
        return await client.read_storage_strategy(resource_type, tier)
