"""Strategy resolution against a configuration store."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from cloudstrat.config import DEFAULT_CONFIG_NAME, DEFAULT_SCOPE
from cloudstrat.core.exceptions import (
    InvalidRequestError,
    ResourceTypeUndefinedError,
    StoreAccessError,
    TierUndefinedError,
)
from cloudstrat.core.models import ConfigurationRecord, RecordKey, StrategyConfig
from cloudstrat.core.types import ResourceType
from cloudstrat.strategy.codec import decode_tier_mapping, default_tier_mapping

if TYPE_CHECKING:
    from cloudstrat.config import CloudstratSettings
    from cloudstrat.store.base import ConfigStore

logger = logging.getLogger(__name__)


def build_default_record(name: str, scope: str) -> ConfigurationRecord:
    """Record with empty development and production strategies for every resource type."""
    return ConfigurationRecord(
        name=name,
        scope=scope,
        data={resource_type.value: default_tier_mapping() for resource_type in ResourceType},
    )


class ConfigManager(ABC):
    """Source of provisioning strategies for provisioning logic."""

    @abstractmethod
    async def read_storage_strategy(
        self,
        resource_type: ResourceType | str,
        tier: str,
    ) -> StrategyConfig:
        """
        Resolve the strategy for a resource type and deployment tier.

        Args:
            resource_type: Kind of resource being provisioned
            tier: Deployment tier, e.g. "development" or "production"

        Returns:
            The strategy configured for exactly this resource type and tier

        Raises:
            InvalidRequestError: If resource_type or tier is empty
            StoreAccessError: If the configuration record cannot be read
            ResourceTypeUndefinedError: If the record has no entry for resource_type
            StrategyDecodeError: If the entry is not a valid tier mapping
            TierUndefinedError: If the mapping has no usable entry for tier
        """
        ...


class StoreConfigManager(ConfigManager):
    """
    Reads strategies from a single configuration record in a ConfigStore.

    Holds only the record identity and the store handle, so one instance can
    serve any number of concurrent callers. Every call re-reads the record;
    nothing is cached.

    Usage:
        async with MemoryConfigStore() as store:
            manager = StoreConfigManager(store, config_scope="operators")
            strategy = await manager.read_storage_strategy(ResourceType.POSTGRES, "production")
    """

    def __init__(
        self,
        store: "ConfigStore",
        config_name: str | None = None,
        config_scope: str | None = None,
    ) -> None:
        """
        Initialize the manager.

        Args:
            store: Store holding the configuration record
            config_name: Record name, DEFAULT_CONFIG_NAME if empty
            config_scope: Record scope, DEFAULT_SCOPE if empty
        """
        self._store = store
        self._config_name = config_name or DEFAULT_CONFIG_NAME
        self._config_scope = config_scope or DEFAULT_SCOPE

    @classmethod
    def from_settings(
        cls,
        store: "ConfigStore",
        settings: "CloudstratSettings",
    ) -> StoreConfigManager:
        """Create a manager for the record named by settings."""
        return cls(store, settings.config_name, settings.default_scope)

    @property
    def config_name(self) -> str:
        return self._config_name

    @property
    def config_scope(self) -> str:
        return self._config_scope

    @property
    def record_key(self) -> RecordKey:
        return RecordKey(name=self._config_name, scope=self._config_scope)

    def build_default_record(self) -> ConfigurationRecord:
        return build_default_record(self._config_name, self._config_scope)

    async def read_storage_strategy(
        self,
        resource_type: ResourceType | str,
        tier: str,
    ) -> StrategyConfig:
        resource_type = str(resource_type)
        if not resource_type:
            raise InvalidRequestError("resource type must not be empty", {"tier": tier})
        if not tier:
            raise InvalidRequestError(
                "deployment tier must not be empty",
                {"resource_type": resource_type},
            )

        key = self.record_key
        try:
            record = await self._store.get_or_default(key, self.build_default_record())
        except Exception as e:
            raise StoreAccessError(
                f"failed to get strategy config record {key.name} in scope {key.scope}: {e}",
                key.name,
                key.scope,
            ) from e

        raw = record.data.get(resource_type)
        if not raw:
            raise ResourceTypeUndefinedError(resource_type)

        strategies = decode_tier_mapping(resource_type, raw)
        strategy = strategies.get(tier)
        if strategy is None:
            raise TierUndefinedError(resource_type, tier)

        logger.debug(f"Resolved {resource_type} strategy for tier {tier} from {key}")
        return strategy
