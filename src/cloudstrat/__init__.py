"""Cloudstrat - tiered provisioning strategy resolution for cloud resources."""

from cloudstrat.client import CloudstratClient, read_storage_strategy
from cloudstrat.config import CloudstratSettings
from cloudstrat.core.exceptions import (
    CloudstratError,
    ResourceTypeUndefinedError,
    StoreAccessError,
    StrategyDecodeError,
    StrategyError,
    TierUndefinedError,
)
from cloudstrat.core.models import ConfigurationRecord, RecordKey, StrategyConfig
from cloudstrat.core.types import DeploymentTier, ResourceType
from cloudstrat.store.base import ConfigStore
from cloudstrat.strategy.resolver import ConfigManager, StoreConfigManager

__version__ = "0.1.0"
__all__ = [
    # Client
    "CloudstratClient",
    "CloudstratSettings",
    "read_storage_strategy",
    # Resolution
    "ConfigManager",
    "ConfigStore",
    "StoreConfigManager",
    # Types
    "DeploymentTier",
    "ResourceType",
    # Models
    "ConfigurationRecord",
    "RecordKey",
    "StrategyConfig",
    # Errors
    "CloudstratError",
    "ResourceTypeUndefinedError",
    "StoreAccessError",
    "StrategyDecodeError",
    "StrategyError",
    "TierUndefinedError",
    # Version
    "__version__",
]
