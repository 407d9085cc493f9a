"""Core types, models, and exceptions."""

from .exceptions import (
    CloudstratError,
    ConfigurationError,
    InvalidRequestError,
    RecordNotFoundError,
    ResourceTypeUndefinedError,
    StoreAccessError,
    StrategyDecodeError,
    StrategyError,
    TierUndefinedError,
)
from .models import ConfigurationRecord, RecordKey, StrategyConfig
from .types import DeploymentTier, ResourceType, StoreBackend

__all__ = [
    # Types
    "DeploymentTier",
    "ResourceType",
    "StoreBackend",
    # Models
    "ConfigurationRecord",
    "RecordKey",
    "StrategyConfig",
    # Exceptions
    "CloudstratError",
    "ConfigurationError",
    "InvalidRequestError",
    "RecordNotFoundError",
    "ResourceTypeUndefinedError",
    "StoreAccessError",
    "StrategyDecodeError",
    "StrategyError",
    "TierUndefinedError",
]
