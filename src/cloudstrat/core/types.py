"""Core enums and type definitions."""

from enum import StrEnum


class ResourceType(StrEnum):
    """Kinds of cloud resource a strategy can be configured for."""

    POSTGRES = "postgres"
    REDIS = "redis"
    BLOB_STORAGE = "blobstorage"


class DeploymentTier(StrEnum):
    """Well-known deployment tiers.

    Tiers are free-form strings; these are only the ones present in the
    default configuration record.
    """

    DEVELOPMENT = "development"
    PRODUCTION = "production"


class StoreBackend(StrEnum):
    """Supported configuration store backends."""

    MEMORY = "memory"
    REDIS = "redis"
    POSTGRES = "postgres"
