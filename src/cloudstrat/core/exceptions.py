"""Custom exception hierarchy for cloudstrat."""

from typing import Any


class CloudstratError(Exception):
    """Base exception for all cloudstrat errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(CloudstratError):
    """Settings do not describe a usable configuration store."""

    pass


class InvalidRequestError(CloudstratError):
    """A resolution request is missing its resource type or tier."""

    pass


class StoreAccessError(CloudstratError):
    """The configuration store could not be read or written."""

    def __init__(
        self,
        message: str,
        config_name: str,
        scope: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, {"config_name": config_name, "scope": scope, **(details or {})})
        self.config_name = config_name
        self.scope = scope


class RecordNotFoundError(CloudstratError):
    """A configuration record does not exist in the store."""

    def __init__(self, config_name: str, scope: str) -> None:
        super().__init__(
            f"configuration record {config_name} not found in scope {scope}",
            {"config_name": config_name, "scope": scope},
        )
        self.config_name = config_name
        self.scope = scope


class StrategyError(CloudstratError):
    """No strategy could be resolved for a resource type."""

    def __init__(
        self,
        message: str,
        resource_type: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, {"resource_type": resource_type, **(details or {})})
        self.resource_type = resource_type


class ResourceTypeUndefinedError(StrategyError):
    """The configuration record has no entry for the resource type."""

    def __init__(self, resource_type: str) -> None:
        super().__init__(
            f"strategy for resource type {resource_type} is not defined",
            resource_type,
        )


class StrategyDecodeError(StrategyError):
    """The resource type entry is not a well-formed tier mapping."""

    def __init__(self, resource_type: str, reason: str) -> None:
        super().__init__(
            f"failed to decode strategy mapping for resource type {resource_type}: {reason}",
            resource_type,
            {"reason": reason},
        )
        self.reason = reason


class TierUndefinedError(StrategyError):
    """The tier mapping has no usable entry for the requested tier."""

    def __init__(self, resource_type: str, tier: str) -> None:
        super().__init__(
            f"no strategy found for resource type {resource_type} and deployment tier {tier}",
            resource_type,
            {"tier": tier},
        )
        self.tier = tier
