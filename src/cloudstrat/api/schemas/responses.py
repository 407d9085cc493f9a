"""Response schemas for API endpoints."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, JsonValue

from cloudstrat.api.schemas.base import APIBaseSchema
from cloudstrat.core.models import StrategyConfig


class StrategyResponse(APIBaseSchema):
    """Resolved strategy for one resource type and tier."""

    resource_type: str
    tier: str
    strategy: JsonValue = Field(description="Opaque strategy payload")

    @classmethod
    def from_strategy(cls, strategy: StrategyConfig) -> StrategyResponse:
        return cls(
            resource_type=strategy.resource_type,
            tier=strategy.tier,
            strategy=strategy.payload(),
        )


class HealthResponse(APIBaseSchema):
    """Health check response."""

    status: Literal["healthy", "unhealthy"]
    version: str
    services: dict[str, Literal["up", "down", "unknown"]]
