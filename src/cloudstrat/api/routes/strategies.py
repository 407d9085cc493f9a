"""Strategy lookup endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from cloudstrat.api.dependencies import Manager
from cloudstrat.api.schemas import APIError, StrategyResponse

router = APIRouter(prefix="/strategies", tags=["strategies"])


@router.get(
    "/{resource_type}/{tier}",
    response_model=StrategyResponse,
    operation_id="getStrategy",
    summary="Resolve a provisioning strategy",
    description="Resolve the strategy configured for a resource type and deployment tier.",
    responses={
        404: {"model": APIError, "description": "Resource type or tier not configured"},
        422: {"model": APIError, "description": "Configured strategy mapping is malformed"},
        503: {"model": APIError, "description": "Configuration store unavailable"},
    },
)
async def get_strategy(resource_type: str, tier: str, manager: Manager) -> StrategyResponse:
    """Resolve a strategy; errors are rendered by the cloudstrat error handler."""
    strategy = await manager.read_storage_strategy(resource_type, tier)
    return StrategyResponse.from_strategy(strategy)
