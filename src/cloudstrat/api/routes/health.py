"""Health check endpoints."""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Request

from cloudstrat.api.dependencies import Store
from cloudstrat.api.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    operation_id="getHealth",
    summary="Health check",
    description="Check the health status of the API and its configuration store.",
)
async def health_check(store: Store) -> HealthResponse:
    """Check API health status."""
    from cloudstrat import __version__

    services: dict[str, Literal["up", "down", "unknown"]] = {}
    overall_status: Literal["healthy", "unhealthy"] = "healthy"

    if store is None:
        services["store"] = "unknown"
    elif await store.ping():
        services["store"] = "up"
    else:
        services["store"] = "down"
        overall_status = "unhealthy"

    return HealthResponse(
        status=overall_status,
        version=__version__,
        services=services,
    )


@router.get(
    "/ready",
    operation_id="getReady",
    summary="Readiness check",
    description="Check if the API is ready to serve traffic.",
)
async def readiness_check(request: Request) -> dict[str, bool]:
    """Check if API is ready to serve traffic."""
    store = getattr(request.app.state, "config_store", None)
    manager = getattr(request.app.state, "config_manager", None)

    return {"ready": store is not None and manager is not None}
