"""API route modules."""

from cloudstrat.api.routes.health import router as health_router
from cloudstrat.api.routes.strategies import router as strategies_router

__all__ = [
    "health_router",
    "strategies_router",
]
