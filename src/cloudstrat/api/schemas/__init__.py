"""API schema definitions."""

from cloudstrat.api.schemas.base import APIBaseSchema, APIError, ErrorDetail
from cloudstrat.api.schemas.responses import HealthResponse, StrategyResponse

__all__ = [
    # Base
    "APIBaseSchema",
    "APIError",
    "ErrorDetail",
    # Responses
    "HealthResponse",
    "StrategyResponse",
]
