"""Translation of cloudstrat errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from cloudstrat.api.schemas import APIError, ErrorDetail
from cloudstrat.core.exceptions import (
    CloudstratError,
    ConfigurationError,
    InvalidRequestError,
    RecordNotFoundError,
    ResourceTypeUndefinedError,
    StoreAccessError,
    StrategyDecodeError,
    TierUndefinedError,
)

logger = logging.getLogger(__name__)

# Most specific classes first
ERROR_STATUS: list[tuple[type[CloudstratError], int, str]] = [
    (ResourceTypeUndefinedError, 404, "resource_type_undefined"),
    (TierUndefinedError, 404, "tier_undefined"),
    (RecordNotFoundError, 404, "record_not_found"),
    (StrategyDecodeError, 422, "strategy_decode_failure"),
    (InvalidRequestError, 422, "invalid_request"),
    (StoreAccessError, 503, "store_unavailable"),
    (ConfigurationError, 500, "configuration_error"),
]


def status_for(error: CloudstratError) -> tuple[int, str]:
    """HTTP status code and error code for a cloudstrat error."""
    for error_type, status_code, code in ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code, code
    return 500, "internal_error"


async def cloudstrat_error_handler(request: Request, exc: CloudstratError) -> JSONResponse:
    """Render a cloudstrat error as an APIError body."""
    status_code, code = status_for(exc)
    if status_code >= 500:
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")

    body = APIError(
        error=ErrorDetail(
            code=code,
            message=exc.message,
            details={key: str(value) for key, value in exc.details.items()},
        )
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


def register_exception_handlers(app: FastAPI) -> None:
    """Install the cloudstrat error handler on an application."""
    app.add_exception_handler(CloudstratError, cloudstrat_error_handler)
