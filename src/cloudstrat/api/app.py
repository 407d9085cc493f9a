"""FastAPI application factory."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cloudstrat.api.errors import register_exception_handlers
from cloudstrat.api.routes import health_router, strategies_router
from cloudstrat.config import get_settings
from cloudstrat.store.factory import create_store
from cloudstrat.strategy.resolver import StoreConfigManager

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan manager.

    Builds the configuration store and strategy manager from settings. The
    default record scope is resolved here, once, and handed to the manager.
    """
    settings = get_settings()

    logger.info(f"Initializing {settings.store_backend} configuration store...")
    store = create_store(settings)
    await store.connect()
    app.state.config_store = store
    app.state.config_manager = StoreConfigManager.from_settings(store, settings)
    logger.info(
        f"Serving strategies from record {settings.config_name} "
        f"in scope {settings.default_scope}"
    )

    yield

    logger.info("Shutting down application...")
    await store.close()
    logger.info("Application shutdown complete")


def create_app(
    *,
    title: str = "Cloudstrat API",
    description: str = "Tiered provisioning strategy resolution API",
    version: str = "0.1.0",
    cors_origins: list[str] | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        title: API title for OpenAPI docs
        description: API description for OpenAPI docs
        version: API version
        cors_origins: List of allowed CORS origins

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title=title,
        description=description,
        version=version,
        lifespan=lifespan,
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    if cors_origins is None:
        cors_origins = ["http://localhost:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(health_router, prefix="/api/v1")
    app.include_router(strategies_router, prefix="/api/v1")

    return app


# For uvicorn direct execution
app = create_app()
