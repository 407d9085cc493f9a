"""FastAPI dependency injection."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from cloudstrat.store.base import ConfigStore
from cloudstrat.strategy.resolver import ConfigManager


async def get_config_store(request: Request) -> ConfigStore | None:
    """Get configuration store from app state."""
    return getattr(request.app.state, "config_store", None)


async def get_config_manager(request: Request) -> ConfigManager:
    """Get strategy config manager from app state."""
    return request.app.state.config_manager


# Type aliases for cleaner dependency injection
Store = Annotated[ConfigStore | None, Depends(get_config_store)]
Manager = Annotated[ConfigManager, Depends(get_config_manager)]
