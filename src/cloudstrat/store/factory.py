"""Store construction from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from cloudstrat.core.exceptions import ConfigurationError
from cloudstrat.core.types import StoreBackend
from cloudstrat.store.base import ConfigStore

if TYPE_CHECKING:
    from cloudstrat.config import CloudstratSettings


def create_store(settings: "CloudstratSettings") -> ConfigStore:
    """
    Create the configuration store selected by ``settings.store_backend``.

    The store is returned unconnected; call ``connect`` (or use it as an
    async context manager) before reading.

    Raises:
        ConfigurationError: If the selected backend has no connection URL
    """
    backend = settings.store_backend

    if backend == StoreBackend.MEMORY:
        from cloudstrat.store.memory import MemoryConfigStore

        return MemoryConfigStore()

    if backend == StoreBackend.REDIS:
        if not settings.redis_url:
            raise ConfigurationError(
                "redis store backend requires a redis_url",
                {"store_backend": backend.value},
            )
        from cloudstrat.store.redis_store import RedisConfigStore

        return RedisConfigStore(str(settings.redis_url))

    if backend == StoreBackend.POSTGRES:
        if not settings.database_url:
            raise ConfigurationError(
                "postgres store backend requires a database_url",
                {"store_backend": backend.value},
            )
        from cloudstrat.store.sql_store import SQLConfigStore

        return SQLConfigStore(str(settings.database_url), echo=settings.debug)

    raise ConfigurationError(
        f"Unsupported store backend: {backend}",
        {"store_backend": str(backend)},
    )
