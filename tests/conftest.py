"""Shared test fixtures for all tests."""

from __future__ import annotations

import json

import pytest

from cloudstrat.config import CloudstratSettings
from cloudstrat.core.models import ConfigurationRecord, RecordKey
from cloudstrat.core.types import StoreBackend
from cloudstrat.store.memory import MemoryConfigStore
from cloudstrat.strategy.resolver import StoreConfigManager

TEST_CONFIG_NAME = "test-strategies"
TEST_SCOPE = "test-namespace"


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def record_key() -> RecordKey:
    """Identity of the record used by the test manager."""
    return RecordKey(name=TEST_CONFIG_NAME, scope=TEST_SCOPE)


@pytest.fixture
def postgres_mapping() -> dict:
    """Tier mapping for postgres with a real strategy in each tier."""
    return {
        "development": {"strategy": {"instanceClass": "db.t3.small", "multiAz": False}},
        "production": {"strategy": {"instanceClass": "db.r5.xlarge", "multiAz": True}},
    }


@pytest.fixture
def sample_record(postgres_mapping: dict) -> ConfigurationRecord:
    """Record with postgres and redis strategies configured."""
    return ConfigurationRecord(
        name=TEST_CONFIG_NAME,
        scope=TEST_SCOPE,
        data={
            "postgres": json.dumps(postgres_mapping),
            "redis": json.dumps(
                {
                    "development": {"strategy": {"nodeType": "cache.t3.small"}},
                    "production": {"strategy": {"nodeType": "cache.r5.large", "replicas": 2}},
                }
            ),
        },
    )


# ============================================================================
# Store and Manager Fixtures
# ============================================================================


@pytest.fixture
def memory_store() -> MemoryConfigStore:
    """Empty in-memory store."""
    return MemoryConfigStore()


@pytest.fixture
def populated_store(sample_record: ConfigurationRecord) -> MemoryConfigStore:
    """In-memory store holding the sample record."""
    return MemoryConfigStore([sample_record])


@pytest.fixture
def manager(populated_store: MemoryConfigStore) -> StoreConfigManager:
    """Manager reading the sample record."""
    return StoreConfigManager(populated_store, TEST_CONFIG_NAME, TEST_SCOPE)


# ============================================================================
# Settings Fixtures
# ============================================================================


@pytest.fixture
def mock_settings() -> CloudstratSettings:
    """Settings using the in-memory store and test record identity."""
    return CloudstratSettings(
        _env_file=None,
        config_name=TEST_CONFIG_NAME,
        config_scope=TEST_SCOPE,
        store_backend=StoreBackend.MEMORY,
        log_level="DEBUG",
    )
