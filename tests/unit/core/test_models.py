"""Tests for domain models."""

from __future__ import annotations

import pytest
from pydantic import BaseModel, ValidationError

from cloudstrat.core.models import ConfigurationRecord, RecordKey, StrategyConfig


class PostgresStrategy(BaseModel):
    """Resource-specific payload shape used to exercise decode()."""

    instance_class: str
    multi_az: bool = False


class TestStrategyConfig:
    """Tests for StrategyConfig."""

    def test_from_payload_dict(self):
        """Dict payloads should be stored as compact JSON."""
        strategy = StrategyConfig.from_payload("postgres", "production", {"a": 1, "b": [True]})

        assert strategy.raw_strategy == b'{"a":1,"b":[true]}'
        assert strategy.payload() == {"a": 1, "b": [True]}

    def test_from_payload_model(self):
        """Pydantic models should be dumped to JSON-compatible values."""
        strategy = StrategyConfig.from_payload(
            "postgres",
            "production",
            PostgresStrategy(instance_class="db.r5.large", multi_az=True),
        )

        assert strategy.payload() == {"instance_class": "db.r5.large", "multi_az": True}

    def test_decode_into_model(self):
        """decode() should validate the payload into the given model."""
        strategy = StrategyConfig(
            resource_type="postgres",
            tier="production",
            raw_strategy=b'{"instance_class": "db.t3.small"}',
        )

        decoded = strategy.decode(PostgresStrategy)

        assert decoded == PostgresStrategy(instance_class="db.t3.small")

    def test_decode_rejects_mismatched_payload(self):
        """decode() should surface validation errors from the caller's model."""
        strategy = StrategyConfig(resource_type="postgres", tier="production", raw_strategy=b"{}")

        with pytest.raises(ValidationError):
            strategy.decode(PostgresStrategy)

    @pytest.mark.parametrize(
        "raw,expected",
        [(b"{}", True), (b'{"a":1}', False), (b"[]", False)],
    )
    def test_is_empty(self, raw: bytes, expected: bool):
        """Only the empty object counts as an empty strategy."""
        strategy = StrategyConfig(resource_type="redis", tier="development", raw_strategy=raw)
        assert strategy.is_empty is expected

    def test_raw_strategy_is_normalized(self):
        """Raw payloads should be stored in compact form whatever their formatting."""
        strategy = StrategyConfig(
            resource_type="postgres",
            tier="production",
            raw_strategy=b'{ "instance_class" : "db.t3.small" }',
        )

        assert strategy.raw_strategy == b'{"instance_class":"db.t3.small"}'
        assert strategy == StrategyConfig.from_payload(
            "postgres", "production", {"instance_class": "db.t3.small"}
        )

    @pytest.mark.parametrize("raw", [b"{not json", b"", b"\xff"])
    def test_invalid_raw_strategy_is_rejected(self, raw: bytes):
        """Payloads that are not JSON should be rejected when the strategy is built."""
        with pytest.raises(ValidationError):
            StrategyConfig(resource_type="postgres", tier="production", raw_strategy=raw)

    def test_is_frozen(self):
        """Resolved strategies should be immutable."""
        strategy = StrategyConfig(resource_type="redis", tier="development", raw_strategy=b"{}")
        with pytest.raises(ValidationError):
            strategy.tier = "production"


class TestConfigurationRecord:
    """Tests for ConfigurationRecord."""

    def test_key(self):
        """The record key should combine name and scope."""
        record = ConfigurationRecord(name="strategies", scope="ops")
        assert record.key == RecordKey(name="strategies", scope="ops")
        assert str(record.key) == "ops/strategies"

    def test_data_defaults_to_empty(self):
        """Records without entries should have an empty data mapping."""
        assert ConfigurationRecord(name="strategies", scope="ops").data == {}
