"""Conversion between tier mapping text and StrategyConfig values.

A record entry for one resource type is a JSON object keyed by tier::

    {"development": {"strategy": {...}}, "production": {"strategy": {...}}}

Keys other than ``strategy`` inside a tier entry are ignored.
"""

from __future__ import annotations

import json
from collections.abc import Mapping

from pydantic import BaseModel, JsonValue, TypeAdapter, ValidationError

from cloudstrat.core.exceptions import StrategyDecodeError
from cloudstrat.core.models import StrategyConfig, dump_raw
from cloudstrat.core.types import DeploymentTier


class _TierEntry(BaseModel):
    strategy: JsonValue = None


_TIER_MAPPING_ADAPTER = TypeAdapter(dict[str, _TierEntry | None] | None)


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if location:
        return f"{first['msg']} at {location}"
    return first["msg"]


def decode_tier_mapping(resource_type: str, raw: str) -> dict[str, StrategyConfig | None]:
    """
    Decode a record entry into strategies keyed by tier.

    Tiers whose entry is null, or whose ``strategy`` is null or missing, map
    to None. A null entry text decodes to an empty mapping.

    Raises:
        StrategyDecodeError: If the text is not a JSON object of tier entries
    """
    try:
        entries = _TIER_MAPPING_ADAPTER.validate_json(raw)
    except ValidationError as e:
        raise StrategyDecodeError(resource_type, _summarize(e)) from e
    if entries is None:
        return {}

    strategies: dict[str, StrategyConfig | None] = {}
    for tier, entry in entries.items():
        if entry is None or entry.strategy is None:
            strategies[tier] = None
            continue
        strategies[tier] = StrategyConfig(
            resource_type=resource_type,
            tier=tier,
            raw_strategy=dump_raw(entry.strategy),
        )
    return strategies


def encode_tier_mapping(strategies: Mapping[str, StrategyConfig | None]) -> str:
    """Encode strategies keyed by tier into record entry text."""
    entries = {
        tier: None if strategy is None else {"strategy": strategy.payload()}
        for tier, strategy in strategies.items()
    }
    return json.dumps(entries)


def default_tier_mapping() -> str:
    """Placeholder entry with an empty strategy for each well-known tier."""
    return json.dumps({tier.value: {"strategy": {}} for tier in DeploymentTier})
