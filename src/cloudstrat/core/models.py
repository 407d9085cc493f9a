"""Domain models for configuration records and resolved strategies."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

ModelT = TypeVar("ModelT", bound=BaseModel)


def dump_raw(value: Any) -> bytes:
    """Serialize a JSON value to the compact form used for raw payloads."""
    return json.dumps(value, separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class RecordKey:
    """Identity of a configuration record within a store."""

    name: str
    scope: str

    def __str__(self) -> str:
        return f"{self.scope}/{self.name}"


class ConfigurationRecord(BaseModel):
    """
    Externally persisted configuration record.

    Maps each resource type (as a string key) to the raw serialized text of
    its tier mapping. Keys are matched exactly; no case folding is applied.
    """

    name: str = Field(..., description="Record name")
    scope: str = Field(..., description="Namespace the record lives in")
    data: dict[str, str] = Field(
        default_factory=dict,
        description="Raw tier mapping text keyed by resource type",
    )

    @property
    def key(self) -> RecordKey:
        return RecordKey(name=self.name, scope=self.scope)


class StrategyConfig(BaseModel):
    """
    A resolved strategy for one resource type and tier.

    The payload is kept as raw JSON bytes. Its shape depends on the resource
    type, so interpreting it is left to the caller via ``decode`` or
    ``payload``.
    """

    model_config = ConfigDict(frozen=True)

    resource_type: str = Field(..., description="Resource type the strategy applies to")
    tier: str = Field(..., description="Deployment tier the strategy was selected for")
    raw_strategy: bytes = Field(..., description="Opaque strategy payload as compact JSON")

    @field_validator("raw_strategy")
    @classmethod
    def _normalize_raw_strategy(cls, value: bytes) -> bytes:
        # Equal payloads must compare equal regardless of source formatting
        try:
            return dump_raw(json.loads(value))
        except ValueError as e:
            raise ValueError(f"raw_strategy is not valid JSON: {e}") from e

    @classmethod
    def from_payload(cls, resource_type: str, tier: str, payload: Any) -> StrategyConfig:
        """Build a strategy from a JSON-compatible value or pydantic model."""
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")
        return cls(resource_type=resource_type, tier=tier, raw_strategy=dump_raw(payload))

    def payload(self) -> Any:
        """Parse the raw payload into plain Python values."""
        return json.loads(self.raw_strategy)

    def decode(self, model: type[ModelT]) -> ModelT:
        """Validate the raw payload into a resource-specific model."""
        return model.model_validate_json(self.raw_strategy)

    @property
    def is_empty(self) -> bool:
        """Whether the payload is the empty placeholder object."""
        return self.payload() == {}
