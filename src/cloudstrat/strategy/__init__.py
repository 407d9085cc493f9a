"""Strategy decoding and resolution."""

from .codec import decode_tier_mapping, default_tier_mapping, encode_tier_mapping
from .resolver import ConfigManager, StoreConfigManager, build_default_record

__all__ = [
    "ConfigManager",
    "StoreConfigManager",
    "build_default_record",
    "decode_tier_mapping",
    "default_tier_mapping",
    "encode_tier_mapping",
]
