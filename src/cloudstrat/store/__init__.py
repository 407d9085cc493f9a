"""Configuration record stores."""

from .base import ConfigStore
from .factory import create_store
from .memory import MemoryConfigStore

__all__ = [
    "ConfigStore",
    "MemoryConfigStore",
    "create_store",
]
