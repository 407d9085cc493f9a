"""Database layer."""

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin
from .models import ConfigurationRecordModel
from .repository import ConfigurationRecordRepository

__all__ = [
    # Base
    "Base",
    "TimestampMixin",
    "UUIDPrimaryKeyMixin",
    # Models
    "ConfigurationRecordModel",
    # Repositories
    "ConfigurationRecordRepository",
]
