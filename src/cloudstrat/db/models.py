"""ConfigurationRecord database model."""

from __future__ import annotations

from sqlalchemy import Index, String, UniqueConstraint
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from cloudstrat.core.models import ConfigurationRecord
from cloudstrat.db.base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class ConfigurationRecordModel(Base, UUIDPrimaryKeyMixin, TimestampMixin):
    """
    Persisted configuration record.

    ``data`` holds the raw tier mapping text for each resource type, exactly
    as written by the configuration author.
    """

    __tablename__ = "configuration_records"

    name: Mapped[str] = mapped_column(String(253), nullable=False)
    scope: Mapped[str] = mapped_column(
        String(253),
        nullable=False,
        comment="Namespace the record belongs to",
    )
    data: Mapped[dict[str, str]] = mapped_column(
        JSONB,
        nullable=False,
        default=dict,
        server_default="{}",
    )

    __table_args__ = (
        UniqueConstraint("name", "scope", name="uq_configuration_record"),
        Index("ix_configuration_records_scope", "scope"),
    )

    def to_record(self) -> ConfigurationRecord:
        """Convert to the domain model."""
        return ConfigurationRecord(name=self.name, scope=self.scope, data=dict(self.data))

    def __repr__(self) -> str:
        return f"<ConfigurationRecordModel(id={self.id}, name='{self.name}', scope='{self.scope}')>"
