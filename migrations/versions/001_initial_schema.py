"""Initial schema for cloudstrat.

Revision ID: 001
Revises:
Create Date: 2026-10-16

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "configuration_records",
        sa.Column(
            "id",
            postgresql.UUID(as_uuid=True),
            server_default=sa.text("gen_random_uuid()"),
            primary_key=True,
        ),
        sa.Column("name", sa.String(253), nullable=False),
        sa.Column(
            "scope",
            sa.String(253),
            nullable=False,
            comment="Namespace the record belongs to",
        ),
        sa.Column(
            "data",
            postgresql.JSONB,
            server_default="{}",
            nullable=False,
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id", name="pk_configuration_records"),
        sa.UniqueConstraint("name", "scope", name="uq_configuration_record"),
    )
    op.create_index("ix_configuration_records_scope", "configuration_records", ["scope"])


def downgrade() -> None:
    op.drop_index("ix_configuration_records_scope", table_name="configuration_records")
    op.drop_table("configuration_records")
