"""Create plants table

Revision ID: 001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlmodel

from alembic import op

revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "plants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("species", sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column("watering_interval_days", sa.Integer(), nullable=False),
        sa.Column("last_watered_at", sa.DateTime(), nullable=True),
        sa.Column("notes", sa.Text(), server_default="", nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "watering_interval_days BETWEEN 1 AND 365",
            name="ck_plants_watering_interval_days",
        ),
    )
    # Newest-first listing orders by created_at
    op.create_index("ix_plants_created_at", "plants", ["created_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_plants_created_at", table_name="plants")
    op.drop_table("plants")
