"""add travel_schedule table

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2025-02-20

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "a1b2c3d4e5f6"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "travel_schedule",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("day", sa.Integer(), nullable=False),
        sa.Column("time", sa.Time(), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "category",
            sa.String(length=20),
            nullable=False,
            server_default="sightseeing",
        ),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.now(),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("day >= 1", name="ck_travel_schedule_day_positive"),
    )
    op.create_index("ix_travel_schedule_day", "travel_schedule", ["day"])

    # The store owns updated_at; refresh it on every row update
    op.execute("""
        CREATE OR REPLACE FUNCTION set_updated_at() RETURNS trigger AS $$
        BEGIN
            NEW.updated_at = now();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)
    op.execute("""
        CREATE TRIGGER travel_schedule_set_updated_at
        BEFORE UPDATE ON travel_schedule
        FOR EACH ROW EXECUTE FUNCTION set_updated_at()
    """)


def downgrade() -> None:
    op.execute("DROP TRIGGER IF EXISTS travel_schedule_set_updated_at ON travel_schedule")
    op.drop_index("ix_travel_schedule_day", table_name="travel_schedule")
    op.drop_table("travel_schedule")
    op.execute("DROP FUNCTION IF EXISTS set_updated_at()")
