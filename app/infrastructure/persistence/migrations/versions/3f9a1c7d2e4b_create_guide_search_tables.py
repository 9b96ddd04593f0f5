"""Create guide tables: regions, cities, attractions, selections, trips, tags

Revision ID: 3f9a1c7d2e4b
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9a1c7d2e4b"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

SEARCHABLE_TABLES = ("attractions", "selections", "trips")


def _timestamps() -> list[sa.Column]:
    return [
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
    ]


def upgrade() -> None:
    """Create geography, searchable record and tag tables."""
    op.create_table(
        "regions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
        sa.CheckConstraint("name <> 'tags'", name="ck_regions_name_not_tags"),
    )

    op.create_table(
        "cities",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("region_id", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["region_id"], ["regions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_cities_region_id"), "cities", ["region_id"], unique=False)

    # Attractions, selections and trips share one shape (title/description + *_en, city_id)
    for table in SEARCHABLE_TABLES:
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
            sa.Column("city_id", sa.Integer(), nullable=False),
            sa.Column("title", sa.String(length=255), nullable=False),
            sa.Column("description", sa.Text(), nullable=True),
            sa.Column("title_en", sa.String(length=255), nullable=True),
            sa.Column("description_en", sa.Text(), nullable=True),
            *_timestamps(),
            sa.ForeignKeyConstraint(["city_id"], ["cities.id"], ondelete="CASCADE"),
            sa.PrimaryKeyConstraint("id"),
        )
        op.create_index(op.f(f"ix_{table}_city_id"), table, ["city_id"], unique=False)

    op.create_table(
        "tags",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title"),
    )


def downgrade() -> None:
    """Drop tables in reverse dependency order."""
    op.drop_table("tags")
    for table in reversed(SEARCHABLE_TABLES):
        op.drop_index(op.f(f"ix_{table}_city_id"), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f("ix_cities_region_id"), table_name="cities")
    op.drop_table("cities")
    op.drop_table("regions")
