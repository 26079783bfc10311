"""Create back office schema

Revision ID: 5c1e0b7d2a94
Revises:
Create Date: 2026-10-19 10:12:40.117302

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "5c1e0b7d2a94"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "cars",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("brand", sa.String(length=80), nullable=False),
        sa.Column("model", sa.String(length=80), nullable=False),
        sa.Column("year", sa.Integer(), nullable=False),
        sa.Column("registration_year", sa.Integer(), nullable=True),
        sa.Column("price", sa.Integer(), nullable=False),
        sa.Column("km_run", sa.Integer(), nullable=False),
        sa.Column("fuel", sa.String(length=20), nullable=False),
        sa.Column("transmission", sa.String(length=20), nullable=False),
        sa.Column("ownership", sa.Integer(), nullable=False),
        sa.Column("color", sa.String(length=40), nullable=False),
        sa.Column("engine_cc", sa.Integer(), nullable=False),
        sa.Column("additional_details", sa.Text(), nullable=True),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("badges", sa.JSON(), nullable=False),
        sa.Column("instagram_reel_url", sa.Text(), nullable=True),
        sa.Column("instagram_media_id", sa.String(length=64), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("submitted_by", sa.String(length=128), nullable=False),
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
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_cars_status_created_at", "cars", ["status", "created_at"])
    op.create_index("ix_cars_submitted_by", "cars", ["submitted_by"])
    op.create_index(op.f("ix_cars_instagram_media_id"), "cars", ["instagram_media_id"])

    op.create_table(
        "inquiries",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("car_id", sa.Uuid(), nullable=False),
        sa.Column("car_summary", sa.String(length=200), nullable=False),
        sa.Column("customer_name", sa.String(length=120), nullable=False),
        sa.Column("customer_phone", sa.String(length=40), nullable=False),
        sa.Column("customer_id", sa.String(length=128), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False),
        sa.Column("assigned_to", sa.String(length=128), nullable=True),
        sa.Column("remarks", sa.Text(), nullable=False),
        sa.Column("private_notes", sa.Text(), nullable=False),
        sa.Column("is_serious_customer", sa.Boolean(), nullable=False),
        sa.Column("call_preference", sa.String(length=20), nullable=False),
        sa.Column("scheduled_call_time", sa.DateTime(timezone=True), nullable=True),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["car_id"], ["cars.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_inquiries_car_id", "inquiries", ["car_id"])
    op.create_index("ix_inquiries_assigned_to", "inquiries", ["assigned_to"])

    op.create_table(
        "filter_catalog",
        sa.Column("id", sa.String(length=20), nullable=False),
        sa.Column("brands", sa.JSON(), nullable=False),
        sa.Column("models", sa.JSON(), nullable=False),
        sa.Column("years", sa.JSON(), nullable=False),
        sa.Column("version", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "actors",
        sa.Column("id", sa.String(length=128), nullable=False),
        sa.Column("role", sa.String(length=30), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("actors")
    op.drop_table("filter_catalog")
    op.drop_index("ix_inquiries_assigned_to", table_name="inquiries")
    op.drop_index("ix_inquiries_car_id", table_name="inquiries")
    op.drop_table("inquiries")
    op.drop_index(op.f("ix_cars_instagram_media_id"), table_name="cars")
    op.drop_index("ix_cars_submitted_by", table_name="cars")
    op.drop_index("ix_cars_status_created_at", table_name="cars")
    op.drop_table("cars")
