"""Initial database schema.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Creates the customers, taxis and bookings tables together with the
unique constraints the booking service relies on:
- uq_customers_email
- uq_taxis_reg
- uq_bookings_taxi_date (one booking per taxi per date)
"""

from typing import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers
revision: str = "001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create all database tables."""

    # ==================== CUSTOMERS ====================
    op.create_table(
        "customers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(50), nullable=False, index=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone_number", sa.String(11), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("email", name="uq_customers_email"),
    )

    # ==================== TAXIS ====================
    op.create_table(
        "taxis",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("num_seats", sa.Integer, nullable=False),
        sa.Column("reg", sa.String(7), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("reg", name="uq_taxis_reg"),
        sa.CheckConstraint("num_seats >= 2 AND num_seats <= 20", name="ck_taxis_num_seats"),
    )

    # ==================== BOOKINGS ====================
    op.create_table(
        "bookings",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("booking_date", sa.Date, nullable=False, index=True),
        sa.Column("customer_id", sa.Integer, sa.ForeignKey("customers.id"), nullable=False, index=True),
        sa.Column("taxi_id", sa.Integer, sa.ForeignKey("taxis.id"), nullable=False, index=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.UniqueConstraint("taxi_id", "booking_date", name="uq_bookings_taxi_date"),
    )


def downgrade() -> None:
    """Drop all tables in reverse order."""
    op.drop_table("bookings")
    op.drop_table("taxis")
    op.drop_table("customers")
