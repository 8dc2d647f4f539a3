"""Create insurance_plans and plan_interactions tables.

Revision ID: 20261019_0001
Revises: 
Create Date: 2026-10-19

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


revision = "20261019_0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "insurance_plans",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("provider", sa.Text(), nullable=False),
        sa.Column("base_price", sa.Integer(), nullable=False),
        sa.Column("medical_coverage", sa.Integer(), nullable=False),
        sa.Column("trip_cancellation", sa.Text(), nullable=False),
        sa.Column("baggage_protection", sa.Integer(), nullable=False),
        sa.Column("emergency_evacuation", sa.Integer(), nullable=True),
        sa.Column("adventure_activities", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("rental_car_coverage", sa.Integer(), nullable=True),
        sa.Column("rating", sa.Text(), nullable=True),
        sa.Column("reviews", sa.Integer(), nullable=True, server_default=sa.text("0")),
        sa.Column("country", sa.Text(), nullable=False, server_default="all"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("base_price >= 0", name="ck_insurance_plans_base_price_non_negative"),
        sa.CheckConstraint("medical_coverage >= 0", name="ck_insurance_plans_medical_coverage_non_negative"),
        sa.CheckConstraint("baggage_protection >= 0", name="ck_insurance_plans_baggage_protection_non_negative"),
        sa.CheckConstraint(
            "emergency_evacuation IS NULL OR emergency_evacuation >= 0",
            name="ck_insurance_plans_emergency_evacuation_non_negative",
        ),
        sa.CheckConstraint(
            "rental_car_coverage IS NULL OR rental_car_coverage >= 0",
            name="ck_insurance_plans_rental_car_coverage_non_negative",
        ),
    )

    op.create_table(
        "plan_interactions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("plan_id", sa.Integer(), sa.ForeignKey("insurance_plans.id"), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=True),
        sa.Column("device_id", sa.Text(), nullable=False),
        sa.Column("interaction_type", sa.String(length=32), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("metadata", postgresql.JSONB(), nullable=True),
    )
    op.create_index(op.f("ix_plan_interactions_plan_id"), "plan_interactions", ["plan_id"], unique=False)
    op.create_index(op.f("ix_plan_interactions_user_id"), "plan_interactions", ["user_id"], unique=False)
    op.create_index(op.f("ix_plan_interactions_device_id"), "plan_interactions", ["device_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_plan_interactions_device_id"), table_name="plan_interactions")
    op.drop_index(op.f("ix_plan_interactions_user_id"), table_name="plan_interactions")
    op.drop_index(op.f("ix_plan_interactions_plan_id"), table_name="plan_interactions")
    op.drop_table("plan_interactions")
    op.drop_table("insurance_plans")
