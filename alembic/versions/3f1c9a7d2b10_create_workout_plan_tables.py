"""create users, plans, days, sections, exercises

Revision ID: 3f1c9a7d2b10
Revises:
Create Date: 2026-01-22 21:40:18.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "3f1c9a7d2b10"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # ---- users ----
    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    # ---- plans ----
    op.create_table(
        "plans",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("user_id", sa.String(length=36), nullable=False),
        sa.Column("last_day_order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_plans_user_id", "plans", ["user_id"], unique=False)

    # ---- days ----
    op.create_table(
        "days",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("plan_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("day_order", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.ForeignKeyConstraint(["plan_id"], ["plans.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plan_id", "day_order", name="uq_days_plan_order"),
    )
    op.create_index("idx_days_plan_id", "days", ["plan_id"], unique=False)

    # ---- sections ----
    op.create_table(
        "sections",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("day_id", sa.String(length=36), nullable=False),
        sa.Column("type", sa.String(length=20), nullable=False),
        sa.Column("section_order", sa.Integer(), nullable=False),
        sa.Column("last_exercise_order", sa.Integer(), server_default="0", nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("type IN ('warmup', 'workout', 'stretch')", name="ck_sections_type"),
        sa.ForeignKeyConstraint(["day_id"], ["days.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("day_id", "section_order", name="uq_sections_day_order"),
        sa.UniqueConstraint("day_id", "type", name="uq_sections_day_type"),
    )
    op.create_index("idx_sections_day_id", "sections", ["day_id"], unique=False)

    # ---- exercises ----
    op.create_table(
        "exercises",
        sa.Column("id", sa.String(length=36), nullable=False),
        sa.Column("section_id", sa.String(length=36), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("mode", sa.String(length=10), nullable=False),
        sa.Column("sets", sa.Integer(), nullable=True),
        sa.Column("reps", sa.Text(), nullable=True),
        sa.Column("time_value", sa.Integer(), nullable=True),
        sa.Column("time_unit", sa.String(length=10), nullable=True),
        sa.Column("exercise_order", sa.Integer(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
        sa.CheckConstraint("mode IN ('reps', 'time')", name="ck_exercises_mode"),
        sa.CheckConstraint(
            "time_unit IS NULL OR time_unit IN ('sec', 'min', 'hour')",
            name="ck_exercises_time_unit",
        ),
        sa.ForeignKeyConstraint(["section_id"], ["sections.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("section_id", "exercise_order", name="uq_exercises_section_order"),
    )
    op.create_index("idx_exercises_section_id", "exercises", ["section_id"], unique=False)


def downgrade() -> None:
    op.drop_index("idx_exercises_section_id", table_name="exercises")
    op.drop_table("exercises")

    op.drop_index("idx_sections_day_id", table_name="sections")
    op.drop_table("sections")

    op.drop_index("idx_days_plan_id", table_name="days")
    op.drop_table("days")

    op.drop_index("idx_plans_user_id", table_name="plans")
    op.drop_table("plans")

    op.drop_index(op.f("ix_users_email"), table_name="users")
    op.drop_table("users")
