"""Initial schema: users, daily_logs, ai_analysis

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    op.create_table(
        "daily_logs",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.Date(), nullable=False),
        sa.Column("sleep_hours", sa.Float(), nullable=False),
        sa.Column("work_hours", sa.Float(), nullable=False),
        sa.Column("study_hours", sa.Float(), nullable=False),
        sa.Column("entertainment_hours", sa.Float(), nullable=False),
        sa.Column("energy_level", sa.Integer(), nullable=False),
        sa.Column("stress_level", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "date", name="uq_daily_logs_user_date"),
    )
    op.create_index("ix_daily_logs_user_id", "daily_logs", ["user_id"], unique=False)
    op.create_index("ix_daily_logs_date", "daily_logs", ["date"], unique=False)

    op.create_table(
        "ai_analysis",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("burnout_score", sa.Integer(), nullable=False),
        sa.Column("risk_level", sa.String(20), nullable=False),
        sa.Column("suggestion_text", sa.Text(), nullable=False),
        sa.Column("analyzed_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_ai_analysis_user_id", "ai_analysis", ["user_id"], unique=False)
    op.create_index("ix_ai_analysis_analyzed_at", "ai_analysis", ["analyzed_at"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_ai_analysis_analyzed_at", table_name="ai_analysis")
    op.drop_index("ix_ai_analysis_user_id", table_name="ai_analysis")
    op.drop_table("ai_analysis")
    op.drop_index("ix_daily_logs_date", table_name="daily_logs")
    op.drop_index("ix_daily_logs_user_id", table_name="daily_logs")
    op.drop_table("daily_logs")
    op.drop_index("ix_users_email", table_name="users")
    op.drop_table("users")
