"""Create tasks, daily_health and mood_logs tables

Revision ID: 4e1a7c2b9d30
Revises:
Create Date: 2025-10-09

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "4e1a7c2b9d30"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "tasks",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("title", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("importance", sa.Integer(), nullable=False),
        sa.Column("is_done", sa.Boolean(), nullable=False),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column("estimate_min", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("importance BETWEEN 1 AND 5", name="ck_tasks_importance"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_tasks_is_done"), "tasks", ["is_done"], unique=False)
    op.create_index(op.f("ix_tasks_due_date"), "tasks", ["due_date"], unique=False)

    op.create_table(
        "daily_health",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("condition", sa.Integer(), nullable=False),
        sa.Column("note", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.CheckConstraint("condition BETWEEN 1 AND 3", name="ck_daily_health_condition"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_daily_health_date"), "daily_health", ["date"], unique=True)

    op.create_table(
        "mood_logs",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("at", sa.DateTime(), nullable=False),
        sa.Column("mood", sa.Integer(), nullable=False),
        sa.Column("note", sa.String(), nullable=True),
        sa.CheckConstraint("mood BETWEEN 1 AND 5", name="ck_mood_logs_mood"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_mood_logs_at"), "mood_logs", ["at"], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f("ix_mood_logs_at"), table_name="mood_logs")
    op.drop_table("mood_logs")
    op.drop_index(op.f("ix_daily_health_date"), table_name="daily_health")
    op.drop_table("daily_health")
    op.drop_index(op.f("ix_tasks_due_date"), table_name="tasks")
    op.drop_index(op.f("ix_tasks_is_done"), table_name="tasks")
    op.drop_table("tasks")
