"""create quiz_results

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "quiz_results",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("session_id", sa.String(length=100), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone", sa.String(length=50), nullable=True),
        sa.Column("age", sa.Integer(), nullable=True),
        sa.Column("gender", sa.String(length=20), nullable=True),
        sa.Column("education", sa.String(length=100), nullable=True),
        sa.Column("occupation", sa.String(length=255), nullable=True),
        sa.Column("location", sa.String(length=255), nullable=True),
        sa.Column("answers", sa.JSON(), nullable=True),
        sa.Column("scores", sa.JSON(), nullable=True),
        sa.Column("top_three_code", sa.String(length=10), nullable=True),
        sa.Column("time_taken", sa.Integer(), nullable=True),
        sa.Column("status", sa.String(length=20), nullable=False, server_default="incomplete"),
        sa.Column("started_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("user_agent", sa.Text(), nullable=True),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_quiz_results")),
        sa.UniqueConstraint("session_id", name=op.f("uq_quiz_results_session_id")),
    )
    op.create_index(op.f("ix_quiz_results_started_at"), "quiz_results", ["started_at"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_quiz_results_started_at"), table_name="quiz_results")
    op.drop_table("quiz_results")
