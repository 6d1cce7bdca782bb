"""Initial schema: detectives, cases, evidences and the case/detective join table

Revision ID: 0001_initial
Revises: None
Create Date: 2026-10-16
"""

from __future__ import annotations

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

revision: str = "0001_initial"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "detectives",
        sa.Column("id", sa.String(255), primary_key=True, autoincrement=False),
        sa.Column("name", sa.String(255), nullable=False),
    )

    op.create_table(
        "cases",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("status", sa.String(255), nullable=False),
    )

    op.create_table(
        "evidences",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("description", sa.String(255), nullable=False),
        sa.Column("type", sa.String(255), nullable=False),
        sa.Column("caseId", sa.Integer, sa.ForeignKey("cases.id"), nullable=True),
    )

    op.create_table(
        "cases_detectives_detectives",
        sa.Column("case_id", sa.Integer, sa.ForeignKey("cases.id"), primary_key=True),
        sa.Column(
            "detective_id", sa.String(255), sa.ForeignKey("detectives.id"), primary_key=True
        ),
    )
    op.create_index(
        "ix_cases_detectives_detectives_case_id", "cases_detectives_detectives", ["case_id"]
    )
    op.create_index(
        "ix_cases_detectives_detectives_detective_id",
        "cases_detectives_detectives",
        ["detective_id"],
    )


def downgrade() -> None:
    op.drop_index(
        "ix_cases_detectives_detectives_detective_id", table_name="cases_detectives_detectives"
    )
    op.drop_index(
        "ix_cases_detectives_detectives_case_id", table_name="cases_detectives_detectives"
    )
    op.drop_table("cases_detectives_detectives")
    op.drop_table("evidences")
    op.drop_table("cases")
    op.drop_table("detectives")
