"""Initial schema — assignments table.

Revision ID: 001
Revises: None
Create Date: 2022-06-08
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "assignments",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("agent", sa.Text, nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("submitted_on", sa.DateTime(timezone=True), nullable=False),
        sa.Column("scheduled", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("hidden", sa.Boolean, nullable=False, server_default=sa.false()),
    )
    op.create_index("idx_assignments_submitted_on", "assignments", ["submitted_on"])
    op.create_index("idx_assignments_hidden", "assignments", ["hidden"])
    op.create_index("idx_assignments_scheduled", "assignments", ["scheduled"])


def downgrade() -> None:
    op.drop_index("idx_assignments_scheduled", table_name="assignments")
    op.drop_index("idx_assignments_hidden", table_name="assignments")
    op.drop_index("idx_assignments_submitted_on", table_name="assignments")
    op.drop_table("assignments")
