"""Create metadata table.

Revision ID: 001_metadata
Revises: None
Create Date: 2026-10-17

Single table keyed by an auto-assigned BIGINT identity, plus a nullable title.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "001_metadata"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "metadata",
        sa.Column(
            "id",
            sa.BigInteger().with_variant(sa.Integer(), "sqlite"),
            primary_key=True,
            autoincrement=True,
        ),
        sa.Column("title", sa.String(255), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("metadata")
