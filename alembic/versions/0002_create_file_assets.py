"""create file assets

Revision ID: 0002_create_file_assets
Revises: 0001_create_pictures
Create Date: 2016-03-14
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0002_create_file_assets"
down_revision = "0001_create_pictures"
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "file_assets",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("path", sa.String(length=255), nullable=True),
        sa.Column("content_type", sa.String(length=255), nullable=True),
        sa.Column("permission", sa.String(length=255), nullable=True),
        sa.Column("filename", sa.String(length=255), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_file_assets"),
    )


def downgrade() -> None:
    op.drop_table("file_assets")
