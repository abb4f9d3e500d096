"""create pictures

Revision ID: 0001_create_pictures
Revises: None
Create Date: 2016-03-11
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_create_pictures"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    # file_assets is only created by the next revision.
    op.create_table(
        "pictures",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("file_asset_id", sa.Integer(), nullable=True),
        sa.Column("imageable_type", sa.String(length=255), nullable=True),
        sa.Column("imageable_id", sa.Integer(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["file_asset_id"],
            ["file_assets.id"],
            name="fk_pictures_file_asset_id_file_assets",
        ),
        sa.PrimaryKeyConstraint("id", name="pk_pictures"),
    )
    op.create_index("ix_pictures_imageable", "pictures", ["imageable_type", "imageable_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_pictures_imageable", table_name="pictures")
    op.drop_table("pictures")
