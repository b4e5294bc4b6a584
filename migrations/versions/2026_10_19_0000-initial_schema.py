"""Initial schema

Revision ID: 001_initial
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy import inspect

# revision identifiers, used by Alembic.
revision: str = '001_initial'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """
    Create initial database schema:
    - redirect_lists table: Weighted destination lists keyed by keyword
    - shortlinks table: Plain keyword -> URL links kept by the link registry

    Tables created by init_models() on an earlier startup are left alone.
    """
    bind = op.get_bind()
    existing_tables = inspect(bind).get_table_names()

    if 'redirect_lists' not in existing_tables:
        op.create_table(
            'redirect_lists',
            sa.Column('keyword', sa.String(length=255), nullable=False),
            sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.true()),
            sa.Column('entries', sa.JSON(), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('keyword')
        )

    if 'shortlinks' not in existing_tables:
        op.create_table(
            'shortlinks',
            sa.Column('keyword', sa.String(length=255), nullable=False),
            sa.Column('url', sa.Text(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
            sa.PrimaryKeyConstraint('keyword')
        )
        op.create_index('ix_shortlinks_created_at', 'shortlinks', ['created_at'])


def downgrade() -> None:
    op.drop_index('ix_shortlinks_created_at', table_name='shortlinks')
    op.drop_table('shortlinks')
    op.drop_table('redirect_lists')
