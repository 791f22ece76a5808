"""create_planning_schema

Revision ID: 4f1c2a9d7e10
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = '4f1c2a9d7e10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'stores',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('label', sa.String(255), nullable=False),
        sa.Column('city', sa.String(255), nullable=False),
        sa.Column('state', sa.String(64), nullable=False),
    )
    op.create_table(
        'skus',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('label', sa.String(255), nullable=False),
        sa.Column('class', sa.String(255), nullable=False),
        sa.Column('department', sa.String(255), nullable=False),
        sa.Column('price', sa.Float(), nullable=False),
        sa.Column('cost', sa.Float(), nullable=False),
    )
    op.create_index('ix_skus_label', 'skus', ['label'])
    op.create_table(
        'calendar',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('week', sa.String(16), nullable=False, unique=True),
        sa.Column('week_label', sa.String(64), nullable=False),
        sa.Column('month', sa.String(16), nullable=False),
        sa.Column('month_label', sa.String(64), nullable=False),
    )

    # Fact tables reference stores and skus by value; no foreign keys
    op.create_table(
        'planning',
        sa.Column('store_id', sa.String(64), primary_key=True),
        sa.Column('sku_id', sa.String(64), primary_key=True),
        sa.Column('week', sa.String(16), primary_key=True),
        sa.Column('sales_units', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_table(
        'calculations',
        sa.Column('store_id', sa.String(64), primary_key=True),
        sa.Column('sku_id', sa.String(64), primary_key=True),
        sa.Column('week', sa.String(16), primary_key=True),
        sa.Column('sales_units', sa.Text(), nullable=True),
        sa.Column('sales_dollars', sa.Text(), nullable=True),
        sa.Column('cost_dollars', sa.Text(), nullable=True),
        sa.Column('gm_dollars', sa.Text(), nullable=True),
        sa.Column('gm_percent', sa.Text(), nullable=True),
    )
    op.create_table(
        'charts',
        sa.Column('week', sa.String(16), primary_key=True),
        sa.Column('gm_dollars', sa.Float(), nullable=True),
        sa.Column('sales_dollars', sa.Float(), nullable=True),
        sa.Column('gm_percent', sa.Float(), nullable=True),
    )


def downgrade() -> None:
    op.drop_table('charts')
    op.drop_table('calculations')
    op.drop_table('planning')
    op.drop_table('calendar')
    op.drop_index('ix_skus_label', table_name='skus')
    op.drop_table('skus')
    op.drop_table('stores')
