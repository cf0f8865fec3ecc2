"""initial schema

Revision ID: 001
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        'assets',
        sa.Column('id', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=200), nullable=False),
        sa.Column('symbol', sa.String(length=50), nullable=False),
        sa.Column('asset_type', sa.String(length=100), nullable=False, server_default='Real Estate'),
        sa.Column('institution', sa.String(length=200), nullable=False),
        sa.Column('institution_address', sa.String(length=500), nullable=False, server_default=''),
        sa.Column('description', sa.String(length=5000), nullable=False, server_default=''),
        sa.Column('total_supply', sa.BigInteger(), nullable=False),
        sa.Column('staked_amount', sa.BigInteger(), nullable=False, server_default='0'),
        sa.Column('price_usd', sa.Float(), nullable=False, server_default='1.0'),
        sa.Column('annual_yield', sa.Float(), nullable=False, server_default='8.5'),
        sa.Column('blockchain', sa.String(length=50), nullable=False, server_default='Lisk'),
        sa.Column('contract_address', sa.String(length=100), nullable=False, server_default='pending'),
        sa.Column('tx_hash', sa.String(length=100), nullable=False, server_default=''),
        sa.Column('documents_uri', sa.String(length=1000), nullable=False, server_default=''),
        sa.Column('image_uri', sa.String(length=1000), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('total_supply >= 0', name='ck_assets_total_supply_non_negative'),
        sa.CheckConstraint('staked_amount >= 0', name='ck_assets_staked_non_negative'),
        sa.CheckConstraint('staked_amount <= total_supply', name='ck_assets_staked_within_supply'),
        sa.CheckConstraint('price_usd >= 0', name='ck_assets_price_non_negative'),
        sa.PrimaryKeyConstraint('id')
    )
    op.create_index('idx_assets_created', 'assets', ['created_at'], unique=False)


def downgrade() -> None:
    op.drop_index('idx_assets_created', table_name='assets')
    op.drop_table('assets')
