"""create catalog schema

Revision ID: 001_catalog
Revises: 
Create Date: 2025-04-19 08:55:19.000000

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = '001_catalog'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Create branch table
    op.create_table(
        'branch',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_branch_id', 'branch', ['id'])

    # Create category table
    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_category_id', 'category', ['id'])
    op.create_index('ix_category_name', 'category', ['name'])

    # Create product table
    op.create_table(
        'product',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('barcode', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('branch_id', sa.Integer(), nullable=False),
        sa.Column('price', sa.Numeric(12, 2), nullable=False),
        sa.Column('real_price', sa.Numeric(12, 2), nullable=False),
        sa.Column('stock', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('category_id', sa.Integer(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('tegs', postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column('image', postgresql.ARRAY(sa.Text()), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.ForeignKeyConstraint(['branch_id'], ['branch.id']),
        sa.ForeignKeyConstraint(['category_id'], ['category.id']),
        sa.CheckConstraint(
            "tegs <@ ARRAY['new', 'hit', 'sale']::text[]",
            name='ck_product_tegs',
        ),
    )
    op.create_index('ix_product_id', 'product', ['id'])
    op.create_index('ix_product_barcode', 'product', ['barcode'], unique=True)
    op.create_index('ix_product_branch_id', 'product', ['branch_id'])
    op.create_index('ix_product_category_id', 'product', ['category_id'])
    op.create_index('ix_product_updated_at', 'product', ['updated_at'])

    # Índice de busca full-text no nome (configuração 'simple')
    op.execute(
        "CREATE INDEX ix_product_name_fts ON product "
        "USING gin (to_tsvector('simple', name))"
    )


def downgrade() -> None:
    op.execute("DROP INDEX IF EXISTS ix_product_name_fts")
    op.drop_index('ix_product_updated_at', table_name='product')
    op.drop_index('ix_product_category_id', table_name='product')
    op.drop_index('ix_product_branch_id', table_name='product')
    op.drop_index('ix_product_barcode', table_name='product')
    op.drop_index('ix_product_id', table_name='product')
    op.drop_table('product')

    op.drop_index('ix_category_name', table_name='category')
    op.drop_index('ix_category_id', table_name='category')
    op.drop_table('category')

    op.drop_index('ix_branch_id', table_name='branch')
    op.drop_table('branch')
