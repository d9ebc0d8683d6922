"""create admin table

Revision ID: 002_create_admin_table
Revises: 001_catalog
Create Date: 2025-04-19 08:55:19.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '002_create_admin_table'
down_revision = '001_catalog'
branch_labels = None
depends_on = None


def upgrade():
    """
    Tabela de administradores (login/senha/papel).
    """
    op.create_table(
        'admin',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('login', sa.String(255), nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('role', sa.String(20), server_default='admin'),
    )


def downgrade():
    """Remove tabela de administradores"""
    op.drop_table('admin')
