"""create uploads and transactions

Revision ID: 001
Revises:
Create Date: 2026-10-19 10:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = '001'
down_revision = None
branch_labels = None
depends_on = None

CATEGORIES = (
    'food', 'supermarket', 'transport', 'housing', 'shopping', 'health', 'entertainment',
    'subscriptions', 'travel', 'taxes', 'transfers', 'income', 'diving', 'technology', 'other',
)
SOURCES = ('caixabank', 'revolut')


def upgrade() -> None:
    op.create_table(
        'uploads',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(64), nullable=False, index=True),
        sa.Column('filename', sa.String(255), nullable=False),
        sa.Column('source', sa.Enum(*SOURCES, name='upload_source'), nullable=False),
        sa.Column('transaction_count', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('transactions_saved', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('date_range_from', sa.Date(), nullable=True),
        sa.Column('date_range_to', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'transactions',
        sa.Column('id', sa.String(36), primary_key=True),
        sa.Column('user_id', sa.String(64), nullable=False, index=True),
        sa.Column('upload_id', sa.String(36), sa.ForeignKey('uploads.id'), nullable=True),
        sa.Column('date', sa.Date(), nullable=False, index=True),
        sa.Column('concept', sa.Text(), nullable=False),
        sa.Column('amount', sa.Numeric(12, 2), nullable=False),
        sa.Column('balance', sa.Numeric(12, 2), nullable=True),
        sa.Column('category', sa.Enum(*CATEGORIES, name='category'), nullable=False),
        sa.Column('source', sa.Enum(*SOURCES, name='transaction_source'), nullable=False),
        sa.Column('is_income', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('user_id', 'date', 'concept', 'amount', 'source', name='uq_transaction_dedup'),
    )
    op.create_index('idx_transaction_user_date', 'transactions', ['user_id', 'date'])


def downgrade() -> None:
    op.drop_index('idx_transaction_user_date', table_name='transactions')
    op.drop_table('transactions')
    op.drop_table('uploads')
