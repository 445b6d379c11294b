"""initial budget planner schema

Revision ID: 5c1e9a7d2b40
Revises:
Create Date: 2026-01-12 18:04:11.502318

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5c1e9a7d2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema: create all tables."""
    op.create_table(
        'category',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('color', sa.String(), nullable=False),
        sa.Column('icon', sa.String(), nullable=False),
        sa.Column('monthly_budget', sa.Float(), nullable=False),
        sa.Column('is_default', sa.Boolean(), nullable=False),
        sa.Column('is_active', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_category_name', 'category', ['name'])

    op.create_table(
        'debt',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('original_amount', sa.Float(), nullable=False),
        sa.Column('paid_amount', sa.Float(), nullable=False),
        sa.Column('original_currency', sa.String(), nullable=False),
        sa.Column('interest_rate', sa.Float(), nullable=True),
        sa.Column('due_date', sa.Date(), nullable=True),
        sa.Column('is_paid', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'transaction',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('type', sa.Enum('income', 'expense', 'savings', name='transactiontype'), nullable=False),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column(
            'payment_method',
            sa.Enum('cash', 'credit', 'debit', 'bank_transfer', 'other', name='paymentmethod'),
            nullable=False,
        ),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('category.id'), nullable=True),
        sa.Column('debt_id', sa.Integer(), sa.ForeignKey('debt.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_transaction_type', 'transaction', ['type'])
    op.create_index('ix_transaction_date', 'transaction', ['date'])
    op.create_index('ix_transaction_category_id', 'transaction', ['category_id'])
    op.create_index('ix_transaction_debt_id', 'transaction', ['debt_id'])

    op.create_table(
        'monthly_budget',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('category_id', sa.Integer(), sa.ForeignKey('category.id'), nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('planned_amount', sa.Float(), nullable=False),
        sa.Column('rollover_enabled', sa.Boolean(), nullable=False),
        sa.Column('rollover_amount', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.UniqueConstraint('category_id', 'year', 'month', name='uq_monthly_budget_category_period'),
    )
    op.create_index('ix_monthly_budget_category_id', 'monthly_budget', ['category_id'])
    op.create_index('ix_monthly_budget_year', 'monthly_budget', ['year'])
    op.create_index('ix_monthly_budget_month', 'monthly_budget', ['month'])

    op.create_table(
        'app_settings',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('currency', sa.String(), nullable=False),
        sa.Column('first_day_of_month', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )

    op.create_table(
        'health_score_snapshot',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('year', sa.Integer(), nullable=False),
        sa.Column('month', sa.Integer(), nullable=False),
        sa.Column('total_score', sa.Integer(), nullable=False),
        sa.Column('savings_rate', sa.Float(), nullable=False),
        sa.Column('budget_adherence', sa.Float(), nullable=False),
        sa.Column('debt_progress', sa.Float(), nullable=False),
        sa.Column('spending_stability', sa.Float(), nullable=False),
        sa.Column('emergency_fund', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_health_score_snapshot_year', 'health_score_snapshot', ['year'])
    op.create_index('ix_health_score_snapshot_month', 'health_score_snapshot', ['month'])


def downgrade() -> None:
    """Downgrade schema: drop all tables."""
    op.drop_table('health_score_snapshot')
    op.drop_table('app_settings')
    op.drop_table('monthly_budget')
    op.drop_table('transaction')
    op.drop_table('debt')
    op.drop_table('category')
