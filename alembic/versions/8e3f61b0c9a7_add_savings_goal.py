"""add savings goal

Revision ID: 8e3f61b0c9a7
Revises: 5c1e9a7d2b40
Create Date: 2026-02-03 10:21:47.118904

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '8e3f61b0c9a7'
down_revision: Union[str, Sequence[str], None] = '5c1e9a7d2b40'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'savings_goal',
        sa.Column('id', sa.Integer(), primary_key=True, nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('target_amount', sa.Float(), nullable=False),
        sa.Column('current_amount', sa.Float(), nullable=False),
        sa.Column('target_date', sa.Date(), nullable=False),
        sa.Column('monthly_contribution', sa.Float(), nullable=False),
        sa.Column('color', sa.String(), nullable=False),
        sa.Column('icon', sa.String(), nullable=False),
        sa.Column('is_completed', sa.Boolean(), nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    )
    op.create_index('ix_savings_goal_target_date', 'savings_goal', ['target_date'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_savings_goal_target_date', table_name='savings_goal')
    op.drop_table('savings_goal')
