"""create meals, meal logs, macro goals, weight entries

Revision ID: 9c1e5a7d2f40
Revises: 4b2d9e61c7a3
Create Date: 2025-11-15 09:41:27.018334

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '9c1e5a7d2f40'
down_revision: Union[str, None] = '4b2d9e61c7a3'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _macro_columns():
    return [
        sa.Column(name, sa.Float(), nullable=False, server_default='0')
        for name in ('calories', 'protein', 'carbs', 'fats')
    ]


def upgrade() -> None:
    # 1) meal templates
    op.create_table(
        'meals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('category', sa.String(length=40), nullable=True, index=True),
        *_macro_columns(),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 2) meal_logs (macros copied from the template at log time)
    op.create_table(
        'meal_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('meal_id', sa.Integer(), sa.ForeignKey('meals.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('meal_date', sa.Date(), nullable=False, index=True),
        *_macro_columns(),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 3) macro_goals, one row per effective date
    op.create_table(
        'macro_goals',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('goal_date', sa.Date(), nullable=False, unique=True, index=True),
        sa.Column('calorie_goal', sa.Float(), nullable=False),
        sa.Column('protein_goal', sa.Float(), nullable=False),
        sa.Column('carbs_goal', sa.Float(), nullable=False),
        sa.Column('fats_goal', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 4) weight_entries, one per day
    op.create_table(
        'weight_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('weight_date', sa.Date(), nullable=False, unique=True, index=True),
        sa.Column('current_weight', sa.Float(), nullable=False),
        sa.Column('target_weight', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('weight_entries')
    op.drop_table('macro_goals')
    op.drop_table('meal_logs')
    op.drop_table('meals')
