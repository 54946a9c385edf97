"""create workouts, exercises, schedule, workout/set logs

Revision ID: 4b2d9e61c7a3
Revises:
Create Date: 2025-11-08 10:14:03.511204

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# created along with workout_logs; dropped explicitly on downgrade
workout_status = sa.Enum('in_progress', 'completed', 'cancelled', name='workout_status')


# revision identifiers, used by Alembic.
revision: str = '4b2d9e61c7a3'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) workouts
    op.create_table(
        'workouts',
        sa.Column('id', sa.Integer(), primary_key=True, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )

    # 2) exercises
    op.create_table(
        'exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('sets', sa.Integer(), nullable=True),
        sa.Column('reps', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Numeric(10, 2), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('notes', sa.Text(), nullable=True),
    )

    # 3) schedule_entries (Sunday=0 ... Saturday=6)
    op.create_table(
        'schedule_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('day_of_week', sa.Integer(), nullable=False, index=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.UniqueConstraint('workout_id', 'day_of_week', name='uq_schedule_workout_day'),
        sa.CheckConstraint('day_of_week BETWEEN 0 AND 6', name='ck_schedule_day_range'),
    )

    # 4) workout_logs
    op.create_table(
        'workout_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_id', sa.Integer(), sa.ForeignKey('workouts.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('log_date', sa.Date(), nullable=False, index=True),
        sa.Column('status', workout_status, nullable=False, server_default='in_progress'),
        sa.Column('total_duration_seconds', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('started_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint('workout_id', 'log_date', name='uq_workout_log_date'),
    )

    # 5) set_logs
    op.create_table(
        'set_logs',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('workout_log_id', sa.Integer(), sa.ForeignKey('workout_logs.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('exercises.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('set_number', sa.Integer(), nullable=False),
        sa.Column('reps_completed', sa.Integer(), nullable=True),
        sa.Column('weight_used', sa.Numeric(10, 2), nullable=True),
        sa.Column('rpe', sa.Integer(), nullable=True),
        sa.Column('duration_seconds', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('rest_seconds', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
    )


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('set_logs')
    op.drop_table('workout_logs')
    op.drop_table('schedule_entries')
    op.drop_table('exercises')
    op.drop_table('workouts')

    # finally drop enum type
    workout_status.drop(op.get_bind(), checkfirst=True)
