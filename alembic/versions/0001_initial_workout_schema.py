"""workout templates, exercises, sessions and logged sets

Revision ID: 0001_initial_workout_schema
Revises:
Create Date: 2025-10-20 18:04:12.331907

"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

from liftlog.db import UTCDateTime


# revision identifiers, used by Alembic.
revision: str = '0001_initial_workout_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1) templates
    op.create_table(
        'workout_templates',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('created_at', UTCDateTime(), nullable=False),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_workout_templates_created_at', 'workout_templates', ['created_at'])

    # 2) exercises within a template
    op.create_table(
        'template_exercises',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('template_id', sa.Integer(), sa.ForeignKey('workout_templates.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('target_sets', sa.Integer(), nullable=False),
        sa.Column('order', sa.Integer(), nullable=False),
        sa.CheckConstraint('target_sets >= 1', name='ck_template_exercises_target_sets'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_template_exercises_template_order', 'template_exercises', ['template_id', 'order'])

    # 3) sessions performed from a template
    op.create_table(
        'workout_sessions',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('template_id', sa.Integer(), sa.ForeignKey('workout_templates.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('started_at', UTCDateTime(), nullable=False),
        sa.Column('completed_at', UTCDateTime(), nullable=True),
        sqlite_autoincrement=True,
    )

    # 4) logged sets
    op.create_table(
        'logged_sets',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('exercise_id', sa.Integer(), sa.ForeignKey('template_exercises.id', ondelete='CASCADE'), nullable=False),
        sa.Column('session_id', sa.Integer(), sa.ForeignKey('workout_sessions.id', ondelete='CASCADE'), nullable=False, index=True),
        sa.Column('weight', sa.Float(), nullable=False),
        sa.Column('reps', sa.Integer(), nullable=False),
        sa.Column('logged_at', UTCDateTime(), nullable=False),
        sa.CheckConstraint('reps > 0', name='ck_logged_sets_reps'),
        sa.CheckConstraint('weight >= 0', name='ck_logged_sets_weight'),
        sqlite_autoincrement=True,
    )
    op.create_index('ix_logged_sets_exercise_logged_at', 'logged_sets', ['exercise_id', 'logged_at'])


def downgrade() -> None:
    # drop child tables in reverse order
    op.drop_table('logged_sets')
    op.drop_table('workout_sessions')
    op.drop_table('template_exercises')
    op.drop_table('workout_templates')
