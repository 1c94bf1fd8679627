"""Initial schema

Revision ID: 001_initial_schema
Revises:
Create Date: 2024-06-01

Creates:
1. profiles
2. children
3. screening_sessions (answers plus the scored M-CHAT-R/F result)
4. progress_entries
5. chat_sessions
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision = '001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None

JSON_TYPE = sa.JSON().with_variant(postgresql.JSONB(), 'postgresql')


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'profiles',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), nullable=False, unique=True),
        sa.Column('role', sa.String(20), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('organization', sa.String(255), nullable=True),
        sa.Column('license_number', sa.String(50), nullable=True),
        sa.Column('preferences', JSON_TYPE, nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_profiles_user_id', 'profiles', ['user_id'])

    op.create_table(
        'children',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('parent_id', sa.Uuid(), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=False),
        sa.Column('gender', sa.String(20), nullable=False),
        sa.Column('medical_history', sa.Text(), nullable=True),
        sa.Column('current_age_months', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_children_parent_id', 'children', ['parent_id'])

    op.create_table(
        'screening_sessions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('child_id', sa.Uuid(), sa.ForeignKey('children.id', ondelete='CASCADE'), nullable=False),
        sa.Column('parent_id', sa.Uuid(), nullable=False),
        sa.Column('session_key', sa.String(100), nullable=True),
        sa.Column('status', sa.String(20), nullable=False, server_default='in_progress'),
        sa.Column('responses', JSON_TYPE, nullable=False),
        sa.Column('total_score', sa.Integer(), nullable=True),
        sa.Column('critical_failures', sa.Integer(), nullable=True),
        sa.Column('risk_level', sa.String(20), nullable=True),
        sa.Column('follow_up_required', sa.Boolean(), nullable=True),
        sa.Column('completed_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint('parent_id', 'session_key', name='uq_screening_sessions_parent_key'),
    )
    op.create_index('ix_screening_sessions_child_id', 'screening_sessions', ['child_id'])
    op.create_index('ix_screening_sessions_parent_id', 'screening_sessions', ['parent_id'])

    op.create_table(
        'progress_entries',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('child_id', sa.Uuid(), sa.ForeignKey('children.id', ondelete='CASCADE'), nullable=False),
        sa.Column('parent_id', sa.Uuid(), nullable=False),
        sa.Column('category', sa.String(20), nullable=False),
        sa.Column('milestone', sa.String(255), nullable=False),
        sa.Column('achieved', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('severity', sa.String(20), nullable=True),
        sa.Column('date_recorded', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_progress_entries_child_id', 'progress_entries', ['child_id'])
    op.create_index('ix_progress_entries_parent_id', 'progress_entries', ['parent_id'])
    op.create_index('ix_progress_entries_category', 'progress_entries', ['category'])

    op.create_table(
        'chat_sessions',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('user_id', sa.Uuid(), nullable=False),
        sa.Column('child_id', sa.Uuid(), sa.ForeignKey('children.id', ondelete='CASCADE'), nullable=True),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('session_type', sa.String(20), nullable=False, server_default='general'),
        sa.Column('messages', JSON_TYPE, nullable=False),
        sa.Column('last_activity', sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_chat_sessions_user_id', 'chat_sessions', ['user_id'])
    op.create_index('ix_chat_sessions_child_id', 'chat_sessions', ['child_id'])


def downgrade() -> None:
    op.drop_table('chat_sessions')
    op.drop_table('progress_entries')
    op.drop_table('screening_sessions')
    op.drop_table('children')
    op.drop_table('profiles')
