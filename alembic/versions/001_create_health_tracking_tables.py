"""Create users, health_entries and diary_entries

Revision ID: 001_create_health_tracking_tables
Revises:
Create Date: 2025-09-01 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '001_create_health_tracking_tables'
down_revision = None
branch_labels = None
depends_on = None

METRIC_COLUMNS = ('sleep_score', 'nutrition_score', 'exercise_score', 'hydration_score', 'mood_score', 'overall_score')


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('first_name', sa.String(), nullable=True),
        sa.Column('last_name', sa.String(), nullable=True),
        sa.Column('profile_image_url', sa.String(), nullable=True),
        sa.Column('is_active', sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)

    op.create_table(
        'health_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        *[sa.Column(name, sa.Integer(), nullable=False, server_default='0') for name in METRIC_COLUMNS],
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint('user_id', 'date', name='uq_health_entries_user_date'),
        *[
            sa.CheckConstraint(f'{name} BETWEEN 0 AND 100', name=f'ck_health_entries_{name}_range')
            for name in METRIC_COLUMNS
        ],
    )
    op.create_index('ix_health_entries_id', 'health_entries', ['id'])
    op.create_index('idx_health_entries_user_date', 'health_entries', ['user_id', 'date'])

    op.create_table(
        'diary_entries',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('user_id', sa.String(64), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('title', sa.String(255), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('mood', sa.String(32), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_diary_entries_id', 'diary_entries', ['id'])
    op.create_index('idx_diary_entries_user_created', 'diary_entries', ['user_id', 'created_at'])


def downgrade():
    op.drop_index('idx_diary_entries_user_created', table_name='diary_entries')
    op.drop_index('ix_diary_entries_id', table_name='diary_entries')
    op.drop_table('diary_entries')
    op.drop_index('idx_health_entries_user_date', table_name='health_entries')
    op.drop_index('ix_health_entries_id', table_name='health_entries')
    op.drop_table('health_entries')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
