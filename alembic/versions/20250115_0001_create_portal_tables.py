"""create portal tables

Revision ID: 20250115_0001
Revises:
Create Date: 2025-01-15 12:00:00.000000

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB


# revision identifiers, used by Alembic.
revision = '20250115_0001'
down_revision = None
branch_labels = None
depends_on = None


JSON_TYPE = sa.JSON().with_variant(JSONB(), 'postgresql')


def _base_columns() -> list[sa.Column]:
    """Primary key and timestamps shared by every table (from BaseModel)."""
    return [
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True, nullable=False),
        sa.Column(
            'created_at',
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text('CURRENT_TIMESTAMP'),
        ),
        sa.Column(
            'updated_at',
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.text('CURRENT_TIMESTAMP'),
        ),
    ]


def upgrade() -> None:
    """Create plugins, services, deployments, onboarding_templates and ai_sessions."""

    op.create_table(
        'plugins',
        *_base_columns(),
        sa.Column('slug', sa.String(length=64), nullable=False),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('icon', sa.String(length=64), nullable=True),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('version', sa.String(length=32), nullable=True),
        sa.Column('enabled', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('config', JSON_TYPE, nullable=True, comment='Free-form plugin configuration'),
        sa.Column('author', sa.String(length=128), nullable=True),
    )
    op.create_index('ix_plugins_slug', 'plugins', ['slug'], unique=True)

    op.create_table(
        'services',
        *_base_columns(),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('slug', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('owner', sa.String(length=128), nullable=True),
        sa.Column('team', sa.String(length=128), nullable=True),
        sa.Column('language', sa.String(length=64), nullable=True),
        sa.Column('framework', sa.String(length=64), nullable=True),
        sa.Column('repo_url', sa.String(length=512), nullable=True),
        sa.Column(
            'status',
            sa.String(length=16),
            nullable=False,
            server_default='unknown',
            comment='healthy, degraded, down or unknown'
        ),
        sa.Column(
            'tier',
            sa.String(length=16),
            nullable=False,
            server_default='medium',
            comment='critical, high, medium or low'
        ),
        sa.Column('tags', JSON_TYPE, nullable=True),
    )
    op.create_index('ix_services_slug', 'services', ['slug'], unique=True)
    op.create_index('ix_services_status', 'services', ['status'], unique=False)

    op.create_table(
        'deployments',
        *_base_columns(),
        sa.Column('service_id', sa.Integer(), nullable=False),
        sa.Column('version', sa.String(length=64), nullable=True),
        sa.Column(
            'environment',
            sa.String(length=16),
            nullable=False,
            server_default='development',
            comment='production, staging or development'
        ),
        sa.Column(
            'status',
            sa.String(length=16),
            nullable=False,
            server_default='pending',
            comment='pending, building, deploying, success, failed or rolled_back'
        ),
        sa.Column('triggered_by', sa.String(length=128), nullable=True),
        sa.Column('commit_hash', sa.String(length=64), nullable=True),
        sa.Column('commit_message', sa.Text(), nullable=True),
        sa.Column('duration', sa.Integer(), nullable=True, comment='Seconds'),
        sa.Column('logs', sa.Text(), nullable=True),
    )
    op.create_index('ix_deployments_service_id', 'deployments', ['service_id'], unique=False)
    op.create_index('ix_deployments_created_at', 'deployments', ['created_at'], unique=False)
    op.create_index(
        'ix_deployments_service_id_created_at',
        'deployments',
        ['service_id', 'created_at'],
        unique=False
    )

    op.create_table(
        'onboarding_templates',
        *_base_columns(),
        sa.Column('name', sa.String(length=128), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('language', sa.String(length=64), nullable=True),
        sa.Column('framework', sa.String(length=64), nullable=True),
        sa.Column('category', sa.String(length=64), nullable=True),
        sa.Column('features', JSON_TYPE, nullable=True),
        sa.Column('popularity', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index(
        'ix_onboarding_templates_popularity',
        'onboarding_templates',
        ['popularity'],
        unique=False
    )

    op.create_table(
        'ai_sessions',
        *_base_columns(),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('title', sa.String(length=256), nullable=True),
        sa.Column(
            'messages',
            JSON_TYPE,
            nullable=False,
            comment='Chat turns in chronological order'
        ),
    )
    op.create_index('ix_ai_sessions_user_id', 'ai_sessions', ['user_id'], unique=False)
    op.create_index(
        'ix_ai_sessions_user_id_updated_at',
        'ai_sessions',
        ['user_id', 'updated_at'],
        unique=False
    )


def downgrade() -> None:
    """Drop all portal tables."""
    op.drop_index('ix_ai_sessions_user_id_updated_at', table_name='ai_sessions')
    op.drop_index('ix_ai_sessions_user_id', table_name='ai_sessions')
    op.drop_table('ai_sessions')

    op.drop_index('ix_onboarding_templates_popularity', table_name='onboarding_templates')
    op.drop_table('onboarding_templates')

    op.drop_index('ix_deployments_service_id_created_at', table_name='deployments')
    op.drop_index('ix_deployments_created_at', table_name='deployments')
    op.drop_index('ix_deployments_service_id', table_name='deployments')
    op.drop_table('deployments')

    op.drop_index('ix_services_status', table_name='services')
    op.drop_index('ix_services_slug', table_name='services')
    op.drop_table('services')

    op.drop_index('ix_plugins_slug', table_name='plugins')
    op.drop_table('plugins')
