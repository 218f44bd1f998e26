"""Add_UserLanguagePreferences

Revision ID: 003
Revises: 002
Create Date: 2026-10-08 14:20:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '003'
down_revision: Union[str, None] = '002'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('user_language_preferences',
    sa.Column('id', sa.String(length=36), nullable=False),
    sa.Column('session_id', sa.String(length=100), nullable=False),
    sa.Column('preferred_language', sa.String(length=10), server_default='en', nullable=False),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id', name='pk_user_language_preferences')
    )
    op.create_index('ix_user_language_preferences_session_id', 'user_language_preferences', ['session_id'], unique=True)


def downgrade() -> None:
    op.drop_index('ix_user_language_preferences_session_id', table_name='user_language_preferences')
    op.drop_table('user_language_preferences')
