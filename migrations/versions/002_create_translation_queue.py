"""Create_TranslationQueue

Revision ID: 002
Revises: 001
Create Date: 2026-10-05 10:05:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '002'
down_revision: Union[str, None] = '001'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('translation_queue',
    sa.Column('id', sa.String(length=36), nullable=False),
    sa.Column('content_key', sa.String(length=255), nullable=False),
    sa.Column('original_text', sa.Text(), nullable=False),
    sa.Column('target_language', sa.String(length=10), nullable=False),
    sa.Column('page_path', sa.String(length=500), nullable=True),
    sa.Column('status', sa.String(length=20), server_default='pending', nullable=False),
    sa.Column('error_message', sa.Text(), nullable=True),
    sa.Column('processed_at', sa.DateTime(timezone=True), nullable=True),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id', name='pk_translation_queue')
    )
    op.create_index('ix_translation_queue_content_key', 'translation_queue', ['content_key'])
    op.create_index('ix_translation_queue_status', 'translation_queue', ['status'])


def downgrade() -> None:
    op.drop_index('ix_translation_queue_status', table_name='translation_queue')
    op.drop_index('ix_translation_queue_content_key', table_name='translation_queue')
    op.drop_table('translation_queue')
