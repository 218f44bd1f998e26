"""Create_Translations

Revision ID: 001
Revises:
Create Date: 2026-10-05 10:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table('translations',
    sa.Column('id', sa.String(length=36), nullable=False),
    sa.Column('content_key', sa.String(length=255), nullable=False),
    sa.Column('original_text', sa.Text(), nullable=False),
    sa.Column('translated_text', sa.Text(), nullable=False),
    sa.Column('source_language', sa.String(length=10), server_default='en', nullable=False),
    sa.Column('target_language', sa.String(length=10), nullable=False),
    sa.Column('page_path', sa.String(length=500), nullable=True),
    sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('now()'), nullable=False),
    sa.PrimaryKeyConstraint('id', name='pk_translations'),
    sa.UniqueConstraint('content_key', 'target_language', 'source_language', 'original_text', name='uq_translations_content_key_language_text')
    )
    op.create_index('ix_translations_content_key', 'translations', ['content_key'])
    op.create_index('ix_translations_source_language', 'translations', ['source_language'])
    op.create_index('ix_translations_target_language', 'translations', ['target_language'])


def downgrade() -> None:
    op.drop_index('ix_translations_target_language', table_name='translations')
    op.drop_index('ix_translations_source_language', table_name='translations')
    op.drop_index('ix_translations_content_key', table_name='translations')
    op.drop_table('translations')
