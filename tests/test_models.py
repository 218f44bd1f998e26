"""
Model Default Tests
"""

import pytest
from sqlalchemy import text

from portal_translations.models import QueueStatus


@pytest.mark.asyncio
async def test_queue_status_defaults_in_database(test_session):
    await test_session.execute(
        text(
            "INSERT INTO translation_queue (id, content_key, original_text, target_language) "
            "VALUES ('q1', 'home.welcome', 'Welcome', 'es')"
        )
    )
    await test_session.commit()

    result = await test_session.execute(
        text("SELECT status FROM translation_queue WHERE id = 'q1'")
    )
    assert result.scalar_one() == QueueStatus.PENDING


@pytest.mark.asyncio
async def test_source_language_defaults_in_database(test_session):
    await test_session.execute(
        text(
            "INSERT INTO translations (id, content_key, original_text, translated_text, target_language) "
            "VALUES ('t1', 'home.welcome', 'Welcome', 'Bienvenido', 'es')"
        )
    )
    await test_session.commit()

    result = await test_session.execute(
        text("SELECT source_language FROM translations WHERE id = 't1'")
    )
    assert result.scalar_one() == "en"
