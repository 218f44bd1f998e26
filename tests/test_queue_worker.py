"""
Translation Queue Worker Tests
"""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy.exc import OperationalError

from portal_translations.core.errors import QueueUnavailableError
from portal_translations.crud.translation import TranslationCRUD, TranslationQueueCRUD
from portal_translations.models.translation_queue import QueueStatus
from portal_translations.services.translation.queue_worker import QueueWorker


async def _enqueue(session, *texts, target_language="es"):
    items = []
    for i, text in enumerate(texts):
        items.append(
            await TranslationQueueCRUD.enqueue(
                session,
                content_key=f"key_{i}",
                original_text=text,
                target_language=target_language,
                page_path="/home",
            )
        )
    return [item.id for item in items]


async def _reload(session, item_id):
    item = await TranslationQueueCRUD.get_by_id(session, item_id)
    await session.refresh(item)
    return item


@pytest.mark.asyncio
async def test_process_batch_translates_and_stores(test_session, translator):
    ids = await _enqueue(test_session, "Welcome", "Donate")

    summary = await QueueWorker(test_session, translator).process_batch(10)

    assert summary.to_dict() == {"processed": 2, "completed": 2, "failed": 0, "total": 2}
    for item_id in ids:
        item = await _reload(test_session, item_id)
        assert item.status == QueueStatus.COMPLETED
        assert item.processed_at is not None
        stored = await TranslationCRUD.find(
            test_session, item.content_key, "es", item.original_text
        )
        assert stored is not None
        assert stored.translated_text == f"{item.original_text} [es]"
        assert stored.page_path == "/home"


@pytest.mark.asyncio
async def test_partial_failure_does_not_abort_batch(test_session, translator):
    translator.fail_on.add("Volunteer")
    ids = await _enqueue(test_session, "Welcome", "Volunteer", "Donate")

    summary = await QueueWorker(test_session, translator).process_batch(10)

    assert summary.completed == 2
    assert summary.failed == 1
    assert summary.total == 3

    failed = await _reload(test_session, ids[1])
    assert failed.status == QueueStatus.FAILED
    assert failed.error_message == "OpenAI API error: 500"
    assert await TranslationCRUD.find(test_session, "key_1", "es", "Volunteer") is None

    for item_id in (ids[0], ids[2]):
        item = await _reload(test_session, item_id)
        assert item.status == QueueStatus.COMPLETED


@pytest.mark.asyncio
async def test_already_translated_item_is_idempotent(test_session, translator):
    await TranslationCRUD.insert(
        test_session,
        content_key="key_0",
        original_text="Welcome",
        translated_text="Bienvenido",
        target_language="es",
    )
    ids = await _enqueue(test_session, "Welcome")
    worker = QueueWorker(test_session, translator)

    first = await worker.process_batch(10)
    second = await worker.process_batch(10)

    assert first.to_dict() == {"processed": 1, "completed": 1, "failed": 0, "total": 1}
    assert second.total == 0
    assert translator.calls == []
    item = await _reload(test_session, ids[0])
    assert item.status == QueueStatus.COMPLETED
    rows = await TranslationCRUD.list_by_source(test_session)
    assert [(row.content_key, row.translated_text) for row in rows] == [("key_0", "Bienvenido")]


@pytest.mark.asyncio
async def test_second_run_finds_nothing_pending(test_session, translator):
    await _enqueue(test_session, "Welcome", "Donate")
    worker = QueueWorker(test_session, translator)

    await worker.process_batch(10)
    calls_after_first_run = len(translator.calls)
    summary = await worker.process_batch(10)

    assert summary.total == 0
    assert summary.processed == 0
    assert len(translator.calls) == calls_after_first_run


@pytest.mark.asyncio
async def test_batch_size_limits_items(test_session, translator):
    await _enqueue(test_session, "One", "Two", "Three")

    summary = await QueueWorker(test_session, translator).process_batch(2)

    assert summary.total == 2
    pending = await TranslationQueueCRUD.get_pending(test_session, 10)
    assert len(pending) == 1


@pytest.mark.asyncio
async def test_storage_failure_marks_item_failed(test_session, translator, monkeypatch):
    ids = await _enqueue(test_session, "Welcome")
    monkeypatch.setattr(
        TranslationCRUD,
        "insert",
        AsyncMock(side_effect=OperationalError("INSERT", {}, Exception("disk full"))),
    )

    summary = await QueueWorker(test_session, translator).process_batch(10)

    assert summary.failed == 1
    item = await _reload(test_session, ids[0])
    assert item.status == QueueStatus.FAILED
    assert item.error_message.startswith("Database error:")


@pytest.mark.asyncio
async def test_unreadable_queue_raises(translator):
    db = AsyncMock()
    db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))

    with pytest.raises(QueueUnavailableError) as exc_info:
        await QueueWorker(db, translator).process_batch(10)

    assert exc_info.value.message == "Queue processing failed"
    assert translator.calls == []


@pytest.mark.asyncio
async def test_item_delay_applies_after_each_model_call(test_session, translator, monkeypatch):
    from portal_translations.services.translation import queue_worker

    delays = []

    async def fake_sleep(seconds):
        delays.append(seconds)

    monkeypatch.setattr(queue_worker.asyncio, "sleep", fake_sleep)
    translator.fail_on.add("Donate")
    await _enqueue(test_session, "Welcome", "Donate")

    await QueueWorker(test_session, translator, item_delay=0.2).process_batch(10)

    assert delays == [0.2, 0.2]
