"""
Translation Queue Endpoint Tests
"""

from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from portal_translations.crud.translation import TranslationQueueCRUD
from portal_translations.infra.db import get_db
from portal_translations.main import app


async def _enqueue_three(client: AsyncClient):
    for i, text in enumerate(["Welcome", "Volunteer", "Donate"]):
        response = await client.post(
            "/api/v1/translation-queue",
            json={"content_key": f"key_{i}", "original_text": text, "target_language": "ht"},
        )
        assert response.status_code == 201


@pytest.mark.asyncio
async def test_process_empty_queue(client: AsyncClient):
    response = await client.post("/api/v1/process-translation-queue")

    assert response.status_code == 200
    assert response.json() == {
        "message": "No pending translations",
        "processed": 0,
        "completed": 0,
        "failed": 0,
        "total": 0,
    }


@pytest.mark.asyncio
async def test_process_reports_partial_failure(client: AsyncClient, translator):
    translator.fail_on.add("Volunteer")
    await _enqueue_three(client)

    response = await client.post("/api/v1/process-translation-queue")

    assert response.status_code == 200
    assert response.json() == {
        "message": "Translation queue processed",
        "processed": 3,
        "completed": 2,
        "failed": 1,
        "total": 3,
    }

    failed = await client.get("/api/v1/translation-queue", params={"status": "failed"})
    assert [item["original_text"] for item in failed.json()] == ["Volunteer"]
    assert failed.json()[0]["error_message"] == "OpenAI API error: 500"


@pytest.mark.asyncio
async def test_auto_process(client: AsyncClient):
    await _enqueue_three(client)

    response = await client.post("/api/v1/auto-process-translation-queue")

    assert response.status_code == 200
    assert response.json()["completed"] == 3

    again = await client.post("/api/v1/auto-process-translation-queue")
    assert again.json()["message"] == "No pending translations"


@pytest.mark.asyncio
async def test_trigger_queue_processing(client: AsyncClient):
    await _enqueue_three(client)

    response = await client.post("/api/v1/trigger-queue-processing")

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Queue processing triggered successfully"
    assert data["result"]["completed"] == 3
    assert data["result"]["failed"] == 0


@pytest.mark.asyncio
async def test_process_with_unreadable_queue(client: AsyncClient):
    db = AsyncMock()
    db.execute.side_effect = OperationalError("SELECT", {}, Exception("connection refused"))

    async def broken_db():
        yield db

    app.dependency_overrides[get_db] = broken_db

    response = await client.post("/api/v1/process-translation-queue")

    assert response.status_code == 500
    assert response.json()["error"] == "Queue processing failed"


@pytest.mark.asyncio
async def test_enqueue_item(client: AsyncClient, test_session):
    response = await client.post(
        "/api/v1/translation-queue",
        json={
            "content_key": "about.title",
            "original_text": "About us",
            "target_language": "HE",
            "page_path": "/about",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["target_language"] == "he"
    assert data["processed_at"] is None
    assert await TranslationQueueCRUD.get_by_id(test_session, data["id"]) is not None


@pytest.mark.asyncio
@pytest.mark.parametrize("language", ["en", "xx"])
async def test_enqueue_rejects_language(client: AsyncClient, language):
    response = await client.post(
        "/api/v1/translation-queue",
        json={"content_key": "k", "original_text": "Text", "target_language": language},
    )

    assert response.status_code == 400
    assert response.json()["code"] == "validation_error"


@pytest.mark.asyncio
async def test_list_queue(client: AsyncClient):
    await _enqueue_three(client)

    response = await client.get("/api/v1/translation-queue", params={"status": "pending"})
    assert response.status_code == 200
    assert len(response.json()) == 3

    response = await client.get("/api/v1/translation-queue", params={"status": "completed"})
    assert response.json() == []

    response = await client.get("/api/v1/translation-queue", params={"status": "bogus"})
    assert response.status_code == 400
