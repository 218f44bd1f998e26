"""
Conftest
"""

from typing import AsyncGenerator, Iterable, Optional

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from portal_translations.core.config import settings
from portal_translations.core.deps import enforce_rate_limit, get_translation_service
from portal_translations.core.errors import ExternalServiceError
from portal_translations.infra.db import get_db
from portal_translations.main import app
from portal_translations.models.base import Base

# Fresh in-memory SQLite database per test
TEST_DB_URL = "sqlite+aiosqlite:///:memory:"


class FakeTranslator:
    """Stands in for TranslationService; fails for texts listed in fail_on"""

    def __init__(self, fail_on: Optional[Iterable[str]] = None):
        self.fail_on = set(fail_on or ())
        self.calls = []

    async def translate(self, text: str, target_language: str) -> str:
        self.calls.append((text, target_language))
        if text in self.fail_on:
            raise ExternalServiceError("OpenAI API error: 500", extra={"upstream_status": 500})
        return f"{text} [{target_language}]"

    async def translate_query(self, query: str) -> str:
        self.calls.append((query, "en"))
        if query in self.fail_on:
            raise ExternalServiceError("OpenAI API error: 500")
        return f"{query} [en]"


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return async_sessionmaker(test_engine, expire_on_commit=False)


@pytest.fixture
async def test_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def no_delays(monkeypatch):
    monkeypatch.setattr(settings, "queue_item_delay_seconds", 0.0)
    monkeypatch.setattr(settings, "bulk_batch_delay_seconds", 0.0)


@pytest.fixture
async def client(test_session, translator, no_delays) -> AsyncGenerator[AsyncClient, None]:
    # Override dependencies
    async def override_get_db():
        yield test_session

    async def no_rate_limit():
        return None

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_translation_service] = lambda: translator
    app.dependency_overrides[enforce_rate_limit] = no_rate_limit

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()
