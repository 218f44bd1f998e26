"""
CRUD layer for translations, the translation queue and language preferences.

Every write commits on its own; callers get no transaction spanning
lookup, external call and store.
"""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from portal_translations.core.time import utc_now
from portal_translations.models.language_preference import LanguagePreference
from portal_translations.models.translation import Translation
from portal_translations.models.translation_queue import QueueStatus, TranslationQueueItem


class TranslationCRUD:
    """CRUD operations for the translations table"""

    @staticmethod
    async def find(
        db: AsyncSession,
        content_key: str,
        target_language: str,
        original_text: str,
        source_language: str = "en",
    ) -> Optional[Translation]:
        stmt = select(Translation).where(
            Translation.content_key == content_key,
            Translation.target_language == target_language,
            Translation.source_language == source_language,
            Translation.original_text == original_text,
        )
        result = await db.execute(stmt)
        return result.scalars().first()

    @staticmethod
    async def insert(
        db: AsyncSession,
        content_key: str,
        original_text: str,
        translated_text: str,
        target_language: str,
        source_language: str = "en",
        page_path: Optional[str] = None,
    ) -> Translation:
        translation = Translation(
            content_key=content_key,
            original_text=original_text,
            translated_text=translated_text,
            source_language=source_language,
            target_language=target_language,
            page_path=page_path,
        )
        db.add(translation)
        await db.commit()
        await db.refresh(translation)
        return translation

    @staticmethod
    async def upsert(
        db: AsyncSession,
        content_key: str,
        original_text: str,
        translated_text: str,
        target_language: str,
        source_language: str = "en",
        page_path: Optional[str] = None,
    ) -> Translation:
        """Insert, or replace translated_text of the row with the same unique key"""
        existing = await TranslationCRUD.find(
            db, content_key, target_language, original_text, source_language
        )
        if existing is None:
            try:
                return await TranslationCRUD.insert(
                    db,
                    content_key=content_key,
                    original_text=original_text,
                    translated_text=translated_text,
                    target_language=target_language,
                    source_language=source_language,
                    page_path=page_path,
                )
            except IntegrityError:
                # Another writer stored the same key between our select and insert
                await db.rollback()
                existing = await TranslationCRUD.find(
                    db, content_key, target_language, original_text, source_language
                )
                if existing is None:
                    raise

        existing.translated_text = translated_text
        if page_path is not None:
            existing.page_path = page_path
        await db.commit()
        await db.refresh(existing)
        return existing

    @staticmethod
    async def list_by_source(db: AsyncSession, source_language: str = "en") -> List[Translation]:
        stmt = (
            select(Translation)
            .where(Translation.source_language == source_language)
            .order_by(Translation.created_at, Translation.id)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())


class TranslationQueueCRUD:
    """CRUD operations for the translation_queue table"""

    @staticmethod
    async def get_pending(db: AsyncSession, batch_size: int) -> List[TranslationQueueItem]:
        """Oldest pending items first, at most batch_size of them"""
        stmt = (
            select(TranslationQueueItem)
            .where(TranslationQueueItem.status == QueueStatus.PENDING)
            .order_by(TranslationQueueItem.created_at, TranslationQueueItem.id)
            .limit(batch_size)
        )
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def get_by_id(db: AsyncSession, item_id: str) -> Optional[TranslationQueueItem]:
        return await db.get(TranslationQueueItem, item_id)

    @staticmethod
    async def enqueue(
        db: AsyncSession,
        content_key: str,
        original_text: str,
        target_language: str,
        page_path: Optional[str] = None,
    ) -> TranslationQueueItem:
        item = TranslationQueueItem(
            content_key=content_key,
            original_text=original_text,
            target_language=target_language,
            page_path=page_path,
            status=QueueStatus.PENDING,
        )
        db.add(item)
        await db.commit()
        await db.refresh(item)
        return item

    @staticmethod
    async def mark_completed(db: AsyncSession, item_id: str) -> None:
        await TranslationQueueCRUD._set_status(db, item_id, QueueStatus.COMPLETED, None)

    @staticmethod
    async def mark_failed(db: AsyncSession, item_id: str, error_message: str) -> None:
        await TranslationQueueCRUD._set_status(db, item_id, QueueStatus.FAILED, error_message)

    @staticmethod
    async def _set_status(
        db: AsyncSession, item_id: str, status: str, error_message: Optional[str]
    ) -> None:
        item = await db.get(TranslationQueueItem, item_id)
        if item is None:
            return
        item.status = status
        item.error_message = error_message
        item.processed_at = utc_now()
        await db.commit()

    @staticmethod
    async def list_items(
        db: AsyncSession, status: Optional[str] = None, limit: int = 100
    ) -> List[TranslationQueueItem]:
        stmt = select(TranslationQueueItem)
        if status:
            stmt = stmt.where(TranslationQueueItem.status == status)
        stmt = stmt.order_by(TranslationQueueItem.created_at.desc()).limit(limit)
        result = await db.execute(stmt)
        return list(result.scalars().all())


class LanguagePreferenceCRUD:
    """CRUD operations for per-session language preferences"""

    @staticmethod
    async def get(db: AsyncSession, session_id: str) -> Optional[LanguagePreference]:
        result = await db.execute(
            select(LanguagePreference).where(LanguagePreference.session_id == session_id)
        )
        return result.scalar_one_or_none()

    @staticmethod
    async def upsert(db: AsyncSession, session_id: str, preferred_language: str) -> LanguagePreference:
        preference = await LanguagePreferenceCRUD.get(db, session_id)
        if preference is None:
            preference = LanguagePreference(
                session_id=session_id,
                preferred_language=preferred_language,
            )
            db.add(preference)
        else:
            preference.preferred_language = preferred_language
        await db.commit()
        await db.refresh(preference)
        return preference
