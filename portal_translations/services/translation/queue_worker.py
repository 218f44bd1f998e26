"""
Translation Queue Worker

Drains pending rows of translation_queue: cache check, model call, store,
status update. Items are handled strictly one after another; a failing item
is marked failed and the batch moves on.
"""

import asyncio
from dataclasses import dataclass
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portal_translations.core.config import settings
from portal_translations.core.errors import QueueUnavailableError
from portal_translations.core.logging import get_logger
from portal_translations.crud.translation import TranslationCRUD, TranslationQueueCRUD
from portal_translations.models.translation_queue import TranslationQueueItem
from portal_translations.services.translation.translation_service import TranslationService

logger = get_logger(__name__)


@dataclass(frozen=True)
class QueueJob:
    """Detached copy of a queue row; ORM rows expire on rollback"""

    id: str
    content_key: str
    original_text: str
    target_language: str
    page_path: Optional[str]

    @classmethod
    def from_item(cls, item: TranslationQueueItem) -> "QueueJob":
        return cls(
            id=item.id,
            content_key=item.content_key,
            original_text=item.original_text,
            target_language=item.target_language,
            page_path=item.page_path,
        )


@dataclass
class QueueRunSummary:
    completed: int = 0
    failed: int = 0
    total: int = 0

    @property
    def processed(self) -> int:
        return self.completed + self.failed

    def to_dict(self) -> dict:
        return {
            "processed": self.processed,
            "completed": self.completed,
            "failed": self.failed,
            "total": self.total,
        }


class QueueWorker:
    def __init__(
        self,
        db: AsyncSession,
        translator: TranslationService,
        item_delay: float = 0.0,
        source_language: Optional[str] = None,
    ):
        self.db = db
        self.translator = translator
        self.item_delay = item_delay
        self.source_language = source_language or settings.source_language

    async def fetch_pending(self, batch_size: int) -> List[QueueJob]:
        try:
            items = await TranslationQueueCRUD.get_pending(self.db, batch_size)
        except SQLAlchemyError as e:
            logger.error(f"Error fetching pending translations: {e}")
            raise QueueUnavailableError("Queue processing failed") from e
        return [QueueJob.from_item(item) for item in items]

    async def process_batch(self, batch_size: int) -> QueueRunSummary:
        jobs = await self.fetch_pending(batch_size)
        summary = QueueRunSummary(total=len(jobs))
        if not jobs:
            logger.info("No pending translations found")
            return summary

        logger.info(f"Processing {len(jobs)} pending translations")
        for job in jobs:
            if await self._process_item(job):
                summary.completed += 1
            else:
                summary.failed += 1

        logger.info(
            f"Queue batch finished: {summary.completed} succeeded, {summary.failed} failed"
        )
        return summary

    async def _process_item(self, job: QueueJob) -> bool:
        """Returns True when the item ends up completed"""
        try:
            existing = await TranslationCRUD.find(
                self.db,
                job.content_key,
                job.target_language,
                job.original_text,
                self.source_language,
            )
            if existing is not None:
                await TranslationQueueCRUD.mark_completed(self.db, job.id)
                logger.debug(f"Already translated: {job.content_key} -> {job.target_language}")
                return True

            try:
                translated_text = await self.translator.translate(
                    job.original_text, job.target_language
                )
            finally:
                if self.item_delay:
                    await asyncio.sleep(self.item_delay)

            try:
                await TranslationCRUD.insert(
                    self.db,
                    content_key=job.content_key,
                    original_text=job.original_text,
                    translated_text=translated_text,
                    target_language=job.target_language,
                    source_language=self.source_language,
                    page_path=job.page_path,
                )
            except SQLAlchemyError as e:
                logger.error(f"Error storing translation for {job.content_key}: {e}")
                await self._mark_failed(job, f"Database error: {e}")
                return False

            await TranslationQueueCRUD.mark_completed(self.db, job.id)
            logger.info(f"Translated: {job.content_key} -> {job.target_language}")
            return True

        except Exception as e:
            logger.error(f"Failed to translate {job.content_key} ({job.id}): {e}")
            await self._mark_failed(job, str(e) or type(e).__name__)
            return False

    async def _mark_failed(self, job: QueueJob, error_message: str) -> None:
        await self.db.rollback()
        try:
            await TranslationQueueCRUD.mark_failed(self.db, job.id, error_message)
        except SQLAlchemyError:
            await self.db.rollback()
            logger.exception(f"Could not mark queue item {job.id} as failed")
