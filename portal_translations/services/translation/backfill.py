"""
Bulk Backfill

Finds (content, language) pairs that have no translation yet and fills them:

    needed = distinct source strings x target languages - existing pairs

Model calls go out in small concurrent batches with a fixed pause between
batches to stay under the provider's rate limit.
"""

import asyncio
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, Sequence, Set, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portal_translations.core.config import settings
from portal_translations.core.logging import get_logger
from portal_translations.crud.translation import TranslationCRUD
from portal_translations.services.translation.translation_service import TranslationService

logger = get_logger(__name__)


class TranslationRow(Protocol):
    content_key: str
    original_text: str
    target_language: str
    page_path: Optional[str]


@dataclass(frozen=True)
class NeededTranslation:
    content_key: str
    original_text: str
    target_language: str
    page_path: Optional[str] = None


@dataclass
class BackfillSummary:
    total: int = 0
    completed: int = 0

    def to_dict(self) -> dict:
        return {"total": self.total, "completed": self.completed}


def compute_needed(
    records: Iterable[TranslationRow], target_languages: Sequence[str]
) -> List[NeededTranslation]:
    """Set difference between all (source string, language) pairs and the existing ones"""
    groups: Dict[Tuple[str, str], Optional[str]] = {}
    covered: Dict[Tuple[str, str], Set[str]] = {}

    for record in records:
        key = (record.content_key, record.original_text)
        if key not in groups:
            groups[key] = record.page_path
            covered[key] = set()
        covered[key].add(record.target_language)

    needed: List[NeededTranslation] = []
    for (content_key, original_text), page_path in groups.items():
        for language in target_languages:
            if language not in covered[(content_key, original_text)]:
                needed.append(
                    NeededTranslation(
                        content_key=content_key,
                        original_text=original_text,
                        target_language=language,
                        page_path=page_path,
                    )
                )
    return needed


class BackfillService:
    def __init__(
        self,
        db: AsyncSession,
        translator: TranslationService,
        target_languages: Optional[Sequence[str]] = None,
        batch_size: Optional[int] = None,
        batch_delay: Optional[float] = None,
    ):
        self.db = db
        self.translator = translator
        self.target_languages = list(target_languages or settings.target_language_list)
        self.batch_size = batch_size or settings.bulk_batch_size
        self.batch_delay = settings.bulk_batch_delay_seconds if batch_delay is None else batch_delay
        self.source_language = settings.source_language

    async def find_needed(self) -> List[NeededTranslation]:
        records = await TranslationCRUD.list_by_source(self.db, self.source_language)
        return compute_needed(records, self.target_languages)

    async def backfill_all(self) -> BackfillSummary:
        needed = await self.find_needed()
        summary = BackfillSummary(total=len(needed))
        logger.info(f"Found {len(needed)} translations needed")

        for start in range(0, len(needed), self.batch_size):
            batch = needed[start:start + self.batch_size]
            summary.completed += await self._run_batch(batch, summary)

            if start + self.batch_size < len(needed) and self.batch_delay:
                await asyncio.sleep(self.batch_delay)

        logger.info(f"Backfill finished: {summary.completed}/{summary.total} translated")
        return summary

    async def _run_batch(self, batch: List[NeededTranslation], summary: BackfillSummary) -> int:
        # Model calls run concurrently, writes run one at a time
        results = await asyncio.gather(
            *(self.translator.translate(item.original_text, item.target_language) for item in batch),
            return_exceptions=True,
        )

        stored = 0
        for item, result in zip(batch, results):
            if isinstance(result, BaseException):
                logger.error(
                    f"Failed to translate {item.content_key} to {item.target_language}: {result}"
                )
                continue
            try:
                await TranslationCRUD.upsert(
                    self.db,
                    content_key=item.content_key,
                    original_text=item.original_text,
                    translated_text=result,
                    target_language=item.target_language,
                    source_language=self.source_language,
                    page_path=item.page_path,
                )
            except SQLAlchemyError as e:
                await self.db.rollback()
                logger.error(f"Error storing translation for {item.content_key}: {e}")
                continue
            stored += 1
            logger.info(
                f"Completed {summary.completed + stored}/{summary.total}: "
                f"{item.content_key} -> {item.target_language}"
            )
        return stored
