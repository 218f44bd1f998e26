"""
Translation Jobs

Queue draining and backfill outside the request cycle. Each job opens its
own database session.
"""

import asyncio
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from portal_translations.core.config import settings
from portal_translations.core.logging import get_logger, setup_logging
from portal_translations.infra.db import AsyncSessionLocal
from portal_translations.services.translation.backfill import BackfillService
from portal_translations.services.translation.queue_worker import QueueRunSummary, QueueWorker
from portal_translations.services.translation.translation_service import TranslationService

logger = get_logger(__name__)

SessionFactory = Callable[[], AsyncSession]


async def drain_translation_queue(
    session_factory: SessionFactory = AsyncSessionLocal,
    translator: Optional[TranslationService] = None,
    batch_size: Optional[int] = None,
    max_batches: Optional[int] = None,
    max_failures: Optional[int] = None,
) -> dict:
    """
    Run queue batches until the queue is empty, the failure budget is used up
    or max_batches batches ran.
    """
    translator = translator or TranslationService()
    batch_size = batch_size or settings.auto_queue_batch_size
    max_batches = max_batches or settings.queue_max_batches
    max_failures = settings.queue_max_failures if max_failures is None else max_failures

    totals = QueueRunSummary()
    batches = 0
    stop_reason = "max_batches"

    while batches < max_batches:
        async with session_factory() as session:
            summary = await QueueWorker(session, translator).process_batch(batch_size)
        batches += 1

        totals.completed += summary.completed
        totals.failed += summary.failed
        totals.total += summary.total

        if summary.total == 0:
            stop_reason = "empty"
            break
        if totals.failed >= max_failures:
            logger.warning(f"Stopping queue drain after {totals.failed} failures")
            stop_reason = "failure_limit"
            break

    logger.info(
        f"Queue drain finished after {batches} batches ({stop_reason}): "
        f"{totals.completed} completed, {totals.failed} failed"
    )
    return {**totals.to_dict(), "batches": batches, "stop_reason": stop_reason}


async def run_backfill(
    session_factory: SessionFactory = AsyncSessionLocal,
    translator: Optional[TranslationService] = None,
) -> dict:
    translator = translator or TranslationService()
    async with session_factory() as session:
        summary = await BackfillService(session, translator).backfill_all()
    return summary.to_dict()


def process_translation_queue() -> dict:
    """
    RQ Job entry point (Sync wrapper)
    """
    setup_logging()
    return asyncio.run(drain_translation_queue())


def backfill_translations() -> dict:
    """
    RQ Job entry point (Sync wrapper)
    """
    setup_logging()
    return asyncio.run(run_backfill())
