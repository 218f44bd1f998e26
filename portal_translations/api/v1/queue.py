"""
Translation queue endpoints: batch processing, trigger, enqueue and listing.
"""

from typing import List, Optional

from fastapi import APIRouter, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from portal_translations.core.config import settings
from portal_translations.core.deps import SessionDep, TranslatorDep
from portal_translations.core.errors import ValidationError
from portal_translations.core.logging import get_logger
from portal_translations.crud.translation import TranslationQueueCRUD
from portal_translations.models.translation_queue import QueueStatus
from portal_translations.schemas.queue import (
    QueueItemCreate,
    QueueItemResponse,
    QueueProcessResponse,
    TriggerResponse,
)
from portal_translations.services.translation.languages import is_supported, normalize_language_code
from portal_translations.services.translation.queue_worker import QueueWorker
from portal_translations.services.translation.translation_service import TranslationService

logger = get_logger(__name__)
router = APIRouter(tags=["translation-queue"])


async def run_queue_batch(
    db: AsyncSession,
    translator: TranslationService,
    batch_size: int,
    item_delay: float = 0.0,
) -> QueueProcessResponse:
    worker = QueueWorker(db, translator, item_delay=item_delay)
    summary = await worker.process_batch(batch_size)
    if summary.total == 0:
        return QueueProcessResponse(message="No pending translations")
    return QueueProcessResponse(message="Translation queue processed", **summary.to_dict())


@router.post("/process-translation-queue", response_model=QueueProcessResponse)
async def process_translation_queue(db: SessionDep, translator: TranslatorDep):
    """Process a small batch with a pause after every model call"""
    logger.info("Processing translation queue...")
    return await run_queue_batch(
        db,
        translator,
        batch_size=settings.queue_batch_size,
        item_delay=settings.queue_item_delay_seconds,
    )


@router.post("/auto-process-translation-queue", response_model=QueueProcessResponse)
async def auto_process_translation_queue(db: SessionDep, translator: TranslatorDep):
    """Scheduled variant: larger batch, no pause between items"""
    logger.info("Starting auto-process translation queue...")
    return await run_queue_batch(db, translator, batch_size=settings.auto_queue_batch_size)


@router.post("/trigger-queue-processing", response_model=TriggerResponse)
async def trigger_queue_processing(db: SessionDep, translator: TranslatorDep):
    logger.info("Triggering translation queue processing...")
    result = await run_queue_batch(db, translator, batch_size=settings.auto_queue_batch_size)
    logger.info(f"Queue processing finished: {result.model_dump()}")
    return TriggerResponse(
        message="Queue processing triggered successfully",
        result=result.model_dump(),
    )


@router.post(
    "/translation-queue",
    response_model=QueueItemResponse,
    status_code=status.HTTP_201_CREATED,
)
async def enqueue_translation(item_in: QueueItemCreate, db: SessionDep):
    """Queue a string for translation into one target language"""
    target_language = normalize_language_code(item_in.target_language)
    if not is_supported(target_language) or target_language == settings.source_language:
        raise ValidationError(f"Unsupported target language: {item_in.target_language}")

    return await TranslationQueueCRUD.enqueue(
        db,
        content_key=item_in.content_key,
        original_text=item_in.original_text,
        target_language=target_language,
        page_path=item_in.page_path,
    )


@router.get("/translation-queue", response_model=List[QueueItemResponse])
async def list_translation_queue(
    db: SessionDep,
    status_filter: Optional[str] = Query(None, alias="status"),
    limit: int = Query(100, ge=1, le=500),
):
    if status_filter is not None and status_filter not in QueueStatus.ALL:
        raise ValidationError(f"Unknown status: {status_filter}")
    return await TranslationQueueCRUD.list_items(db, status=status_filter, limit=limit)
