"""
Translation endpoints used by the UI: on-demand content translation, search
query translation and the bulk backfill.
"""

from fastapi import APIRouter, Depends

from portal_translations.core.deps import SessionDep, TranslatorDep, enforce_rate_limit
from portal_translations.core.errors import ExternalServiceError, TranslationFailedError
from portal_translations.core.logging import get_logger
from portal_translations.schemas.translation import (
    BulkTranslateResponse,
    LanguageInfo,
    TranslateContentRequest,
    TranslateContentResponse,
    TranslateQueryRequest,
    TranslateQueryResponse,
)
from portal_translations.services.translation.backfill import BackfillService
from portal_translations.services.translation.content_service import ContentTranslationService
from portal_translations.services.translation.languages import LANGUAGE_NAMES, is_rtl

logger = get_logger(__name__)
router = APIRouter(tags=["translations"])


@router.post(
    "/translate-content",
    response_model=TranslateContentResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def translate_content(
    request: TranslateContentRequest,
    db: SessionDep,
    translator: TranslatorDep,
):
    """
    Translate a UI string identified by content_key.
    Served from the translations table when cached, otherwise translated once and stored.
    """
    service = ContentTranslationService(db, translator)
    translated_text, cached = await service.translate_content(request)
    return TranslateContentResponse(translated_text=translated_text, cached=cached)


@router.post(
    "/translate-query",
    response_model=TranslateQueryResponse,
    dependencies=[Depends(enforce_rate_limit)],
)
async def translate_query(request: TranslateQueryRequest, translator: TranslatorDep):
    """Translate a search query to English before it is matched against content"""
    try:
        translated = await translator.translate_query(request.query)
    except ExternalServiceError as e:
        raise TranslationFailedError("Query translation failed") from e
    return TranslateQueryResponse(translatedQuery=translated)


@router.post("/bulk-translate-content", response_model=BulkTranslateResponse)
async def bulk_translate_content(db: SessionDep, translator: TranslatorDep):
    """Fill every missing (content, target language) pair in the translations table"""
    logger.info("Starting bulk translation process...")
    summary = await BackfillService(db, translator).backfill_all()
    message = (
        "All content is already translated"
        if summary.total == 0
        else "Bulk translation completed"
    )
    return BulkTranslateResponse(message=message, **summary.to_dict())


@router.get("/languages", response_model=list[LanguageInfo])
async def list_languages():
    return [
        LanguageInfo(code=code, name=name, rtl=is_rtl(code))
        for code, name in LANGUAGE_NAMES.items()
    ]
