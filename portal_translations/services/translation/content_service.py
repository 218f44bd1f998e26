"""
On-demand content translation used by the UI.
"""

from typing import Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from portal_translations.core.config import settings
from portal_translations.core.errors import ExternalServiceError, TranslationFailedError
from portal_translations.core.logging import get_logger
from portal_translations.crud.translation import TranslationCRUD
from portal_translations.schemas.translation import TranslateContentRequest
from portal_translations.services.translation.languages import normalize_language_code
from portal_translations.services.translation.translation_service import TranslationService

logger = get_logger(__name__)


class ContentTranslationService:
    def __init__(self, db: AsyncSession, translator: TranslationService):
        self.db = db
        self.translator = translator
        self.source_language = settings.source_language

    async def translate_content(self, request: TranslateContentRequest) -> Tuple[str, bool]:
        """
        Returns (translated_text, cached).

        Cache hit returns the stored text. On a miss the model is called once and
        the result is stored best-effort: a storage failure is logged and the
        fresh translation is still returned.
        """
        target_language = normalize_language_code(request.target_language)
        logger.info(f"Translating '{request.content_key}' to {target_language}")

        cached = await TranslationCRUD.find(
            self.db,
            request.content_key,
            target_language,
            request.original_text,
            self.source_language,
        )
        if cached is not None:
            logger.debug("Found cached translation")
            return cached.translated_text, True

        if target_language == self.source_language:
            return request.original_text, False

        try:
            translated_text = await self.translator.translate(request.original_text, target_language)
        except ExternalServiceError as e:
            logger.error(f"Translation failed for '{request.content_key}': {e.message}")
            raise TranslationFailedError(
                "Translation failed", extra={"translated_text": None}
            ) from e

        try:
            await TranslationCRUD.upsert(
                self.db,
                content_key=request.content_key,
                original_text=request.original_text,
                translated_text=translated_text,
                target_language=target_language,
                source_language=self.source_language,
                page_path=request.page_path,
            )
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.warning(f"Error storing translation for '{request.content_key}': {e}")

        return translated_text, False
