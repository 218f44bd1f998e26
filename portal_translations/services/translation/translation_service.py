"""
Translation Service

Single point where the external model is asked for a translation.
Providers: OPENAI (chat completion) or MOCK (deterministic, for development).
"""

import time
from typing import Optional

from portal_translations.core.config import settings
from portal_translations.core.errors import ExternalServiceError
from portal_translations.core.logging import get_logger
from portal_translations.services.llm_clients.openai_client import OpenAIClient
from portal_translations.services.translation.languages import normalize_language_code
from portal_translations.services.translation.prompts import (
    build_query_messages,
    build_translation_messages,
)

logger = get_logger(__name__)


class TranslationService:
    def __init__(self, client: Optional[OpenAIClient] = None, provider: Optional[str] = None):
        self.openai = client or OpenAIClient()
        self.provider = provider or settings.translation_provider

    async def translate(self, text: str, target_language: str) -> str:
        """
        Translate English text into target_language.
        Raises ExternalServiceError when the model fails or replies empty.
        """
        target_language = normalize_language_code(target_language)
        start_time = time.time()

        if self.provider == "MOCK":
            translated = f"[{target_language}] {text}"
        else:
            reply = await self.openai.chat_completion(
                build_translation_messages(text, target_language),
                temperature=settings.translation_temperature,
                max_tokens=settings.translation_max_tokens,
            )
            translated = reply.strip()

        if not translated:
            raise ExternalServiceError("OpenAI API returned an empty translation")

        latency = (time.time() - start_time) * 1000
        logger.debug(f"Translated {len(text)} chars to {target_language} in {latency:.0f}ms")
        return translated

    async def translate_query(self, query: str) -> str:
        """Translate a free-text search query to English, the query itself if the reply is empty"""
        if self.provider == "MOCK":
            return query

        reply = await self.openai.chat_completion(
            build_query_messages(query),
            model=settings.query_translation_model,
            temperature=0.1,
            max_tokens=100,
        )
        return reply.strip() or query
