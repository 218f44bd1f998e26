"""
OpenAI Client wrapper

Handles chat-completion calls against OpenAI or any OpenAI-compatible gateway.
"""

from typing import List, Optional

from openai import APIConnectionError, APIStatusError, AsyncOpenAI, OpenAIError

from portal_translations.core.config import settings
from portal_translations.core.errors import ExternalServiceError
from portal_translations.core.logging import get_logger

logger = get_logger(__name__)


class OpenAIClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        client: Optional[AsyncOpenAI] = None,
    ):
        self.api_key = api_key or settings.openai_api_key
        self.base_url = base_url or settings.openai_base_url
        if client is not None:
            self.client = client
        elif self.api_key:
            kwargs = {
                "api_key": self.api_key,
                "base_url": self.base_url,
                "max_retries": settings.openai_max_retries,
            }
            if settings.openai_timeout is not None:
                kwargs["timeout"] = settings.openai_timeout
            self.client = AsyncOpenAI(**kwargs)
        else:
            self.client = None

    async def chat_completion(
        self,
        messages: List[dict],
        model: Optional[str] = None,
        temperature: float = 0.3,
        max_tokens: Optional[int] = None,
    ) -> str:
        """Standard chat completion, returns choices[0].message.content"""
        if not self.client:
            raise ExternalServiceError("OpenAI API key not configured")

        kwargs = {
            "model": model or settings.openai_model,
            "messages": messages,
            "temperature": temperature,
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except APIStatusError as e:
            logger.error(f"OpenAI API error {e.status_code}: {e.message}")
            raise ExternalServiceError(
                f"OpenAI API error: {e.status_code}", extra={"upstream_status": e.status_code}
            ) from e
        except APIConnectionError as e:
            logger.error(f"OpenAI API unreachable: {e}")
            raise ExternalServiceError(f"OpenAI API unreachable: {e}") from e
        except OpenAIError as e:
            logger.error(f"OpenAI Chat Error: {e}")
            raise ExternalServiceError(f"OpenAI error: {e}") from e

        if not response.choices:
            raise ExternalServiceError("OpenAI API returned no choices")
        return response.choices[0].message.content or ""
