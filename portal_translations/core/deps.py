"""
Dependency Injection

FastAPI dependencies for routes.
"""

import secrets
from typing import Annotated

from fastapi import Depends, Request
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncSession

from portal_translations.core.config import settings
from portal_translations.core.errors import RateLimitError
from portal_translations.infra.db import get_db
from portal_translations.infra.redis import get_redis
from portal_translations.services.rate_limit import FixedWindowRateLimiter
from portal_translations.services.translation.translation_service import TranslationService


def get_translation_service() -> TranslationService:
    return TranslationService()


# Type aliases for common dependencies
SessionDep = Annotated[AsyncSession, Depends(get_db)]
RedisDep = Annotated[Redis, Depends(get_redis)]
TranslatorDep = Annotated[TranslationService, Depends(get_translation_service)]


def _client_identity(request: Request) -> str:
    """
    Bucket key for the rate limiter.

    Only the configured front-end key is trusted as an identity, and
    X-Forwarded-For only when the peer is a configured proxy; anything else
    is limited by the connecting address.
    """
    peer = request.client.host if request.client else "unknown"

    api_key = request.headers.get("x-api-key") or request.headers.get("apikey")
    if (
        api_key
        and settings.frontend_api_key
        and secrets.compare_digest(api_key.encode(), settings.frontend_api_key.encode())
    ):
        return "key:frontend"

    forwarded = request.headers.get("x-forwarded-for")
    if forwarded and peer in settings.trusted_proxy_list:
        return f"ip:{forwarded.split(',')[0].strip()}"
    return f"ip:{peer}"


async def enforce_rate_limit(request: Request, redis: RedisDep) -> None:
    """Per client and route fixed-window limit; raises 429 when exceeded"""
    if not settings.rate_limit_enabled:
        return

    limiter = FixedWindowRateLimiter(
        redis,
        limit=settings.rate_limit_requests,
        window_seconds=settings.rate_limit_window_seconds,
    )
    result = await limiter.hit(_client_identity(request), request.url.path)
    if not result.allowed:
        raise RateLimitError(
            "Rate limit exceeded",
            extra={"retry_after": result.reset_in},
        )
