"""
Fixed-window rate limiter backed by Redis.

One INCR per request on "<prefix>:<identity>:<scope>:<window>",
EXPIRE set when the window's first request creates the key.
"""

import time
from dataclasses import dataclass
from typing import Optional

from redis.asyncio import Redis
from redis.exceptions import RedisError

from portal_translations.core.logging import get_logger

logger = get_logger(__name__)


@dataclass
class RateLimitResult:
    allowed: bool
    count: int
    limit: int
    reset_in: int


class FixedWindowRateLimiter:
    def __init__(
        self,
        redis: Redis,
        limit: int,
        window_seconds: int,
        prefix: str = "ratelimit",
    ):
        self.redis = redis
        self.limit = limit
        self.window_seconds = window_seconds
        self.prefix = prefix

    def _key(self, identity: str, scope: str, now: float) -> str:
        window = int(now // self.window_seconds)
        return f"{self.prefix}:{identity}:{scope}:{window}"

    async def hit(self, identity: str, scope: str, now: Optional[float] = None) -> RateLimitResult:
        now = time.time() if now is None else now
        key = self._key(identity, scope, now)
        reset_in = self.window_seconds - int(now % self.window_seconds)

        try:
            count = await self.redis.incr(key)
            if count == 1:
                await self.redis.expire(key, self.window_seconds)
        except RedisError as e:
            logger.warning(f"Rate limiter unavailable, allowing request: {e}")
            return RateLimitResult(allowed=True, count=0, limit=self.limit, reset_in=reset_in)

        return RateLimitResult(
            allowed=count <= self.limit,
            count=count,
            limit=self.limit,
            reset_in=reset_in,
        )
