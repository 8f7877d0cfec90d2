"""Redis client factory for taskmon."""

import redis.asyncio as aioredis

from taskmon.config import Settings


def create_redis_client(settings: Settings) -> aioredis.Redis:
    """Create an async Redis client from settings."""
    if settings.is_url:
        return aioredis.from_url(
            settings.uri, decode_responses=True, **settings.redis_kwargs()
        )
    return aioredis.Redis(decode_responses=True, **settings.redis_kwargs())
