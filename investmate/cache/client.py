"""
Redis tool-result cache.

Only pure tool results are cached. A Redis outage is logged and read as a
miss, so a cached and an uncached call always return the same thing.
"""

import hashlib
import json
from typing import Any

import redis.asyncio as aioredis
import structlog
from redis.exceptions import RedisError

from investmate.config import settings

log = structlog.get_logger()

_pool = aioredis.ConnectionPool.from_url(
    settings.redis_url, max_connections=10, decode_responses=True
)


def _redis() -> aioredis.Redis:  # type: ignore[type-arg]
    return aioredis.Redis(connection_pool=_pool)


def make_key(tool: str, **kwargs: Any) -> str:
    payload = json.dumps(kwargs, sort_keys=True, default=str)
    digest = hashlib.sha256(payload.encode()).hexdigest()[:16]
    return f"tool:{tool}:{digest}"


async def cache_get(key: str) -> str | None:
    if not settings.cache_enabled:
        return None
    try:
        return await _redis().get(key)  # type: ignore[return-value]
    except RedisError as exc:
        log.warning("cache.unavailable", op="get", key=key, error=str(exc))
        return None


async def cache_set(key: str, value: str, ttl: int = 60) -> None:
    if not settings.cache_enabled:
        return
    try:
        await _redis().setex(key, ttl, value)
    except RedisError as exc:
        log.warning("cache.unavailable", op="set", key=key, error=str(exc))
