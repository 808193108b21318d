"""Redis store for caching and distributed locks.

Handles:
- Caching with TTL policies
- Distributed locks (one reconciliation run at a time)

Redis is optional: the API serves every read without it, and callers check
`redis_enabled()` before touching the cache.
"""

import json
import logging
from typing import Any

import redis.asyncio as redis

from supplier_directory.settings import get_settings

# Key prefixes
PREFIX_PAYLOAD = "payload:"
PREFIX_LOCK = "lock:"

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    client = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    # Validate connectivity early (especially for `rediss://` in production).
    await client.ping()
    _redis = client
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def redis_enabled() -> bool:
    """Whether a Redis connection was established at startup."""
    return _redis is not None


def _get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Generic cache operations
# ============================================================


async def cache_get(key: str) -> str | None:
    """Get value from cache.

    Args:
        key: Cache key.

    Returns:
        Cached value or None if not found.
    """
    return await _get_redis().get(key)


async def cache_set(key: str, value: str, ttl: int) -> None:
    """Set value in cache with TTL.

    Args:
        key: Cache key.
        value: Value to cache.
        ttl: Time-to-live in seconds.
    """
    await _get_redis().setex(key, ttl, value)


async def cache_delete(key: str) -> None:
    await _get_redis().delete(key)


async def get_payload_cache(name: str) -> dict[str, Any] | None:
    """Get a cached JSON payload by name."""
    value = await cache_get(f"{PREFIX_PAYLOAD}{name}")
    if value:
        return json.loads(value)
    return None


async def set_payload_cache(name: str, payload: dict[str, Any], ttl: int) -> None:
    """Cache a JSON payload by name."""
    await cache_set(f"{PREFIX_PAYLOAD}{name}", json.dumps(payload), ttl)


# ============================================================
# Distributed locks
# ============================================================


async def acquire_lock(key: str, ttl: int) -> bool:
    """Acquire a distributed lock.

    Args:
        key: Lock key.
        ttl: Lock timeout in seconds.

    Returns:
        True if lock acquired, False if already locked.
    """
    lock_key = f"{PREFIX_LOCK}{key}"
    # SET NX (only if not exists) with TTL
    result = await _get_redis().set(lock_key, "1", nx=True, ex=ttl)
    return result is not None


async def release_lock(key: str) -> None:
    """Release a distributed lock.

    Args:
        key: Lock key.
    """
    await cache_delete(f"{PREFIX_LOCK}{key}")
