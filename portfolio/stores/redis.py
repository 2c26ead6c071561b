"""Redis store for shared, expiring session state.

Handles:
- Generic JSON values with TTL
- Single-use reads (GETDEL)

TTL policies:
- CAPTCHA sessions: captcha_ttl_seconds (default 5 minutes)

Only initialized when CAPTCHA_BACKEND=redis.
"""

import json
import logging
from typing import Any

import redis.asyncio as redis

from portfolio.settings import get_settings

# Key prefixes
PREFIX_CAPTCHA = "captcha:"

# Redis client (initialized on startup)
_redis: redis.Redis | None = None
logger = logging.getLogger("uvicorn.error")


async def init_redis() -> None:
    """Initialize Redis connection."""
    global _redis
    settings = get_settings()
    _redis = redis.from_url(
        settings.redis_url,
        encoding="utf-8",
        decode_responses=True,
        socket_connect_timeout=5,
        socket_timeout=5,
    )
    # Validate connectivity early (especially for `rediss://` in production).
    await _redis.ping()
    logger.info("Redis connected")


async def close_redis() -> None:
    """Close Redis connection."""
    global _redis
    if _redis:
        await _redis.aclose()
        _redis = None


def _get_redis() -> redis.Redis:
    """Get Redis client instance."""
    if _redis is None:
        raise RuntimeError("Redis not initialized. Call init_redis() first.")
    return _redis


# ============================================================
# Generic cache operations
# ============================================================


async def cache_set_json(key: str, value: dict[str, Any], ttl: int) -> None:
    """Set JSON value with TTL.

    Args:
        key: Cache key.
        value: Dict to store as JSON.
        ttl: Time-to-live in seconds.
    """
    await _get_redis().setex(key, ttl, json.dumps(value))


async def cache_pop_json(key: str) -> dict[str, Any] | None:
    """Atomically get and delete a JSON value.

    Args:
        key: Cache key.

    Returns:
        Parsed JSON dict or None if not found (or already expired).
    """
    value = await _get_redis().getdel(key)
    if value:
        return json.loads(value)
    return None


# ============================================================
# CAPTCHA sessions
# ============================================================


async def set_captcha_session(session_id: str, payload: dict[str, Any], ttl: int) -> None:
    """Store a CAPTCHA session; Redis expires it after ``ttl`` seconds."""
    await cache_set_json(f"{PREFIX_CAPTCHA}{session_id}", payload, ttl)


async def pop_captcha_session(session_id: str) -> dict[str, Any] | None:
    """Consume a CAPTCHA session (single use)."""
    return await cache_pop_json(f"{PREFIX_CAPTCHA}{session_id}")
