"""Simple Redis cache: unconditional overwrite with second-granular expiry."""

from __future__ import annotations

from typing import Any

from flex_cache_infra.cache.base import BaseRedisCache, ExpiryMode


class RedisCache(BaseRedisCache):
    """Implements ``CacheController`` on top of GET / SET / SETEX / DEL.

    Finite TTLs are rounded up from milliseconds to whole seconds and sent
    with SETEX. TTLs are not validated and the store reply is ignored.
    """

    expiry_mode = ExpiryMode.SECONDS_VIA_SETEX

    async def set(self, key: str, value: Any, ttl: float) -> None:  # noqa: ANN401
        """Overwrite a value with a TTL in milliseconds."""
        await self._write(key, value, ttl)
