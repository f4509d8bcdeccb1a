"""Redis cache with conditional writes and millisecond expiry."""

from __future__ import annotations

from typing import Any

from flex_cache_infra.cache.base import BaseRedisCache, ExpiryMode, WriteCondition


class FlexRedisCache(BaseRedisCache):
    """Implements ``FlexCache`` with SET ... PX ... [NX|XX].

    TTLs must be positive (or ``INFINITE_TTL``) and are passed to Redis in
    milliseconds. Writes that Redis does not acknowledge with OK raise
    ``WriteRejectedError``.
    """

    expiry_mode = ExpiryMode.MILLISECONDS_VIA_PX

    async def set(self, key: str, value: Any, ttl: float) -> None:  # noqa: ANN401
        """Store a value only if the key does not exist yet."""
        await self._write(key, value, ttl, WriteCondition.IF_ABSENT)

    async def update(self, key: str, value: Any, ttl: float) -> None:  # noqa: ANN401
        """Overwrite a value only if the key already exists."""
        await self._write(key, value, ttl, WriteCondition.IF_PRESENT)

    async def set_force(self, key: str, value: Any, ttl: float) -> None:  # noqa: ANN401
        """Store a value regardless of whether the key exists."""
        await self._write(key, value, ttl, WriteCondition.ALWAYS)
