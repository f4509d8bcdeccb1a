"""Factory functions for creating cache adapters from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from flex_cache_core.interfaces.cache import CacheController
from flex_cache_infra.cache.flex_redis_cache import FlexRedisCache
from flex_cache_infra.cache.redis_cache import RedisCache

if TYPE_CHECKING:
    from flex_cache_core.config.settings import Settings
    from flex_cache_core.interfaces.store import RedisStore


def create_cache(settings: Settings, redis: RedisStore) -> CacheController:
    """Create a cache adapter based on settings.

    Returns ``FlexRedisCache`` when ``settings.cache_variant == "flex"``,
    otherwise the lenient ``RedisCache``.
    """
    if settings.cache_variant == "flex":
        return FlexRedisCache(redis)
    return RedisCache(redis)
