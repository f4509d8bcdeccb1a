"""Redis-backed cache adapters."""

from flex_cache_infra.cache.flex_redis_cache import FlexRedisCache
from flex_cache_infra.cache.redis_cache import RedisCache

__all__ = [
    "FlexRedisCache",
    "RedisCache",
]
