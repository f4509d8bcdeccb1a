"""Public interface re-exports for flex_cache_core."""

from flex_cache_core.interfaces.cache import CacheController, FlexCache
from flex_cache_core.interfaces.store import RedisStore

__all__ = [
    "CacheController",
    "FlexCache",
    "RedisStore",
]
