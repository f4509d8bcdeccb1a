"""Shared core of the Redis-backed cache adapters."""

from __future__ import annotations

import enum
import math
from typing import Any

from flex_cache_core.codec import decode_value, encode_value
from flex_cache_core.constants import INFINITE_TTL, MS_PER_SECOND, OK_STATUS, UNDEFINED
from flex_cache_core.exceptions import ValidationError, WriteRejectedError
from flex_cache_core.interfaces.store import RedisStore


class WriteCondition(enum.Enum):
    """Existence condition attached to a write."""

    ALWAYS = "always"
    IF_ABSENT = "nx"
    IF_PRESENT = "xx"


class ExpiryMode(enum.Enum):
    """How a finite TTL reaches the store."""

    # SETEX with the TTL rounded up to whole seconds; reply is not checked
    SECONDS_VIA_SETEX = "setex"
    # SET ... PX with the TTL in milliseconds; reply must be OK
    MILLISECONDS_VIA_PX = "px"


class BaseRedisCache:
    """Stateless adapter translating cache calls into Redis commands.

    Subclasses pick an ``ExpiryMode`` and expose the write operations they
    support on top of :meth:`_write`.
    """

    expiry_mode: ExpiryMode = ExpiryMode.MILLISECONDS_VIA_PX

    def __init__(self, redis: RedisStore) -> None:
        """Initialize with a store handle (typically a redis-py asyncio client)."""
        self._redis = redis

    async def get(self, key: str) -> Any | None:  # noqa: ANN401
        """Retrieve and decode a value; non-text store replies mean a miss."""
        raw = await self._redis.get(key)
        if not isinstance(raw, (str, bytes)):
            return None
        return decode_value(raw)

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        await self._redis.delete(key)

    async def _write(
        self,
        key: str,
        value: Any,  # noqa: ANN401
        ttl: float,
        condition: WriteCondition = WriteCondition.ALWAYS,
    ) -> None:
        """Validate, encode and store a value with a single store round trip."""
        if value is UNDEFINED:
            msg = "Data is not defined"
            raise ValidationError(msg)

        if self.expiry_mode is ExpiryMode.SECONDS_VIA_SETEX:
            if condition is not WriteCondition.ALWAYS:
                msg = f"SETEX writes are unconditional, got {condition.name}"
                raise ValueError(msg)
            payload = encode_value(value)
            if ttl == INFINITE_TTL:
                await self._redis.set(key, payload)
            else:
                await self._redis.setex(key, _to_seconds(ttl), payload)
            return

        if ttl <= 0:
            msg = "TTL must be positive number"
            raise ValidationError(msg)

        payload = encode_value(value)
        options: dict[str, Any] = {}
        if ttl != INFINITE_TTL:
            options["px"] = _to_milliseconds(ttl)
        if condition is WriteCondition.IF_ABSENT:
            options["nx"] = True
        elif condition is WriteCondition.IF_PRESENT:
            options["xx"] = True

        result = await self._redis.set(key, payload, **options)
        if not is_accepted(result):
            msg = f"Cannot set value for the key {key!r}"
            raise WriteRejectedError(msg)


def _to_seconds(ttl: float) -> float:
    """Round a millisecond TTL up to whole seconds.

    Non-finite values (NaN, -inf) are forwarded as-is for the store to reject.
    """
    if not math.isfinite(ttl):
        return ttl
    return math.ceil(ttl / MS_PER_SECOND)


def _to_milliseconds(ttl: float) -> float:
    """Give whole-number float TTLs the int type redis-py requires for PX."""
    if isinstance(ttl, float) and ttl.is_integer():
        return int(ttl)
    return ttl


def is_accepted(result: object) -> bool:
    """Check whether a SET reply acknowledges the write.

    redis-py turns ``OK`` into ``True`` and an unmet NX/XX condition into
    ``None``; raw clients return the status text itself.
    """
    if isinstance(result, bytes):
        result = result.decode("utf-8", errors="replace")
    if isinstance(result, str):
        return result.upper() == OK_STATUS
    return result is True
