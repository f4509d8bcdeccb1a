"""Abstract cache interfaces."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CacheController(Protocol):
    """Basic cache contract: read, overwrite and remove entries.

    TTLs are in milliseconds; ``INFINITE_TTL`` means the entry never expires.
    """

    async def get(self, key: str) -> Any | None:
        """Retrieve a decoded value by key, or None if not found."""
        ...

    async def set(self, key: str, value: Any, ttl: float) -> None:  # noqa: ANN401
        """Store a value with a TTL."""
        ...

    async def delete(self, key: str) -> None:
        """Delete a key from the cache."""
        ...


@runtime_checkable
class FlexCache(CacheController, Protocol):
    """Cache contract with conditional writes.

    ``set`` only writes when the key is absent, ``update`` only when it is
    present, and ``set_force`` always writes.
    """

    async def update(self, key: str, value: Any, ttl: float) -> None:  # noqa: ANN401
        """Overwrite a value only if the key already exists."""
        ...

    async def set_force(self, key: str, value: Any, ttl: float) -> None:  # noqa: ANN401
        """Store a value regardless of whether the key exists."""
        ...
