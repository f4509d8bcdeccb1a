"""Store handle interface consumed by the cache adapters."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class RedisStore(Protocol):
    """The four Redis commands the adapters rely on.

    ``redis.asyncio.Redis`` satisfies this protocol; tests substitute an
    in-memory fake or an ``AsyncMock``.
    """

    async def get(self, name: str) -> Any:  # noqa: ANN401
        """Fetch the raw value stored under a key (GET)."""
        ...

    async def set(
        self,
        name: str,
        value: str,
        ex: int | None = None,
        px: float | None = None,
        nx: bool = False,
        xx: bool = False,
    ) -> Any:  # noqa: ANN401
        """Store a value with optional expiry and existence condition (SET)."""
        ...

    async def setex(self, name: str, time: int, value: str) -> Any:  # noqa: ANN401
        """Store a value with an expiry in whole seconds (SETEX)."""
        ...

    async def delete(self, *names: str) -> Any:  # noqa: ANN401
        """Delete one or more keys (DEL)."""
        ...
