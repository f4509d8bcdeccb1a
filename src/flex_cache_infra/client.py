"""Redis client factory with connection testing."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog
from redis.asyncio import Redis
from redis.exceptions import RedisError

from flex_cache_core.exceptions import TransportError

if TYPE_CHECKING:
    from flex_cache_core.config.settings import Settings

logger = structlog.get_logger()


async def create_redis_client(settings: Settings) -> Redis:
    """Create a Redis client from settings and verify it answers PING.

    Raises:
        TransportError: If the server is unreachable.
    """
    client = Redis.from_url(
        settings.redis_url,
        decode_responses=settings.redis_decode_responses,
        socket_timeout=settings.redis_socket_timeout_seconds,
    )
    try:
        await client.ping()
    except (RedisError, OSError) as exc:
        logger.warning(
            "redis_connection_failed",
            url=_redact(settings.redis_url),
            error=str(exc),
        )
        await client.aclose()
        msg = f"Cannot connect to Redis at {_redact(settings.redis_url)}: {exc}"
        raise TransportError(msg) from exc

    logger.info("redis_connected", url=_redact(settings.redis_url))
    return client


async def check_redis_available(settings: Settings) -> bool:
    """Test if Redis is reachable. Returns False on failure."""
    try:
        client = await create_redis_client(settings)
    except TransportError:
        return False
    await client.aclose()
    return True


def _redact(url: str) -> str:
    """Hide the password part of a redis:// URL."""
    scheme, sep, rest = url.partition("://")
    if not sep or "@" not in rest:
        return url
    credentials, _, host = rest.rpartition("@")
    user = credentials.partition(":")[0]
    return f"{scheme}://{user}:***@{host}" if user else f"{scheme}://***@{host}"
