"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, Literal, cast

import structlog
import typer
from rich.console import Console
from rich.markup import escape

from flex_cache_core.codec import decode_value
from flex_cache_core.config.settings import Settings
from flex_cache_core.constants import INFINITE_TTL
from flex_cache_core.exceptions import FlexCacheError
from flex_cache_core.interfaces.cache import CacheController, FlexCache
from flex_cache_infra.client import check_redis_available, create_redis_client
from flex_cache_infra.factories import create_cache
from flex_cache_infra.observability import (
    bind_command_context,
    clear_command_context,
    configure_logging,
)

app = typer.Typer(
    name="flex-cache",
    help="JSON key-value cache on top of Redis",
)
console = Console()
logger = structlog.get_logger()


def _variant_option() -> Any:  # noqa: ANN401
    return typer.Option(None, "--variant", help="Cache variant: simple or flex")


def _verbose_option() -> Any:  # noqa: ANN401
    return typer.Option(False, "-v", "--verbose", help="Enable debug logging")


def _ttl_option() -> Any:  # noqa: ANN401
    return typer.Option(
        None, "--ttl", help="TTL in milliseconds (default: settings, else never expire)"
    )


@app.command()
def get(
    key: str = typer.Argument(..., help="Cache key"),
    variant: str | None = _variant_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Print the value stored under KEY as JSON.

    Prints (nil) both for a missing key and for a stored JSON null.
    """
    settings = _load_settings(variant, verbose)

    async def _get(cache: CacheController) -> Any:  # noqa: ANN401
        return await cache.get(key)

    found, value = _execute(settings, "get", key, _get)
    if not found:
        console.print("[dim](nil)[/dim]")
        return
    console.print_json(data=value)


@app.command("set")
def set_(
    key: str = typer.Argument(..., help="Cache key"),
    value: str = typer.Argument(..., help="JSON-encoded value"),
    ttl: int | None = _ttl_option(),
    variant: str | None = _variant_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Store VALUE under KEY (only if absent for the flex variant)."""
    _write_command("set", key, value, ttl, variant, verbose)


@app.command()
def update(
    key: str = typer.Argument(..., help="Cache key"),
    value: str = typer.Argument(..., help="JSON-encoded value"),
    ttl: int | None = _ttl_option(),
    variant: str | None = _variant_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Overwrite VALUE under KEY only if it already exists (flex only)."""
    _write_command("update", key, value, ttl, variant, verbose)


@app.command("set-force")
def set_force(
    key: str = typer.Argument(..., help="Cache key"),
    value: str = typer.Argument(..., help="JSON-encoded value"),
    ttl: int | None = _ttl_option(),
    variant: str | None = _variant_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Store VALUE under KEY whether or not it exists (flex only)."""
    _write_command("set_force", key, value, ttl, variant, verbose)


@app.command()
def delete(
    key: str = typer.Argument(..., help="Cache key"),
    variant: str | None = _variant_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """Delete KEY."""
    settings = _load_settings(variant, verbose)

    async def _delete(cache: CacheController) -> None:
        await cache.delete(key)

    _execute(settings, "delete", key, _delete)
    console.print(f"[green]Deleted[/green] {escape(key)}")


@app.command()
def ping(verbose: bool = _verbose_option()) -> None:
    """Check that Redis is reachable."""
    settings = _load_settings(None, verbose)
    if asyncio.run(check_redis_available(settings)):
        console.print("[bold green]PONG[/bold green]")
        return
    console.print(f"[red]Error:[/red] Redis unreachable at {settings.redis_url}")
    raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Show version."""
    console.print("flex-cache v0.1.0")


def _load_settings(variant: str | None, verbose: bool) -> Settings:
    """Build settings, apply CLI overrides and configure logging."""
    settings = Settings()
    if variant is not None:
        if variant not in ("simple", "flex"):
            console.print(f"[red]Error:[/red] Unknown variant {variant!r}")
            raise typer.Exit(code=1)
        settings.cache_variant = variant  # type: ignore[assignment]
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _write_command(
    operation: Literal["set", "update", "set_force"],
    key: str,
    raw_value: str,
    ttl: int | None,
    variant: str | None,
    verbose: bool,
) -> None:
    """Shared body of the set / update / set-force commands."""
    settings = _load_settings(variant, verbose)
    if operation != "set" and settings.cache_variant != "flex":
        console.print(f"[red]Error:[/red] {operation} requires the flex cache variant")
        raise typer.Exit(code=1)

    try:
        value = decode_value(raw_value)
    except FlexCacheError as exc:
        console.print(f"[red]Error:[/red] VALUE must be JSON: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if ttl is None:
        ttl = settings.default_ttl_ms
    effective_ttl = INFINITE_TTL if ttl is None else ttl

    async def _write(cache: CacheController) -> None:
        if operation == "set":
            await cache.set(key, value, effective_ttl)
            return
        flex = cast(FlexCache, cache)
        write = flex.update if operation == "update" else flex.set_force
        await write(key, value, effective_ttl)

    _execute(settings, operation, key, _write)
    console.print(f"[green]OK[/green] {escape(key)}")


def _execute(
    settings: Settings,
    command: str,
    key: str,
    action: Callable[[CacheController], Awaitable[Any]],
) -> tuple[bool, Any]:
    """Run one cache action against a fresh connection.

    Returns ``(found, result)`` where ``found`` is False when the action
    returned None. Cache errors are reported and exit with code 1.
    """
    bind_command_context(command, key)
    try:
        result = asyncio.run(_run_action(settings, action))
    except FlexCacheError as exc:
        logger.debug("cache_command_failed", error_type=type(exc).__name__)
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc
    finally:
        clear_command_context()
    return result is not None, result


async def _run_action(
    settings: Settings,
    action: Callable[[CacheController], Awaitable[Any]],
) -> Any:  # noqa: ANN401
    """Connect, run the action on the configured cache variant, disconnect."""
    redis = await create_redis_client(settings)
    try:
        cache = create_cache(settings, redis)
        result = await action(cache)
        logger.debug("cache_command_done", variant=settings.cache_variant)
        return result
    finally:
        await redis.aclose()


if __name__ == "__main__":
    app()
