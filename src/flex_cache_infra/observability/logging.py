"""structlog setup for the CLI and the Redis client factory."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

if TYPE_CHECKING:
    from flex_cache_core.config.settings import Settings

_HANDLER_NAME = "flex_cache"
_CHATTY_LOGGERS = ("redis", "asyncio")


def configure_logging(settings: Settings) -> None:
    """Route structlog and stdlib records through one stderr handler.

    Output is JSON when ``settings.log_format == "json"`` (exceptions as
    structured tracebacks), otherwise a colourless console rendering so CLI
    output stays readable when piped.
    """
    level = _resolve_level(settings.log_level)
    pre_chain = _pre_chain()

    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *_render_chain(settings.log_format),
            ],
            foreign_pre_chain=pre_chain,
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    # Client libraries only surface warnings and above
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def bind_command_context(command: str, key: str | None = None) -> None:
    """Bind the CLI command (and key, if any) to subsequent log entries."""
    context = {"command": command}
    if key is not None:
        context["key"] = key
    bind_contextvars(**context)


def clear_command_context() -> None:
    """Clear all bound context variables."""
    clear_contextvars()


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]


def _render_chain(log_format: str) -> list[structlog.types.Processor]:
    """Final processors turning an event dict into a line of text."""
    if log_format == "json":
        return [structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=False)]


def _resolve_level(level_name: str) -> int:
    """Convert a level name to its logging constant, defaulting to INFO."""
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO
