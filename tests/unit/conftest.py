"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog

from tests.mocks.mock_settings import make_settings
from tests.mocks.mock_store import FakeRedisStore


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def fake_store() -> FakeRedisStore:
    """Return an empty in-memory store."""
    return FakeRedisStore()


@pytest.fixture
def mock_redis() -> MagicMock:
    """Return a mock redis.asyncio.Redis client replying like a healthy server."""
    mock = MagicMock()
    mock.get = AsyncMock(return_value='{"result":"get"}')
    mock.set = AsyncMock(return_value=True)
    mock.setex = AsyncMock(return_value=True)
    mock.delete = AsyncMock(return_value=1)
    return mock


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Save and restore root logger handlers and structlog config.

    CLI and logging tests call configure_logging() which replaces root
    logger handlers.
    """
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers = original_handlers
    root.level = original_level
    structlog.reset_defaults()
