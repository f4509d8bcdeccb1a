"""Tests for Settings configuration."""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from flex_cache_core.config.settings import Settings


@pytest.mark.unit
class TestSettings:
    """Test Settings validation and defaults."""

    def test_default_settings(self) -> None:
        """Settings loads with no environment and correct defaults."""
        with patch.dict(os.environ, {}, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.redis_url == "redis://localhost:6379/0"
        assert s.cache_variant == "flex"
        assert s.default_ttl_ms is None
        assert s.redis_decode_responses is True
        assert s.log_format == "console"

    def test_env_prefix(self) -> None:
        """FC_-prefixed variables override defaults."""
        env = {
            "FC_REDIS_URL": "redis://cache:6380/2",
            "FC_CACHE_VARIANT": "simple",
            "FC_DEFAULT_TTL_MS": "60000",
            "FC_LOG_FORMAT": "json",
        }
        with patch.dict(os.environ, env, clear=True):
            s = Settings(_env_file=None)  # type: ignore[call-arg]
        assert s.redis_url == "redis://cache:6380/2"
        assert s.cache_variant == "simple"
        assert s.default_ttl_ms == 60000
        assert s.log_format == "json"

    def test_unknown_variant_raises(self) -> None:
        """Only 'simple' and 'flex' are accepted."""
        with patch.dict(os.environ, {"FC_CACHE_VARIANT": "memcached"}, clear=True):
            with pytest.raises(ValidationError):
                Settings(_env_file=None)  # type: ignore[call-arg]

    @pytest.mark.parametrize("ttl", ["0", "-1"])
    def test_non_positive_default_ttl_raises(self, ttl: str) -> None:
        """default_ttl_ms must be positive when set."""
        with patch.dict(os.environ, {"FC_DEFAULT_TTL_MS": ttl}, clear=True):
            with pytest.raises(ValidationError, match="default_ttl_ms must be positive"):
                Settings(_env_file=None)  # type: ignore[call-arg]
