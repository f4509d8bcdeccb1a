"""Application settings using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central configuration for flex-cache."""

    model_config = SettingsConfigDict(env_prefix="FC_", env_file=".env")

    # --- Redis ---
    redis_url: str = Field(
        default="redis://localhost:6379/0",
        description="Redis connection URL",
    )
    redis_socket_timeout_seconds: float | None = Field(
        default=5.0,
        description="Socket timeout for Redis commands (None disables it)",
    )
    redis_decode_responses: bool = Field(
        default=True,
        description="Return str instead of bytes from Redis",
    )

    # --- Cache ---
    cache_variant: Literal["simple", "flex"] = Field(
        default="flex",
        description="'flex' for conditional writes, 'simple' for plain overwrite",
    )
    default_ttl_ms: int | None = Field(
        default=None,
        description="Default TTL in milliseconds for CLI writes (None = never expire)",
    )

    # --- Logging ---
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    log_format: Literal["console", "json"] = Field(
        default="console",
        description="Log renderer: 'console' for humans, 'json' for aggregators",
    )

    @model_validator(mode="after")
    def validate_default_ttl(self) -> Settings:
        """Reject a non-positive default TTL."""
        if self.default_ttl_ms is not None and self.default_ttl_ms <= 0:
            msg = "default_ttl_ms must be positive"
            raise ValueError(msg)
        return self
