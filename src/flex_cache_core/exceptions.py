"""Custom exception hierarchy for flex-cache."""

from __future__ import annotations


class FlexCacheError(Exception):
    """Base exception for all flex-cache errors."""


class ValidationError(FlexCacheError, ValueError):
    """Raised when a caller violates a precondition (missing value, non-positive TTL)."""


class DecodeError(FlexCacheError, ValueError):
    """Raised when a value cannot be encoded to or decoded from its JSON payload."""


class WriteRejectedError(FlexCacheError):
    """Raised when the store does not acknowledge a write with an OK status."""


class TransportError(FlexCacheError):
    """Raised when the store is unreachable while establishing a connection."""
