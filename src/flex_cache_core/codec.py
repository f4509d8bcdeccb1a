"""JSON payload encoding for cached values."""

from __future__ import annotations

import json
from typing import Any

from flex_cache_core.exceptions import DecodeError


def encode_value(value: Any) -> str:  # noqa: ANN401
    """Serialize a value to compact JSON text.

    Raises:
        DecodeError: If the value is not JSON-representable (unsupported
            type, NaN/Infinity, circular reference).
    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot encode value of type {type(value).__name__}: {exc}"
        raise DecodeError(msg) from exc


def decode_value(raw: str | bytes) -> Any:  # noqa: ANN401
    """Parse JSON text (or UTF-8 bytes) back into a Python value.

    Raises:
        DecodeError: If the payload is not valid JSON.
    """
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        return json.loads(text, parse_constant=_reject_constant)
    except ValueError as exc:
        msg = f"Cannot decode cached value: {exc}"
        raise DecodeError(msg) from exc


def _reject_constant(name: str) -> Any:  # noqa: ANN401
    """Refuse the non-standard NaN/Infinity literals json accepts by default."""
    msg = f"Invalid JSON constant {name!r}"
    raise ValueError(msg)
