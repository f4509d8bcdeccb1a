"""Shared constants and sentinels for flex-cache."""

from __future__ import annotations

import enum
import math
from typing import Final


class _Undefined(enum.Enum):
    """Marker type for a value that was never provided."""

    TOKEN = 0

    def __repr__(self) -> str:
        return "UNDEFINED"


# Passing this as a value is always rejected; None is a valid value (JSON null)
UNDEFINED: Final = _Undefined.TOKEN

# TTL meaning "never expire"
INFINITE_TTL: Final[float] = math.inf

# Store acknowledgement for an accepted write
OK_STATUS: Final = "OK"

MS_PER_SECOND: Final = 1000
