from __future__ import annotations

import math
from typing import Any


def to_number(value: Any) -> float | None:
    """Float form of ``value``, or None when it is missing or not finite."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return None
    return number if math.isfinite(number) else None
