"""
Разбор параметров запроса (query string и JSON-тело).
"""

import math
from numbers import Real
from typing import Any, Optional


def parse_id(raw: Any) -> Optional[int]:
    """Положительный целый ID или None (пусто, мусор, 0, отрицательные)."""
    if raw is None or isinstance(raw, bool):
        return None
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if value > 0 else None


def parse_flag(raw: Any) -> bool:
    return str(raw or "").strip().lower() in ("1", "true")


def is_finite_number(value: Any) -> bool:
    """Число из JSON (int/float, не bool), не NaN и не бесконечность."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return math.isfinite(value)


def parse_positive_float(raw: Any) -> Optional[float]:
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) and value > 0 else None
