"""
Нормализация значений ячеек Excel.

Ячейки листа обследования приходят в разном виде: числа (доля суток),
значения datetime/time/timedelta от openpyxl, строки «3 min 47 sec»,
«1:02:03», «25:30», «227». Здесь всё приводится к каноническим скалярам:
время — строка HH:MM:SS, размеры — float.
"""

import math
import re
from datetime import datetime, time, timedelta
from numbers import Real
from typing import Any, Optional

SECONDS_PER_DAY = 24 * 60 * 60

_UNITS_RE = re.compile(r"hour|min|sec|\d\s*[hms]\b", re.IGNORECASE)
_HOURS_RE = re.compile(r"(\d+)\s*h", re.IGNORECASE)
_MINUTES_RE = re.compile(r"(\d+)\s*m", re.IGNORECASE)
_SECONDS_RE = re.compile(r"(\d+)\s*s", re.IGNORECASE)
_HMS_RE = re.compile(r"^\d{1,2}:\d{2}:\d{2}$")
_TWO_PART_RE = re.compile(r"^(\d{1,2}):(\d{2})$")
_INT_RE = re.compile(r"^\d+$")


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_hms(total_seconds: int) -> str:
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def time_to_seconds(value: str) -> int:
    """'HH:MM:SS' → число секунд."""
    hours, minutes, seconds = (int(part) for part in value.split(":"))
    return hours * 3600 + minutes * 60 + seconds


def is_blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def cell_text(value: Any) -> Optional[str]:
    """
    Текст ячейки без пробелов по краям или None для пустой.

    Целые float из Excel выводятся без «.0»; ноль сохраняется как «0».
    """
    if value is None:
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    text = str(value).strip()
    return text or None


def to_number(value: Any) -> Optional[float]:
    """Число из ячейки: пусто → None, не число или не конечное → None."""
    if is_blank(value) or isinstance(value, bool):
        return None
    try:
        number = float(value) if isinstance(value, Real) else float(str(value).strip())
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def _parse_unit_text(text: str) -> str:
    parts = []
    for pattern in (_HOURS_RE, _MINUTES_RE, _SECONDS_RE):
        match = pattern.search(text)
        parts.append(int(match.group(1)) if match else 0)
    hours, minutes, seconds = parts
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


def parse_time(value: Any) -> Optional[str]:
    """
    Значение ячейки → 'HH:MM:SS' или None.

    - число: доля суток (целые сутки отбрасываются);
    - datetime / time: время суток; timedelta: длительность целиком;
    - текст с единицами ('1h 2m', '3 min 47 sec'): каждая часть отдельно;
    - 'H:MM:SS' / 'HH:MM:SS': дополняется нулями;
    - 'A:B': при A > 23 это MM:SS, иначе HH:MM (эвристика, неоднозначно);
    - целое в строке: количество секунд;
    - всё остальное: None.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        value = value.time()

    if isinstance(value, time):
        seconds = value.hour * 3600 + value.minute * 60 + value.second
        return format_hms(seconds + round_half_up(value.microsecond / 1_000_000))

    if isinstance(value, timedelta):
        seconds = round_half_up(value.total_seconds())
        return format_hms(seconds) if seconds >= 0 else None

    if isinstance(value, Real):
        if not math.isfinite(value):
            return None
        fraction = value % 1
        return format_hms(round_half_up(fraction * SECONDS_PER_DAY))

    text = str(value).strip()
    if not text:
        return None

    if _UNITS_RE.search(text):
        return _parse_unit_text(text)

    if _HMS_RE.match(text):
        return ":".join(f"{int(part):02d}" for part in text.split(":"))

    two_part = _TWO_PART_RE.match(text)
    if two_part:
        first, second = two_part.groups()
        if int(first) > 23:
            return f"00:{first.zfill(2)}:{second}"
        return f"{first.zfill(2)}:{second}:00"

    if _INT_RE.match(text):
        return format_hms(int(text))

    return None
