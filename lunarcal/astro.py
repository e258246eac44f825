"""按公历月、日判断星座。"""

from __future__ import annotations

from .errors import OutOfRangeError
from .tables import ASTRO_NAMES

# 各月可能的最大天数（二月按 29 天）
_MAX_DAYS = (31, 29, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# 每月换星座的日子
_BOUNDARIES = (20, 19, 21, 21, 21, 22, 23, 23, 23, 23, 22, 22)


def to_astro(month: int, day: int) -> str:
    """返回星座名，如 to_astro(1, 20) == '水瓶座'"""
    if month < 1 or month > 12:
        raise OutOfRangeError("month", month, "[1, 12]")
    max_day = _MAX_DAYS[month - 1]
    if day < 1 or day > max_day:
        raise OutOfRangeError("day", day, f"[1, {max_day}]（{month} 月）")
    index = month - (1 if day < _BOUNDARIES[month - 1] else 0)
    return f"{ASTRO_NAMES[index]}座"
