"""
农历年解码与干支计算

按位读取 LUNAR_DATA 中的年编码：
- 全年天数、闰月月份与天数、各月大小
- 按闰月插入后的完整月序列
- 干支、农历月/日的中文写法
"""

from __future__ import annotations

from functools import lru_cache
from typing import NamedTuple

from .errors import OutOfRangeError
from .tables import (
    CHINESE_NUMERALS,
    DAY_PREFIXES,
    EARTHLY_BRANCHES,
    HEAVENLY_STEMS,
    LUNAR_DATA,
    LUNAR_MONTH_NAMES,
    MAX_YEAR,
    MIN_YEAR,
)


class LunarMonth(NamedTuple):
    """农历年中的一个月"""
    month: int
    is_leap: bool
    days: int


def check_year(year: int, name: str = "year") -> None:
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(name, year, f"[{MIN_YEAR}, {MAX_YEAR}]")


def _year_data(year: int) -> int:
    check_year(year)
    return LUNAR_DATA[year - MIN_YEAR]


def leap_month(year: int) -> int:
    """返回闰月月份，无闰月返回 0"""
    return _year_data(year) & 0xF


def leap_days(year: int) -> int:
    """返回闰月天数（0、29、30）"""
    if leap_month(year) == 0:
        return 0
    return 30 if (_year_data(year) & 0x10000) else 29


def month_days(year: int, month: int) -> int:
    """返回非闰月的天数（29 或 30），闰月请使用 leap_days"""
    if month < 1 or month > 12:
        raise OutOfRangeError("month", month, "[1, 12]")
    return 30 if (_year_data(year) & (0x10000 >> month)) else 29


@lru_cache(maxsize=256)
def year_days(year: int) -> int:
    """返回农历年全年天数"""
    days = 348
    bit = 0x8000
    data = _year_data(year)
    for _ in range(12):
        if data & bit:
            days += 1
        bit >>= 1
    return days + leap_days(year)


@lru_cache(maxsize=256)
def month_sequence(year: int) -> tuple[LunarMonth, ...]:
    """
    返回该年按时间顺序排列的全部月份（12 或 13 个）。

    闰月紧跟在同序号的普通月之后。
    """
    leap = leap_month(year)
    months: list[LunarMonth] = []
    for month in range(1, 13):
        months.append(LunarMonth(month, False, month_days(year, month)))
        if month == leap:
            months.append(LunarMonth(month, True, leap_days(year)))
    return tuple(months)


def gan_zhi(offset: int) -> str:
    """按相对甲子的偏移量返回干支"""
    return HEAVENLY_STEMS[offset % 10] + EARTHLY_BRANCHES[offset % 12]


def gan_zhi_year(year: int) -> str:
    """农历年份转干支纪年，1984 为甲子年"""
    return gan_zhi(year - 4)


def china_month(month: int) -> str:
    """农历月份的中文写法，如 12 -> 腊月"""
    if month < 1 or month > 12:
        raise OutOfRangeError("month", month, "[1, 12]")
    return f"{LUNAR_MONTH_NAMES[month - 1]}月"


def china_day(day: int) -> str:
    """农历日期的中文写法，如 21 -> 廿一"""
    if day < 1 or day > 30:
        raise OutOfRangeError("day", day, "[1, 30]")
    if day == 10:
        return "初十"
    if day == 20:
        return "二十"
    if day == 30:
        return "三十"
    return DAY_PREFIXES[day // 10] + CHINESE_NUMERALS[day % 10]
