"""公历月份天数、节气表解码与生肖。"""

from __future__ import annotations

from datetime import date

from .errors import OutOfRangeError
from .lunar import check_year
from .tables import (
    ANIMALS,
    MIN_YEAR,
    SOLAR_MONTH_DAYS,
    SOLAR_TERM_NAMES,
    SOLAR_TERM_TABLE,
)


def _decode_term_row(row: str) -> tuple[int, ...]:
    """把一年的节气编码解成 24 个日期（日）"""
    if len(row) != 30:
        raise RuntimeError(f"节气表数据损坏: {row!r}")
    days: list[int] = []
    for index in range(0, 30, 5):
        digits = str(int(row[index:index + 5], 16))
        if len(digits) != 6:
            raise RuntimeError(f"节气表数据损坏: {row!r}")
        days.extend(
            (int(digits[0]), int(digits[1:3]), int(digits[3]), int(digits[4:6]))
        )
    return tuple(days)


# 导入时一次性解码
SOLAR_TERM_DAYS: tuple[tuple[int, ...], ...] = tuple(
    _decode_term_row(row) for row in SOLAR_TERM_TABLE
)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def solar_days(year: int, month: int) -> int:
    """返回公历某年某月的天数"""
    if month < 1 or month > 12:
        raise OutOfRangeError("month", month, "[1, 12]")
    if month == 2:
        return 29 if is_leap_year(year) else 28
    return SOLAR_MONTH_DAYS[month - 1]


def solar_term_day(year: int, n: int) -> int:
    """
    返回公历 year 年第 n 个节气所在的日。

    Args:
        year: 公历年（1900-2100）
        n: 节气序号（1-24），1 为小寒

    Returns:
        日（1-31），如 solar_term_day(1987, 3) == 4 即 1987 年 2 月 4 日立春
    """
    check_year(year)
    if n < 1 or n > 24:
        raise OutOfRangeError("n", n, "[1, 24]")
    return SOLAR_TERM_DAYS[year - MIN_YEAR][n - 1]


def solar_terms(year: int) -> list[tuple[str, date]]:
    """返回该年 24 个节气的名称与公历日期"""
    return [
        (name, date(year, (i // 2) + 1, solar_term_day(year, i + 1)))
        for i, name in enumerate(SOLAR_TERM_NAMES)
    ]


def animal_of_year(year: int) -> str:
    """年份转生肖（以正月初一为界，不按立春）"""
    return ANIMALS[(year - 4) % 12]
