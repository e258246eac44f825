"""
节日查询

公历 / 农历节日以 "月-日" 为键查表。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .lunar import month_days

if TYPE_CHECKING:
    from .converter import ConversionResult

SOLAR_FESTIVALS: dict[str, tuple[str, ...]] = {
    "1-1": ("元旦节",),
    "2-14": ("情人节",),
    "3-8": ("妇女节",),
    "3-12": ("植树节",),
    "4-1": ("愚人节",),
    "5-1": ("劳动节",),
    "5-4": ("青年节",),
    "5-12": ("护士节",),
    "6-1": ("儿童节",),
    "7-1": ("建党节",),
    "8-1": ("建军节",),
    "9-10": ("教师节",),
    "10-1": ("国庆节",),
    "12-24": ("平安夜",),
    "12-25": ("圣诞节",),
}

LUNAR_FESTIVALS: dict[str, tuple[str, ...]] = {
    "1-1": ("春节",),
    "1-15": ("元宵节",),
    "2-2": ("龙抬头",),
    "5-5": ("端午节",),
    "7-7": ("七夕节",),
    "7-15": ("中元节",),
    "8-15": ("中秋节",),
    "9-9": ("重阳节",),
    "10-1": ("寒衣节",),
    "10-15": ("下元节",),
    "12-8": ("腊八节",),
    "12-23": ("北方小年",),
    "12-24": ("南方小年",),
    "12-30": ("除夕",),
}


def festival_key(month: int, day: int) -> str:
    return f"{month}-{day}"


def solar_festivals(month: int, day: int) -> list[str]:
    """返回公历节日列表，没有则为空列表"""
    return list(SOLAR_FESTIVALS.get(festival_key(month, day), ()))


def lunar_festivals(year: int, month: int, day: int, is_leap: bool = False) -> list[str]:
    """
    返回农历节日列表，没有则为空列表。

    节日不过闰月。腊月是小月时，廿九即除夕，按 "12-30" 查表；
    闰腊月在 1900-2100 之间不出现（仅 1574 年有），这里不处理。
    """
    if is_leap:
        return []
    key = festival_key(month, day)
    if month == 12 and day == 29 and month_days(year, 12) == 29:
        key = "12-30"
    return list(LUNAR_FESTIVALS.get(key, ()))


def special_day(result: ConversionResult) -> Optional[str]:
    """农历节日优先，其次公历节日，再次节气，都没有返回 None"""
    if result.lunar_festivals:
        return result.lunar_festivals[0]
    if result.festivals:
        return result.festivals[0]
    return result.term
