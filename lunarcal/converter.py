"""
公历 ⇄ 农历转换

以 1900-01-31（农历 1900 年正月初一）为基准日：
- 公历转农历：求出与基准日相差的天数，再依次扣除整年、整月的天数
- 农历转公历：累加整年、整月天数得到偏移，换算为公历后再转回农历，
  保证两个方向的结果一致
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Any, Optional
from zoneinfo import ZoneInfo

from .astro import to_astro
from .errors import InvalidArgumentError, OutOfRangeError
from .festival import lunar_festivals, solar_festivals
from .lunar import (
    china_day,
    china_month,
    check_year,
    gan_zhi,
    gan_zhi_year,
    leap_days,
    leap_month,
    month_days,
    month_sequence,
    year_days,
)
from .solar import animal_of_year, solar_days, solar_term_day
from .tables import CHINESE_NUMERALS, MAX_YEAR, MIN_YEAR, SOLAR_TERM_NAMES

logger = logging.getLogger(__name__)

# 农历 1900 年正月初一
BASE_DATE = date(1900, 1, 31)
# 日柱基准：1900-01-01 为甲戌日，距甲子偏移 10
GANZHI_DAY_BASE = date(1900, 1, 1)
MIN_DATE = BASE_DATE
MAX_DATE = date(2100, 12, 31)


@dataclass(frozen=True)
class ConversionResult:
    """一次转换的完整结果，创建后不可变"""

    solar_date: str          # YYYY-MM-DD
    s_year: int
    s_month: int
    s_day: int
    lunar_date: str          # YYYY-MM-DD（不区分闰月）
    l_year: int
    l_month: int
    l_day: int
    weekday: int             # 1-7，周一为 1
    weekday_cn: str          # 星期一 ~ 星期日
    gz_year: str
    gz_month: str
    gz_day: str
    animal: str
    month_cn: str            # 闰月带 "闰" 前缀
    day_cn: str
    is_today: bool
    is_leap: bool
    is_term: bool
    term: Optional[str]
    astro: str
    festivals: tuple[str, ...] = field(default_factory=tuple)
    lunar_festivals: tuple[str, ...] = field(default_factory=tuple)

    def to_date(self) -> date:
        return date(self.s_year, self.s_month, self.s_day)

    def to_dict(self) -> dict[str, Any]:
        """按驼峰字段名输出，便于 JSON 序列化"""
        return {
            "solarDate": self.solar_date,
            "sYear": self.s_year,
            "sMonth": self.s_month,
            "sDay": self.s_day,
            "lunarDate": self.lunar_date,
            "lYear": self.l_year,
            "lMonth": self.l_month,
            "lDay": self.l_day,
            "weekday": self.weekday,
            "weekdayCn": self.weekday_cn,
            "gzYear": self.gz_year,
            "gzMonth": self.gz_month,
            "gzDay": self.gz_day,
            "animal": self.animal,
            "monthCn": self.month_cn,
            "dayCn": self.day_cn,
            "isToday": self.is_today,
            "isLeap": self.is_leap,
            "isTerm": self.is_term,
            "term": self.term,
            "astro": self.astro,
            "festivals": list(self.festivals),
            "lunarFestivals": list(self.lunar_festivals),
        }


def _today(tz: Optional[ZoneInfo] = None) -> date:
    if tz is None:
        return date.today()
    return datetime.now(tz).date()


def _check_solar(year: int, month: int, day: int) -> date:
    check_year(year)
    if month < 1 or month > 12:
        raise OutOfRangeError("month", month, "[1, 12]")
    max_day = solar_days(year, month)
    if day < 1 or day > max_day:
        raise OutOfRangeError("day", day, f"[1, {max_day}]")
    target = date(year, month, day)
    if target < MIN_DATE:
        raise OutOfRangeError("date", target.isoformat(), f"[{MIN_DATE}, {MAX_DATE}]")
    return target


def _locate_lunar(offset: int) -> tuple[int, int, int, bool]:
    """把距基准日的天数拆成 (农历年, 月, 日, 是否闰月)"""
    lunar_year = MIN_YEAR
    while lunar_year < MAX_YEAR:
        days = year_days(lunar_year)
        if offset < days:
            break
        offset -= days
        lunar_year += 1

    for entry in month_sequence(lunar_year):
        if offset < entry.days:
            return lunar_year, entry.month, offset + 1, entry.is_leap
        offset -= entry.days

    # 公历上限 2100-12-31 落在农历 2100 年腊月内，走不到这里
    raise RuntimeError(f"农历年 {lunar_year} 的天数不足，数据表可能损坏")


def _month_gan_zhi(year: int, month: int, day: int) -> str:
    """月柱以当月第一个节气（节）为界"""
    offset = (year - MIN_YEAR) * 12 + month + 11
    if day >= solar_term_day(year, month * 2 - 1):
        offset += 1
    return gan_zhi(offset)


def _term_of(year: int, month: int, day: int) -> Optional[str]:
    for n in (month * 2 - 1, month * 2):
        if solar_term_day(year, n) == day:
            return SOLAR_TERM_NAMES[n - 1]
    return None


def solar_to_lunar(
    year: Optional[int] = None,
    month: Optional[int] = None,
    day: Optional[int] = None,
    *,
    tz: Optional[ZoneInfo] = None,
) -> ConversionResult:
    """
    公历转农历。

    Args:
        year, month, day: 公历日期，范围 1900-01-31 ~ 2100-12-31；
            三者都省略时取今天
        tz: 判断"今天"所用的时区，默认本机时区

    Returns:
        ConversionResult

    Raises:
        OutOfRangeError: 日期超出范围
        InvalidArgumentError: 只传了部分日期参数
    """
    today = _today(tz)
    parts = (year, month, day)
    if all(p is None for p in parts):
        year, month, day = today.year, today.month, today.day
    elif any(p is None for p in parts):
        raise InvalidArgumentError("year、month、day 需要同时给出，或全部省略表示今天")

    target = _check_solar(year, month, day)
    l_year, l_month, l_day, is_leap = _locate_lunar((target - BASE_DATE).days)

    weekday = target.isoweekday()
    term = _term_of(year, month, day)

    result = ConversionResult(
        solar_date=target.isoformat(),
        s_year=year,
        s_month=month,
        s_day=day,
        lunar_date=f"{l_year:04d}-{l_month:02d}-{l_day:02d}",
        l_year=l_year,
        l_month=l_month,
        l_day=l_day,
        weekday=weekday,
        weekday_cn=f"星期{CHINESE_NUMERALS[weekday % 7]}",
        gz_year=gan_zhi_year(l_year),
        gz_month=_month_gan_zhi(year, month, day),
        gz_day=gan_zhi((target - GANZHI_DAY_BASE).days + 10),
        animal=animal_of_year(l_year),
        month_cn=("闰" if is_leap else "") + china_month(l_month),
        day_cn=china_day(l_day),
        is_today=target == today,
        is_leap=is_leap,
        is_term=term is not None,
        term=term,
        astro=to_astro(month, day),
        festivals=tuple(solar_festivals(month, day)),
        lunar_festivals=tuple(lunar_festivals(l_year, l_month, l_day, is_leap)),
    )
    logger.debug(f"公历 {result.solar_date} -> 农历 {result.month_cn}{result.day_cn} ({l_year})")
    return result


def lunar_to_solar(
    year: int,
    month: int,
    day: int,
    is_leap_month: bool = False,
    *,
    tz: Optional[ZoneInfo] = None,
) -> ConversionResult:
    """
    农历转公历。

    Args:
        year, month, day: 农历日期，范围 1900 年正月初一 ~ 2100 年腊月初一
        is_leap_month: 是否为闰月
        tz: 判断"今天"所用的时区

    Raises:
        OutOfRangeError: 年、月、日超出范围
        InvalidArgumentError: 该年没有对应闰月，或日数超过当月天数
    """
    check_year(year)
    if month < 1 or month > 12:
        raise OutOfRangeError("month", month, "[1, 12]")
    if day < 1 or day > 30:
        raise OutOfRangeError("day", day, "[1, 30]")
    if year == MAX_YEAR and month == 12 and day > 1:
        raise OutOfRangeError("day", day, f"[1, 1]（农历 {MAX_YEAR} 年腊月）")

    is_leap_month = bool(is_leap_month)
    actual_leap = leap_month(year)
    if is_leap_month and actual_leap != month:
        if actual_leap == 0:
            raise InvalidArgumentError(f"农历 {year} 年没有闰月，month={month} 不能是闰月")
        raise InvalidArgumentError(
            f"农历 {year} 年闰 {actual_leap} 月，month={month} 不是闰月"
        )

    max_day = leap_days(year) if is_leap_month else month_days(year, month)
    if day > max_day:
        label = "闰" if is_leap_month else ""
        raise InvalidArgumentError(
            f"day={day} 超过农历 {year} 年{label}{month} 月的天数 {max_day}"
        )

    offset = sum(year_days(y) for y in range(MIN_YEAR, year))
    for entry in month_sequence(year):
        if entry.month == month and entry.is_leap == is_leap_month:
            break
        offset += entry.days
    offset += day - 1

    target = BASE_DATE + timedelta(days=offset)
    logger.debug(f"农历 {year}-{month}-{day} (闰月={is_leap_month}) -> 公历 {target}")
    return solar_to_lunar(target.year, target.month, target.day, tz=tz)
