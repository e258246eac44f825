"""
Converter 模块单元测试

测试公历 ⇄ 农历转换结果、边界与错误处理。
"""

from __future__ import annotations

import dataclasses
from collections import Counter
from datetime import date
from zoneinfo import ZoneInfo

import pytest

from lunarcal import converter
from lunarcal.converter import ConversionResult, lunar_to_solar, solar_to_lunar
from lunarcal.errors import InvalidArgumentError, OutOfRangeError


@pytest.mark.unit
class TestSolarToLunar:
    """测试公历转农历。"""

    def test_solar_fields(self, spring_festival_2023: ConversionResult) -> None:
        """测试公历字段。"""
        result = spring_festival_2023
        assert result.solar_date == "2023-01-22"
        assert result.s_year == 2023
        assert result.s_month == 1
        assert result.s_day == 22

    def test_lunar_fields(self, spring_festival_2023: ConversionResult) -> None:
        """测试农历字段。"""
        result = spring_festival_2023
        assert result.lunar_date == "2023-01-01"
        assert result.l_year == 2023
        assert result.l_month == 1
        assert result.l_day == 1
        assert result.is_leap is False

    def test_weekday(self, spring_festival_2023: ConversionResult) -> None:
        """测试星期（周日为 7）。"""
        assert spring_festival_2023.weekday == 7
        assert spring_festival_2023.weekday_cn == "星期日"

    def test_gan_zhi_and_animal(self, spring_festival_2023: ConversionResult) -> None:
        """测试干支和生肖。"""
        result = spring_festival_2023
        assert result.gz_year == "癸卯"
        assert result.gz_month == "癸丑"
        assert result.gz_day == "庚辰"
        assert result.animal == "兔"

    def test_chinese_names(self, spring_festival_2023: ConversionResult) -> None:
        """测试中文月日。"""
        assert spring_festival_2023.month_cn == "正月"
        assert spring_festival_2023.day_cn == "初一"

    def test_extra_fields(self, spring_festival_2023: ConversionResult) -> None:
        """测试星座与节日。"""
        assert spring_festival_2023.astro == "水瓶座"
        assert spring_festival_2023.lunar_festivals == ("春节",)
        assert spring_festival_2023.festivals == ()

    def test_known_day_pillars(self) -> None:
        """测试已知日柱。"""
        assert solar_to_lunar(2000, 1, 1).gz_day == "戊午"
        assert solar_to_lunar(1900, 1, 31).gz_day == "甲辰"

    def test_lunar_new_year_eve(self) -> None:
        """测试跨年前一天。"""
        result = solar_to_lunar(2024, 2, 9)
        assert result.lunar_date == "2023-12-30"
        assert result.gz_year == "癸卯"
        assert result.lunar_festivals == ("除夕",)

    def test_result_is_frozen(self, spring_festival_2023: ConversionResult) -> None:
        """测试结果不可修改。"""
        with pytest.raises(dataclasses.FrozenInstanceError):
            spring_festival_2023.l_day = 2

    def test_to_date(self, spring_festival_2023: ConversionResult) -> None:
        """测试转换为 date。"""
        assert spring_festival_2023.to_date() == date(2023, 1, 22)


@pytest.mark.unit
class TestLeapMonthConversion:
    """测试闰月相关转换。"""

    def test_day_in_leap_month(self) -> None:
        """测试 2023-04-19 位于闰二月。"""
        result = solar_to_lunar(2023, 4, 19)
        assert result.is_leap is True
        assert result.l_month == 2
        assert result.l_day == 29
        assert result.month_cn == "闰二月"

    def test_first_day_of_leap_month(self) -> None:
        """测试闰月初一与前一天的边界。"""
        before = solar_to_lunar(2023, 3, 21)
        first = solar_to_lunar(2023, 3, 22)
        assert (before.l_month, before.l_day, before.is_leap) == (2, 30, False)
        assert (first.l_month, first.l_day, first.is_leap) == (2, 1, True)

    def test_month_after_leap(self) -> None:
        """测试闰月之后的普通月。"""
        result = solar_to_lunar(2023, 4, 20)
        assert (result.l_month, result.l_day, result.is_leap) == (3, 1, False)

    def test_no_festival_in_leap_month(self) -> None:
        """测试闰月不过节。"""
        result = lunar_to_solar(2025, 6, 1, True)
        assert result.solar_date == "2025-07-25"
        assert result.lunar_festivals == ()


@pytest.mark.unit
class TestPublishedCalendar:
    """测试与官方农历一致的日期。"""

    def test_mid_autumn_2033(self) -> None:
        """测试 2033 年中秋不落在闰月。"""
        result = solar_to_lunar(2033, 9, 8)
        assert (result.l_month, result.l_day, result.is_leap) == (8, 15, False)
        assert result.month_cn == "八月"
        assert result.lunar_festivals == ("中秋节",)

    def test_leap_eleventh_month_2033(self) -> None:
        """测试 2033 年冬至之后的闰冬月。"""
        winter = solar_to_lunar(2033, 12, 21)
        assert (winter.l_month, winter.l_day, winter.is_leap) == (11, 30, False)
        assert winter.term == "冬至"

        leap = solar_to_lunar(2033, 12, 22)
        assert (leap.l_month, leap.l_day, leap.is_leap) == (11, 1, True)
        assert leap.month_cn == "闰冬月"
        assert leap.day_cn == "初一"

        assert lunar_to_solar(2033, 11, 1, True).solar_date == "2033-12-22"
        assert lunar_to_solar(2033, 12, 1).solar_date == "2034-01-20"

    @pytest.mark.parametrize(
        "solar,lunar",
        [
            ((1996, 7, 16), (1996, 6, 1)),
            ((2057, 9, 28), (2057, 9, 1)),
            ((2060, 4, 30), (2060, 4, 1)),
        ],
    )
    def test_month_starts_on_new_moon(
        self, solar: tuple[int, int, int], lunar: tuple[int, int, int]
    ) -> None:
        """测试初一落在朔日所在的北京时间当天。"""
        result = solar_to_lunar(*solar)
        assert (result.l_year, result.l_month, result.l_day, result.is_leap) == (*lunar, False)


@pytest.mark.unit
class TestSolarTermFlag:
    """测试节气标记。"""

    def test_term_day(self) -> None:
        """测试夏至。"""
        result = solar_to_lunar(2023, 6, 21)
        assert result.is_term is True
        assert result.term == "夏至"

    def test_non_term_day(self, spring_festival_2023: ConversionResult) -> None:
        """测试非节气日。"""
        assert spring_festival_2023.is_term is False
        assert spring_festival_2023.term is None

    def test_month_pillar_changes_at_term(self) -> None:
        """测试月柱在节当天切换。"""
        assert solar_to_lunar(2023, 2, 3).gz_month == "癸丑"
        assert solar_to_lunar(2023, 2, 4).gz_month == "甲寅"


@pytest.mark.unit
class TestIsToday:
    """测试"今天"标记。"""

    def test_is_today(self, fixed_today: date) -> None:
        """测试当天。"""
        assert solar_to_lunar(2023, 1, 22).is_today is True
        assert solar_to_lunar(2022, 1, 22).is_today is False

    def test_default_is_today(self, fixed_today: date) -> None:
        """测试不传参数时取今天。"""
        result = solar_to_lunar()
        assert result.solar_date == "2023-01-22"
        assert result.is_today is True

    def test_real_today(self) -> None:
        """测试真实的今天。"""
        tz = ZoneInfo("Asia/Shanghai")
        today = converter._today(tz)
        result = solar_to_lunar(today.year, today.month, today.day, tz=tz)
        assert result.is_today is True

    def test_partial_arguments(self) -> None:
        """测试只传部分参数。"""
        with pytest.raises(InvalidArgumentError):
            solar_to_lunar(2023, 1)


@pytest.mark.unit
class TestSolarBounds:
    """测试公历边界。"""

    def test_lower_bound_accepted(self) -> None:
        """测试下限 1900-01-31。"""
        result = solar_to_lunar(1900, 1, 31)
        assert result.lunar_date == "1900-01-01"
        assert result.gz_year == "庚子"

    def test_upper_bound_accepted(self) -> None:
        """测试上限 2100-12-31。"""
        result = solar_to_lunar(2100, 12, 31)
        assert result.lunar_date == "2100-12-01"

    @pytest.mark.parametrize(
        "args", [(1900, 1, 30), (2101, 1, 1), (1899, 12, 31)]
    )
    def test_out_of_range(self, args: tuple[int, int, int]) -> None:
        """测试超出范围。"""
        with pytest.raises(OutOfRangeError):
            solar_to_lunar(*args)

    @pytest.mark.parametrize(
        "args,name", [((2023, 13, 1), "month"), ((2023, 2, 29), "day"), ((2023, 4, 0), "day")]
    )
    def test_invalid_date(self, args: tuple[int, int, int], name: str) -> None:
        """测试不存在的日期。"""
        with pytest.raises(OutOfRangeError, match=name):
            solar_to_lunar(*args)


@pytest.mark.unit
class TestLunarToSolar:
    """测试农历转公历。"""

    def test_spring_festival(self) -> None:
        """测试 2023 年正月初一。"""
        result = lunar_to_solar(2023, 1, 1)
        assert result.solar_date == "2023-01-22"
        assert result.lunar_date == "2023-01-01"
        assert result.weekday == 7
        assert result.gz_month == "癸丑"
        assert result.gz_day == "庚辰"

    def test_leap_month(self) -> None:
        """测试闰月。"""
        assert lunar_to_solar(2023, 2, 1, True).solar_date == "2023-03-22"
        assert lunar_to_solar(2023, 2, 1).solar_date == "2023-02-20"
        assert lunar_to_solar(2023, 3, 1).solar_date == "2023-04-20"

    def test_bounds(self) -> None:
        """测试农历上下限。"""
        assert lunar_to_solar(1900, 1, 1).solar_date == "1900-01-31"
        assert lunar_to_solar(2100, 12, 1).solar_date == "2100-12-31"

    def test_beyond_upper_bound(self) -> None:
        """测试超出农历上限。"""
        with pytest.raises(OutOfRangeError):
            lunar_to_solar(2100, 12, 2)

    @pytest.mark.parametrize(
        "args", [(1899, 1, 1), (2101, 1, 1), (2023, 0, 1), (2023, 13, 1), (2023, 1, 0), (2023, 1, 31)]
    )
    def test_out_of_range(self, args: tuple[int, int, int]) -> None:
        """测试年、月、日超出范围。"""
        with pytest.raises(OutOfRangeError):
            lunar_to_solar(*args)

    def test_no_leap_month_this_year(self) -> None:
        """测试该年没有闰月。"""
        with pytest.raises(InvalidArgumentError, match="没有闰月"):
            lunar_to_solar(2022, 1, 1, True)

    def test_wrong_leap_month(self) -> None:
        """测试闰月不符时提示实际闰月。"""
        with pytest.raises(InvalidArgumentError, match="闰 2 月"):
            lunar_to_solar(2023, 3, 1, True)

    def test_day_exceeds_month_length(self) -> None:
        """测试日数超过当月天数。"""
        with pytest.raises(InvalidArgumentError, match="29"):
            lunar_to_solar(2023, 1, 30)
        with pytest.raises(InvalidArgumentError):
            lunar_to_solar(2023, 2, 30, True)
        assert lunar_to_solar(2023, 2, 30).solar_date == "2023-03-21"

    def test_to_dict_keys(self) -> None:
        """测试驼峰字段输出。"""
        data = lunar_to_solar(2023, 1, 1).to_dict()
        assert data["solarDate"] == "2023-01-22"
        assert data["lunarDate"] == "2023-01-01"
        assert data["gzYear"] == "癸卯"
        assert data["monthCn"] == "正月"
        assert data["isLeap"] is False
        assert data["term"] is None
        assert data["lunarFestivals"] == ["春节"]


@pytest.mark.unit
class TestLocateLunar:
    """测试按偏移量定位农历日期。"""

    def test_each_year_length_read_once(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """测试逐年扣减时每年只取一次全年天数。"""
        calls: Counter[int] = Counter()
        original = converter.year_days

        def counting(year: int) -> int:
            calls[year] += 1
            return original(year)

        monkeypatch.setattr(converter, "year_days", counting)
        located = converter._locate_lunar((converter.MAX_DATE - converter.BASE_DATE).days)
        assert located == (2100, 12, 1, False)
        assert len(calls) == 200
        assert max(calls.values()) == 1
