"""
lunarcal: 公历 / 农历转换（1900-2100）

提供公历 ⇄ 农历互转，以及干支、生肖、节气、节日和星座查询。
"""

from .astro import to_astro
from .config import Config
from .converter import ConversionResult, lunar_to_solar, solar_to_lunar
from .errors import CalendarError, InvalidArgumentError, OutOfRangeError
from .festival import lunar_festivals, solar_festivals, special_day
from .lunar import (
    LunarMonth,
    china_day,
    china_month,
    gan_zhi,
    gan_zhi_year,
    leap_days,
    leap_month,
    month_days,
    month_sequence,
    year_days,
)
from .solar import animal_of_year, solar_days, solar_term_day, solar_terms

__version__ = "0.1.0"

__all__ = [
    "CalendarError",
    "Config",
    "ConversionResult",
    "InvalidArgumentError",
    "LunarMonth",
    "OutOfRangeError",
    "animal_of_year",
    "china_day",
    "china_month",
    "gan_zhi",
    "gan_zhi_year",
    "leap_days",
    "leap_month",
    "lunar_festivals",
    "lunar_to_solar",
    "month_days",
    "month_sequence",
    "solar_days",
    "solar_festivals",
    "solar_term_day",
    "solar_terms",
    "solar_to_lunar",
    "special_day",
    "to_astro",
    "year_days",
]
