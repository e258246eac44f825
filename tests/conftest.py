"""
测试共享 Fixtures

提供所有测试模块共享的配置对象和固定日期。
"""

from __future__ import annotations

from datetime import date
from zoneinfo import ZoneInfo

import pytest

from lunarcal import converter
from lunarcal.config import Config

# ═══════════════════════════════════════════════════════════
# 配置 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def test_config() -> Config:
    """创建测试配置。"""
    return Config(
        timezone=ZoneInfo("Asia/Shanghai"),
        log_level="INFO",
        json_output=False,
    )


# ═══════════════════════════════════════════════════════════
# 日期 Fixtures
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def fixed_today(monkeypatch: pytest.MonkeyPatch) -> date:
    """把"今天"固定为 2023-01-22（农历癸卯年正月初一）。"""
    today = date(2023, 1, 22)
    monkeypatch.setattr(converter, "_today", lambda tz=None: today)
    return today


@pytest.fixture
def spring_festival_2023():
    """2023 年春节的转换结果。"""
    return converter.solar_to_lunar(2023, 1, 22)
