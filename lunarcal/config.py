"""
集中配置管理

从环境变量 / .env 文件加载配置项，
并提供校验与默认值。
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

DEFAULT_TZ = "Asia/Shanghai"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}
_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name, "").strip().lower()
    if not raw:
        return default
    return raw in _TRUTHY


@dataclass(frozen=True)
class Config:
    """不可变配置对象，一次加载、全局使用。"""

    # 判断"今天"所用的时区
    timezone: ZoneInfo = field(default_factory=lambda: ZoneInfo(DEFAULT_TZ))
    log_level: str = DEFAULT_LOG_LEVEL
    json_output: bool = False            # CLI 默认输出 JSON

    @property
    def log_level_value(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_env(
        cls,
        env_path: str | Path | None = None,
        load_dotenv_file: bool = True,
    ) -> "Config":
        """从 .env 文件 + 环境变量构建 Config 实例。"""
        if env_path:
            load_dotenv(env_path, override=True)
        elif load_dotenv_file:
            # 优先级:
            # 1. 当前目录 .lunarcal/.env
            # 2. 当前目录 .env
            # 3. 项目根目录 .env (源码运行)
            project_root = Path(__file__).resolve().parent.parent
            candidates = [
                Path.cwd() / ".lunarcal" / ".env",
                Path.cwd() / ".env",
                project_root / ".env",
            ]
            for candidate in candidates:
                if candidate.exists():
                    load_dotenv(candidate, override=True)
                    break

        # 时区
        tz_name = os.getenv("LUNARCAL_TZ", DEFAULT_TZ).strip() or DEFAULT_TZ
        try:
            tz = ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            print(f"[WARN] 无法识别时区 '{tz_name}'，回退到 {DEFAULT_TZ}")
            tz = ZoneInfo(DEFAULT_TZ)

        # 日志级别
        level = os.getenv("LUNARCAL_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper() or DEFAULT_LOG_LEVEL
        if level not in _LOG_LEVELS:
            print(f"[WARN] 无法识别日志级别 '{level}'，回退到 {DEFAULT_LOG_LEVEL}")
            level = DEFAULT_LOG_LEVEL

        return cls(
            timezone=tz,
            log_level=level,
            json_output=_env_flag("LUNARCAL_JSON"),
        )
