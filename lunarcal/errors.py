"""
错误类型

- OutOfRangeError：参数数值超出有效区间（年、月、日、节气序号）
- InvalidArgumentError：参数与推导出的约束不一致（闰月不符、日数超过当月天数）
"""

from __future__ import annotations


class CalendarError(ValueError):
    """历法转换错误基类"""

    pass


class OutOfRangeError(CalendarError):
    """参数超出有效范围"""

    def __init__(self, name: str, value: object, valid: str):
        self.name = name
        self.value = value
        self.valid = valid
        super().__init__(f"{name}={value} 超出范围，有效范围: {valid}")


class InvalidArgumentError(CalendarError):
    """参数不合法"""

    pass
