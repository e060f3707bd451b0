#!filepath: seximal/common/time_of_day.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from fractions import Fraction
from typing import Union

FractionLike = Union[int, float, str, Fraction]


@dataclass(frozen=True, slots=True)
class TimeOfDay:
    """
    一天之内的时刻（唯一输入载体）

    - hour / minute / second 为整数
    - fraction 为不足一秒的部分，统一存为 Fraction，避免浮点漂移
    - 构造时校验范围；之后进入 engine 的值一定合法
    """

    hour: int
    minute: int
    second: int
    fraction: Fraction = field(default=Fraction(0))

    def __post_init__(self) -> None:
        object.__setattr__(self, "fraction", Fraction(self.fraction))

        if not 0 <= self.hour <= 23:
            raise ValueError(f"hour out of range [0, 23]: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValueError(f"minute out of range [0, 59]: {self.minute}")
        if not 0 <= self.second <= 59:
            raise ValueError(f"second out of range [0, 59]: {self.second}")
        if not 0 <= self.fraction < 1:
            raise ValueError(f"fraction out of range [0, 1): {self.fraction}")

    # ------------------------------------------------------------
    # 构造
    # ------------------------------------------------------------
    @classmethod
    def midnight(cls) -> "TimeOfDay":
        return cls(0, 0, 0)

    @classmethod
    def from_time(cls, t: Union[time, datetime]) -> "TimeOfDay":
        """
        datetime.time / datetime → TimeOfDay（tzinfo 忽略，取墙上时间）
        """
        return cls(
            hour=t.hour,
            minute=t.minute,
            second=t.second,
            fraction=Fraction(t.microsecond, 1_000_000),
        )

    # ------------------------------------------------------------
    # 派生
    # ------------------------------------------------------------
    @property
    def total_seconds(self) -> Fraction:
        """自午夜起经过的标准秒数（精确有理数）"""
        return self.hour * 3600 + self.minute * 60 + self.second + self.fraction

    def __str__(self) -> str:
        micros = int(self.fraction * 1_000_000)
        base = f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        return f"{base}.{micros:06d}" if micros else base
