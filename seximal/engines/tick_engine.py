#!filepath: seximal/engines/tick_engine.py
from __future__ import annotations

import math
from fractions import Fraction
from typing import Final

from seximal.common.tick import (
    SECONDS_PER_DAY,
    SNAPS_PER_DAY,
    SNAPS_PER_LAPSE,
    SNAPS_PER_LULL,
    SNAPS_PER_MOMENT,
    SNAPS_PER_SPAN,
    TickReading,
    UnitBreakdown,
)
from seximal.common.time_of_day import FractionLike, TimeOfDay
from seximal.engines.base import BaseEngine
from seximal.utils.logger import logs

# 279936 / 86400 == 81 / 25，一个 snap 恰为 25/81 秒
SNAPS_PER_SECOND: Final[Fraction] = Fraction(SNAPS_PER_DAY, SECONDS_PER_DAY)


class TickConverterEngine(BaseEngine[TimeOfDay, TickReading]):
    """
    TickConverterEngine

    Input:
        - TimeOfDay（已校验）

    Output:
        - TickReading(ticks, units, span)

    规则：
        - 全程 Fraction / int 运算，不经过 float
        - 不足一个 snap 的部分截断（floor），不四舍五入
        - 满一天（279936）回绕到 0
    """

    def process(self, value: TimeOfDay) -> TickReading:
        ticks = self.to_ticks(value)
        reading = self.decompose(ticks)
        logs.debug(f"[TickConverter] {value} -> ticks={ticks} span={reading.span}")
        return reading

    @staticmethod
    def to_ticks(value: TimeOfDay) -> int:
        total = math.floor(value.total_seconds * SNAPS_PER_SECOND)
        return total % SNAPS_PER_DAY

    @staticmethod
    def decompose(ticks: int) -> TickReading:
        units = UnitBreakdown(
            lapse=ticks // SNAPS_PER_LAPSE,
            lull=ticks // SNAPS_PER_LULL % 36,
            moment=ticks // SNAPS_PER_MOMENT % 36,
            snap=ticks % SNAPS_PER_MOMENT,
        )
        return TickReading(ticks=ticks, units=units, span=ticks // SNAPS_PER_SPAN)


def convert(
    hour: int,
    minute: int,
    second: int,
    fraction: FractionLike = 0,
) -> TickReading:
    """
    (hour, minute, second, fraction) → TickReading
    """
    return TickConverterEngine().process(TimeOfDay(hour, minute, second, fraction))
