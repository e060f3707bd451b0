#!filepath: seximal/common/tick.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# ============================================================================
# Misalian 单位常量（以 snap 为最小单位）
# ============================================================================
SECONDS_PER_DAY: Final[int] = 86_400

SNAPS_PER_MOMENT: Final[int] = 6
SNAPS_PER_LULL: Final[int] = 36 * SNAPS_PER_MOMENT      # 216
SNAPS_PER_LAPSE: Final[int] = 36 * SNAPS_PER_LULL       # 7776
SNAPS_PER_DAY: Final[int] = 36 * SNAPS_PER_LAPSE        # 279936

# Kunimunean 扩展：span = 6 lulls
SNAPS_PER_SPAN: Final[int] = 6 * SNAPS_PER_LULL         # 1296

# 7 位六进制数恰好覆盖一天的 snap
SNAPSHOT_DIGITS: Final[int] = 7
SPAN_DIGITS: Final[int] = 3


@dataclass(frozen=True, slots=True)
class UnitBreakdown:
    """
    ticks 的分层拆解：

        lapse * 7776 + lull * 216 + moment * 6 + snap == ticks
    """

    lapse: int    # [0, 35]
    lull: int     # [0, 35]
    moment: int   # [0, 35]
    snap: int     # [0, 5]

    @property
    def ticks(self) -> int:
        return (
            self.lapse * SNAPS_PER_LAPSE
            + self.lull * SNAPS_PER_LULL
            + self.moment * SNAPS_PER_MOMENT
            + self.snap
        )


@dataclass(frozen=True, slots=True)
class TickReading:
    """
    Tick Converter 的输出，Form Renderer 的输入
    """

    ticks: int               # [0, 279935]
    units: UnitBreakdown
    span: int                # [0, 215]
