from .forms import SeximalForm
from .tick import (
    SECONDS_PER_DAY,
    SNAPS_PER_DAY,
    SNAPS_PER_LAPSE,
    SNAPS_PER_LULL,
    SNAPS_PER_MOMENT,
    SNAPS_PER_SPAN,
    TickReading,
    UnitBreakdown,
)
from .time_of_day import TimeOfDay

__all__ = [
    "SeximalForm",
    "TimeOfDay",
    "TickReading",
    "UnitBreakdown",
    "SECONDS_PER_DAY",
    "SNAPS_PER_DAY",
    "SNAPS_PER_LAPSE",
    "SNAPS_PER_LULL",
    "SNAPS_PER_MOMENT",
    "SNAPS_PER_SPAN",
]
