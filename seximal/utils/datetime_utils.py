#!filepath: seximal/utils/datetime_utils.py
from __future__ import annotations

import re
from datetime import datetime, timezone
from fractions import Fraction
from typing import Callable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from seximal.common.time_of_day import TimeOfDay
from seximal.utils.errors import UserInputError

Clock = Callable[[], TimeOfDay]


class DateTimeUtils:
    UTC = timezone.utc

    # 依次尝试，先匹配先用（%p 不区分大小写）
    TIME_FORMATS: List[str] = [
        "%H:%M:%S.%f",          # 08:24:36.5
        "%H:%M:%S",             # 00:34:59
        "%H:%M",                # 00:35
        "%I:%M:%S %p",          # 12:34:59 AM
        "%I:%M:%S%p",           # 12:34:59am
        "%I:%M %p",             # 12:35 AM
        "%I:%M%p",              # 12:35am
        "%Hh %Mm %Ss",          # 12h 34m 59s
        "%Hh%Mm%Ss",            # 8h24m36s
        "%Hh %Mm",              # 6h 45m
        "%Hh%Mm",               # 6h45m
        "%Hh",                  # 12h
        "%I %p",                # 4 pm
        "%I%p",                 # 4pm（须先于 %I%M%p，否则 12am 被读成 1:02）
        "%I%M %p",              # 1235 am
        "%I%M%p",               # 1235am
        "%H%M",                 # 1235
        "%a %b %d %H:%M:%S %Y",  # ctime: Sun Jul  8 00:34:59 2001
    ]

    # HH:MM:60 / 12h 34m 60s → 闰秒
    _LEAP_SECOND = re.compile(r"(\d{1,2}:\d{2}:|\d{1,2}h\s*\d{1,2}m\s*)60(?!\d)")

    # ISO 字面量必须带时间部分（纯日期 2025-01-03 / 20250103 拒绝）
    _ISO_TIME_PART = re.compile(r"[T ]\d{2}:?\d{2}")
    _LAST_MICROSECOND = Fraction(999_999, 1_000_000)

    # ================================================================
    # 🔥 字面量 → TimeOfDay
    # ================================================================
    @classmethod
    def parse_time_of_day(cls, literal: str) -> TimeOfDay:
        """
        literal 可能为：
            "08:24:36" / "08:24:36.5" / "8:24"
            "12:34:59 AM" / "4pm" / "1235am"
            "8h24m36s" / "6h 45m" / "12h"
            "1235"
            "2001-07-08T00:34:59.026490+09:30"   # 日期与时区忽略
            "Sun Jul  8 00:34:59 2001"

        闰秒 "23:59:60" 折算为该分钟第 59 秒的最后一微秒。
        """
        s = str(literal).strip()
        if not s:
            raise UserInputError("Empty time literal")

        s, leap = cls._LEAP_SECOND.subn(r"\g<1>59", s, count=1)

        parsed = cls._strptime_any(s)
        if parsed is None:
            raise UserInputError(f"Unrecognized time literal: {literal!r}")

        tod = TimeOfDay.from_time(parsed)
        if leap:
            tod = TimeOfDay(tod.hour, tod.minute, 59, cls._LAST_MICROSECOND)
        return tod

    @classmethod
    def _strptime_any(cls, s: str) -> Optional[datetime]:
        for fmt in cls.TIME_FORMATS:
            try:
                return datetime.strptime(s, fmt)
            except ValueError:
                continue

        # ISO-8601 date-time
        if not cls._ISO_TIME_PART.search(s):
            return None
        try:
            return datetime.fromisoformat(s)
        except ValueError:
            return None

    # ================================================================
    # 🔥 系统时钟
    # ================================================================
    @classmethod
    def zone(cls, name: str) -> ZoneInfo:
        try:
            return ZoneInfo(name)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise UserInputError(f"Unknown time zone: {name!r}") from e

    @classmethod
    def now(cls, local: bool = False, tz: Optional[str] = None) -> datetime:
        """
        优先级：tz > local > UTC
        """
        if tz:
            return datetime.now(cls.zone(tz))
        if local:
            return datetime.now().astimezone()
        return datetime.now(cls.UTC)

    @classmethod
    def clock(cls, local: bool = False, tz: Optional[str] = None) -> Clock:
        """
        返回一个无参时钟函数（注入给 pipeline），每次调用读取当前墙上时间
        """
        if tz:
            cls.zone(tz)  # 提前校验，错误在边界暴露

        def _read() -> TimeOfDay:
            return TimeOfDay.from_time(cls.now(local=local, tz=tz))

        return _read

    @staticmethod
    def fixed_clock(value: TimeOfDay) -> Clock:
        return lambda: value
