#!filepath: tests/engine/test_tick_converter_engine.py
from fractions import Fraction
from types import SimpleNamespace

import pytest

from seximal.common.tick import SNAPS_PER_DAY, TickReading, UnitBreakdown
from seximal.common.time_of_day import TimeOfDay
from seximal.engines.tick_engine import SNAPS_PER_SECOND, TickConverterEngine, convert


def test_snaps_per_second_is_exact():
    assert SNAPS_PER_SECOND == Fraction(81, 25)
    assert SNAPS_PER_DAY == 279936


def test_midnight_all_zero():
    r = convert(0, 0, 0, 0)
    assert r == TickReading(ticks=0, units=UnitBreakdown(0, 0, 0, 0), span=0)


def test_just_before_midnight():
    """23:59:59.999 → 279935，小数部分截断，不会进位到 279936"""
    r = convert(23, 59, 59, Fraction(999, 1000))
    assert r.ticks == 279935
    assert r.units == UnitBreakdown(lapse=35, lull=35, moment=35, snap=5)
    assert r.span == 215


def test_last_microsecond_still_same_day():
    r = convert(23, 59, 59, Fraction(999_999, 1_000_000))
    assert r.ticks == SNAPS_PER_DAY - 1


def test_worked_example_08_24_36():
    r = convert(8, 24, 36)
    assert r.ticks == 98094
    assert r.units == UnitBreakdown(lapse=12, lull=22, moment=5, snap=0)
    assert r.span == 75


def test_worked_example_23_50_02_2():
    r = convert(23, 50, 2, Fraction(1, 5))
    assert r.ticks == 277999
    assert r.units == UnitBreakdown(lapse=35, lull=27, moment=1, snap=1)
    assert r.span == 214


def test_float_fraction_accepted():
    assert convert(23, 50, 2, 0.2).ticks == 277999


@pytest.mark.parametrize(
    "hms, fraction, expected",
    [
        ((13, 12, 1), Fraction(888, 1000), 153970),
        ((22, 33, 38), Fraction(884, 1000), 263149),
    ],
)
def test_reference_values(hms, fraction, expected):
    assert convert(*hms, fraction).ticks == expected


def test_sub_snap_fraction_truncated():
    """25 秒恰好 81 snap；差一微秒则截断为 80"""
    assert convert(0, 0, 25).ticks == 81
    assert convert(0, 0, 24, Fraction(999_999, 1_000_000)).ticks == 80


def test_exact_snap_boundaries_have_no_drift():
    """每 25 秒一个精确边界：25k 秒 → 81k snap，全天 3456 个边界"""
    engine = TickConverterEngine()
    for k in range(86_400 // 25):
        seconds = 25 * k
        h, rem = divmod(seconds, 3600)
        m, s = divmod(rem, 60)
        assert engine.process(TimeOfDay(h, m, s)).ticks == 81 * k


def test_decomposition_invariant_and_ranges():
    engine = TickConverterEngine()
    for seconds in range(0, 86_400, 17):
        h, rem = divmod(seconds, 3600)
        m, s = divmod(rem, 60)
        for fraction in (Fraction(0), Fraction(1, 3), Fraction(99, 100)):
            r = engine.process(TimeOfDay(h, m, s, fraction))
            u = r.units

            assert 0 <= r.ticks <= 279935
            assert 0 <= u.lapse <= 35
            assert 0 <= u.lull <= 35
            assert 0 <= u.moment <= 35
            assert 0 <= u.snap <= 5
            assert 0 <= r.span <= 215

            assert u.lapse * 7776 + u.lull * 216 + u.moment * 6 + u.snap == r.ticks
            assert u.ticks == r.ticks
            assert r.span == r.ticks // 1296


def test_full_day_wraps_to_zero():
    """满一天（279936 snap）回绕到 0"""
    full_day = SimpleNamespace(total_seconds=Fraction(86_400))
    assert TickConverterEngine.to_ticks(full_day) == 0


def test_process_stream_independent():
    engine = TickConverterEngine()
    values = [TimeOfDay(8, 24, 36), TimeOfDay.midnight(), TimeOfDay(8, 24, 36)]
    out = list(engine.process_stream(values))
    assert [r.ticks for r in out] == [98094, 0, 98094]
