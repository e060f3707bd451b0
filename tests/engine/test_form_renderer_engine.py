#!filepath: tests/engine/test_form_renderer_engine.py
from fractions import Fraction

import pytest

from seximal.common.forms import SeximalForm
from seximal.common.time_of_day import TimeOfDay
from seximal.engines.form_engine import FormRendererEngine, describe, render
from seximal.engines.tick_engine import TickConverterEngine, convert


@pytest.mark.parametrize(
    "args, extended, snapshot, span",
    [
        ((0, 0, 0, 0), "00:00:00.0", "0000000", "000"),
        ((23, 59, 59, Fraction(999, 1000)), "55:55:55.5", "5555555", "555"),
        ((8, 24, 36, 0), "20:34:05.0", "2034050", "203"),
        ((23, 50, 2, Fraction(1, 5)), "55:43:01.1", "5543011", "554"),
        ((13, 12, 1, Fraction(888, 1000)), "31:44:45.4", "3144454", "314"),
        ((22, 33, 38, Fraction(884, 1000)), "53:50:14.1", "5350141", "535"),
    ],
)
def test_worked_examples(args, extended, snapshot, span):
    reading = convert(*args)
    assert render(reading, SeximalForm.EXTENDED) == extended
    assert render(reading, SeximalForm.SNAPSHOT) == snapshot
    assert render(reading, SeximalForm.SPAN) == span


def test_default_form_is_extended():
    assert render(convert(8, 24, 36)) == "20:34:05.0"
    assert FormRendererEngine().process(convert(8, 24, 36)) == "20:34:05.0"


def test_form_accepts_plain_string():
    engine = FormRendererEngine("snapshot")
    assert engine.form is SeximalForm.SNAPSHOT
    assert engine.process(convert(8, 24, 36)) == "2034050"


def test_unknown_form_rejected():
    with pytest.raises(ValueError):
        FormRendererEngine("weekly")


def test_identities_hold_across_the_day():
    """
    snapshot == extended 去掉分隔符
    span == snapshot 前三位
    """
    converter = TickConverterEngine()
    for seconds in range(0, 86_400, 13):
        h, rem = divmod(seconds, 3600)
        m, s = divmod(rem, 60)
        reading = converter.process(TimeOfDay(h, m, s, Fraction(1, 2)))

        extended = render(reading, SeximalForm.EXTENDED)
        snapshot = render(reading, SeximalForm.SNAPSHOT)
        span = render(reading, SeximalForm.SPAN)

        assert len(extended) == 10
        assert len(snapshot) == 7
        assert len(span) == 3
        assert set(snapshot) <= set("012345")
        assert extended.replace(":", "").replace(".", "") == snapshot
        assert span == snapshot[:3]


def test_render_is_idempotent():
    reading = convert(8, 24, 36)
    engine = FormRendererEngine(SeximalForm.EXTENDED)
    assert engine.process(reading) == engine.process(reading)


def test_describe_rows():
    rows = describe(convert(8, 24, 36))
    assert [r.name for r in rows] == ["lapse", "lull", "moment", "snap", "span"]
    assert [(r.value, r.seximal) for r in rows] == [
        (12, "20"),
        (22, "34"),
        (5, "05"),
        (0, "0"),
        (75, "203"),
    ]
