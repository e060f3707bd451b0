#!filepath: seximal/engines/form_engine.py
from __future__ import annotations

from typing import List, NamedTuple, Union

from seximal.common.forms import SeximalForm
from seximal.common.tick import SNAPSHOT_DIGITS, SPAN_DIGITS, TickReading
from seximal.engines.base import BaseEngine
from seximal.engines.radix import to_radix

SEXIMAL = 6


class UnitRow(NamedTuple):
    name: str
    value: int
    seximal: str


class FormRendererEngine(BaseEngine[TickReading, str]):
    """
    FormRendererEngine

    三种输出形式都切自同一串 7 位六进制数字 D：

        snapshot : D                                  "2034050"
        extended : D[0:2]:D[2:4]:D[4:6].D[6]          "20:34:05.0"
        span     : D[0:3]                             "203"

    因此：
        - snapshot == extended 去掉 ':' 和 '.'
        - span == snapshot[:3]
    均由构造保证，无需另行校验。
    """

    def __init__(self, form: Union[SeximalForm, str] = SeximalForm.EXTENDED):
        self.form = SeximalForm(form)

    def process(self, value: TickReading) -> str:
        return render(value, self.form)


def snapshot_digits(reading: TickReading) -> str:
    return to_radix(reading.ticks, SEXIMAL, SNAPSHOT_DIGITS)


def render(reading: TickReading, form: Union[SeximalForm, str] = SeximalForm.EXTENDED) -> str:
    d = snapshot_digits(reading)
    form = SeximalForm(form)

    if form is SeximalForm.SNAPSHOT:
        return d
    if form is SeximalForm.SPAN:
        return d[:SPAN_DIGITS]
    return f"{d[0:2]}:{d[2:4]}:{d[4:6]}.{d[6]}"


def describe(reading: TickReading) -> List[UnitRow]:
    """
    每个单位一行：(名称, 十进制值, 六进制数字)，供 CLI 表格展示
    """
    d = snapshot_digits(reading)
    u = reading.units
    return [
        UnitRow("lapse", u.lapse, d[0:2]),
        UnitRow("lull", u.lull, d[2:4]),
        UnitRow("moment", u.moment, d[4:6]),
        UnitRow("snap", u.snap, d[6]),
        UnitRow("span", reading.span, d[:SPAN_DIGITS]),
    ]
