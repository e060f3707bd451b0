#!filepath: seximal/pipeline.py
from __future__ import annotations

from typing import Optional, Union

from seximal.common.forms import SeximalForm
from seximal.common.tick import TickReading
from seximal.common.time_of_day import TimeOfDay
from seximal.engines.form_engine import FormRendererEngine
from seximal.engines.tick_engine import TickConverterEngine
from seximal.utils.datetime_utils import Clock, DateTimeUtils
from seximal.utils.errors import UserInputError
from seximal.utils.logger import logs


class SeximalPipeline:
    """
    Seximal 时间 Pipeline：

        Step1. 取时刻（字面量解析 或 注入的 clock）
        Step2. TickConverterEngine → TickReading
        Step3. FormRendererEngine → 字符串

    输入校验全部在 Step1 完成，engine 只接收合法值。
    clock 由调用方注入，pipeline 本身不读系统时钟。
    """

    def __init__(self, clock: Optional[Clock] = None) -> None:
        self.clock = clock or DateTimeUtils.clock()
        self.converter = TickConverterEngine()

    # ---------------------------------------------------
    # Step1
    # ---------------------------------------------------
    def resolve(self, when: Optional[str] = None) -> TimeOfDay:
        if when is None:
            return self.clock()
        return DateTimeUtils.parse_time_of_day(when)

    # ---------------------------------------------------
    # Step2 / Step3
    # ---------------------------------------------------
    def read(self, when: Optional[str] = None) -> TickReading:
        return self.converter.process(self.resolve(when))

    @logs.catch(msg="seximal conversion failed", ignore=(UserInputError,))
    def run(
        self,
        when: Optional[str] = None,
        form: Union[SeximalForm, str] = SeximalForm.EXTENDED,
    ) -> str:
        reading = self.read(when)
        out = FormRendererEngine(form).process(reading)
        logs.debug(f"[Pipeline] when={when or 'clock'} form={SeximalForm(form).value} -> {out}")
        return out
