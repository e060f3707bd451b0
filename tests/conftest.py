# tests/conftest.py
from __future__ import annotations

from fractions import Fraction

import pytest
from loguru import logger

from seximal.common.time_of_day import TimeOfDay
from seximal.utils.datetime_utils import DateTimeUtils


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)  # or sys.stderr
    yield
    logger.remove()


@pytest.fixture(autouse=True)
def _clean_seximal_env(monkeypatch):
    """
    SEXIMAL_* 环境变量会覆盖配置，测试中统一清掉
    """
    for var in ("SEXIMAL_TZ", "SEXIMAL_LOCAL", "SEXIMAL_FORM", "SEXIMAL_LOG_LEVEL", "SEXIMAL_LOG_DIR"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_clock():
    """
    Factory fixture：固定时刻的 clock（不读系统时钟）

    Usage:
        clock = make_clock(8, 24, 36)
        clock = make_clock(23, 59, 59, Fraction(999, 1000))
    """

    def _make(hour: int = 0, minute: int = 0, second: int = 0, fraction=Fraction(0)):
        return DateTimeUtils.fixed_clock(TimeOfDay(hour, minute, second, fraction))

    return _make
