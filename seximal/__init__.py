#!filepath: seximal/__init__.py

from .utils.logger import Logging, logs, init_logging
from .utils.errors import UserInputError
from .utils.datetime_utils import DateTimeUtils
from .common import SeximalForm, TickReading, TimeOfDay, UnitBreakdown
from .engines import FormRendererEngine, TickConverterEngine, convert, describe, render, to_radix
from .config.app_config import AppConfig
from .pipeline import SeximalPipeline

__version__ = "0.1.0"

# alias 简化调用
datetime_utils = DateTimeUtils

__all__ = [
    "logs", "Logging", "init_logging",
    "UserInputError",
    "datetime_utils", "DateTimeUtils",
    "SeximalForm", "TimeOfDay", "TickReading", "UnitBreakdown",
    "TickConverterEngine", "FormRendererEngine",
    "convert", "render", "describe", "to_radix",
    "AppConfig",
    "SeximalPipeline",
    "__version__",
]
