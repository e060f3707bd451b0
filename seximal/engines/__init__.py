from .base import BaseEngine
from .form_engine import FormRendererEngine, UnitRow, describe, render
from .radix import to_radix
from .tick_engine import SNAPS_PER_SECOND, TickConverterEngine, convert

__all__ = [
    "BaseEngine",
    "TickConverterEngine",
    "FormRendererEngine",
    "UnitRow",
    "SNAPS_PER_SECOND",
    "convert",
    "render",
    "describe",
    "to_radix",
]
