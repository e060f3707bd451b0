from .app_config import AppConfig
from .clock_config import ClockConfig
from .log_config import LogConfig

__all__ = ["AppConfig", "ClockConfig", "LogConfig"]
