#!filepath: seximal/config/log_config.py
from typing import Optional

from loguru import logger
from pydantic import BaseModel, field_validator


class LogConfig(BaseModel):
    dir: Optional[str] = None      # None → 只写 stderr
    rotation: str = "1 day"
    retention: str = "30 days"
    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, v: str) -> str:
        # loguru 级别名（TRACE/DEBUG/INFO/SUCCESS/WARNING/ERROR/CRITICAL）
        v = v.strip().upper()
        try:
            logger.level(v)
        except ValueError:
            raise ValueError(f"Unknown log level: {v!r}") from None
        return v
