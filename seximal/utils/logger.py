#!filepath: seximal/utils/logger.py
from __future__ import annotations

import os
import sys
from functools import wraps
from time import perf_counter
from typing import TYPE_CHECKING, Callable, Optional

from loguru import logger

if TYPE_CHECKING:
    from seximal.config.log_config import LogConfig

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}"


def _stderr_sink(message) -> None:
    # 每次写入时再取 sys.stderr，便于被 CliRunner / capsys 替换
    sys.stderr.write(message)


class Logging:
    """
    日志模块（loguru 封装）
    ---------------------------------------
    - 默认只写 stderr，级别 WARNING
    - 配置 log_dir 后追加按日期切割的文件日志
    - 包含函数级日志装饰器 catch
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ):
        self.configure(log_dir, rotation, retention, log_level)

    def configure(
        self,
        log_dir: Optional[str] = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "WARNING",
    ) -> None:
        """
        重新配置全局 logger（可重复调用，后一次覆盖前一次）
        """
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level.upper()

        logger.remove()

        logger.add(
            sink=_stderr_sink,
            level=self.level,
            format=LOG_FORMAT,
            colorize=False,
        )

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=f"{self.log_dir}/{{time:YYYY-MM-DD}}.log",
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=LOG_FORMAT,
                backtrace=True,
                diagnose=True,
            )

        logger.debug(f"Logger configured: level={self.level} dir={self.log_dir}")

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = False,
        ignore: tuple = (),
    ) -> Callable:
        """
        记录异常后继续抛出；ignore 中的异常类型直接抛出，不记录
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.debug(f"[CALL] {func.__name__} args={args}, kwargs={kwargs}")

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except ignore:
                    raise
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.debug(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.debug(f"[TIME] {func.__name__} took {cost:.6f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（可被 init_logging 重新配置）
logs = Logging()


def init_logging(cfg: "LogConfig") -> Logging:
    logs.configure(
        log_dir=cfg.dir,
        rotation=cfg.rotation,
        retention=cfg.retention,
        log_level=cfg.level,
    )
    return logs
