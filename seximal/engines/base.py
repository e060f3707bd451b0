#!filepath: seximal/engines/base.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Iterable, TypeVar


InValue = TypeVar("InValue")
OutValue = TypeVar("OutValue")


class BaseEngine(ABC, Generic[InValue, OutValue]):
    """
    Engine 抽象基类：

    - 不做任何 I/O（不读时钟、不打印）
    - 专注“输入值 → 输出值”的纯计算
    - 同一输入多次调用结果一致，无隐藏状态
    """

    @abstractmethod
    def process(self, value: InValue) -> OutValue:
        """
        处理单个值（最小粒度单位）。
        """
        raise NotImplementedError

    def process_stream(self, values: Iterable[InValue]) -> Iterable[OutValue]:
        """
        逐个调用 process，每次调用互相独立。
        """
        for v in values:
            yield self.process(v)
