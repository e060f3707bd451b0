#!filepath: seximal/engines/radix.py
from __future__ import annotations

from typing import Final

DIGITS: Final[str] = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_radix(value: int, base: int = 6, width: int = 1) -> str:
    """
    整数 → 定宽 base 进制字符串（高位在前，左侧补 '0'）

        to_radix(20, 6, 2)     -> "32"
        to_radix(98094, 6, 7)  -> "2034050"

    Raises:
        ValueError: 负数 / base 不在 [2, 36] / 位数超出 width
    """
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base out of range [2, 36]: {base}")
    if value < 0:
        raise ValueError(f"negative value cannot be rendered: {value}")

    out = []
    remaining = value
    while remaining:
        remaining, r = divmod(remaining, base)
        out.append(DIGITS[r])

    digits = "".join(reversed(out)) or "0"
    if len(digits) > width:
        raise ValueError(
            f"{value} needs {len(digits)} base-{base} digits, width is {width}"
        )
    return digits.rjust(width, "0")
