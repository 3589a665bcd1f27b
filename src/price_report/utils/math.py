"""
轻量级 Decimal 数学工具模块

价格计算全部使用 decimal.Decimal，避免二进制浮点误差。
"""

from decimal import MAX_PREC, Decimal, Inexact, localcontext
from fractions import Fraction
from typing import Iterable, List
import logging

logger = logging.getLogger(__name__)

# 平均价格计算使用的精度（有效位数）
DEFAULT_PRECISION = 60

# 除不尽时保留的小数位数
DEFAULT_DECIMAL_PLACES = 20


def to_plain_string(value: Decimal) -> str:
    """
    渲染为普通十进制字符串（不使用科学计数法，保留原有小数位）

    Args:
        value: Decimal 数值

    Returns:
        str: 例如 Decimal('1E-8') -> '0.00000001'
    """
    return format(value, 'f')


def decimal_sum(values: Iterable[Decimal]) -> Decimal:
    """精确求和（加法不做任何舍入）"""
    total = Decimal(0)
    with localcontext() as ctx:
        ctx.prec = MAX_PREC
        for value in values:
            total += value
    return total


def round_half_up(value: Fraction, places: int) -> Decimal:
    """
    把精确有理数一次性按 ROUND_HALF_UP 舍入到 places 位小数

    Args:
        value: 精确值
        places: 小数位数

    Returns:
        Decimal: 指数恰为 -places 的 Decimal
    """
    scaled = abs(value) * 10 ** places
    quotient, remainder = divmod(scaled.numerator, scaled.denominator)
    if 2 * remainder >= scaled.denominator:
        quotient += 1

    sign = 1 if value < 0 and quotient else 0
    digits = tuple(int(digit) for digit in str(quotient))
    return Decimal((sign, digits, -places))


def decimal_mean(values: Iterable[Decimal], places: int = DEFAULT_DECIMAL_PLACES) -> Decimal:
    """
    精确算术平均值

    能整除且小数位不超过 places 时保留自然精度（6.6 / 3 -> 2.2，50000.00 / 1 -> 50000.00）；
    否则对精确商只做一次 ROUND_HALF_UP，保留 places 位小数。

    Args:
        values: Decimal 序列
        places: 除不尽时保留的小数位数

    Returns:
        Decimal: 平均值

    Raises:
        ZeroDivisionError: 序列为空
    """
    items: List[Decimal] = list(values)
    if not items:
        raise ZeroDivisionError("cannot average an empty sequence")

    total = decimal_sum(items)

    with localcontext() as ctx:
        ctx.prec = DEFAULT_PRECISION
        ctx.clear_flags()
        mean = total / len(items)
        exact = not ctx.flags[Inexact]

    if not exact or mean.as_tuple().exponent < -places:
        mean = round_half_up(Fraction(total) / len(items), places)

    logger.debug(f"decimal_mean: total={total}, count={len(items)}, mean={mean}")
    return mean
