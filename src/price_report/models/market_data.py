"""
Market Data Models - 市场数据模型

提供标准化的数据类，替代散乱的字典结构。

设计原则：
- 类型安全：使用 dataclass 提供类型提示
- 精确计算：价格统一使用 Decimal，禁止使用 float
- 不可变：Ticker 创建后不可修改
- 可序列化：提供 to_dict() 方法
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict

from ..utils.math import to_plain_string


@dataclass(frozen=True)
class Ticker:
    """
    Ticker 数据（交易对 + 当前价格）

    使用示例：
        >>> ticker = Ticker(symbol='BTCUSDT', price=Decimal('50000.00'))
        >>> ticker.to_dict()
        {'symbol': 'BTCUSDT', 'price': '50000.00'}
    """

    symbol: str
    price: Decimal

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            raise TypeError(f"Ticker 价格必须是 Decimal，实际类型: {type(self.price).__name__}")
        if not self.price.is_finite() or self.price < 0:
            raise ValueError(f"无效的 Ticker 价格: {self.price}")

    def to_dict(self) -> Dict[str, str]:
        """
        转换为字典（价格渲染为字符串）

        Returns:
            Dict[str, str]: {'symbol': ..., 'price': ...}
        """
        return {
            'symbol': self.symbol,
            'price': to_plain_string(self.price),
        }
