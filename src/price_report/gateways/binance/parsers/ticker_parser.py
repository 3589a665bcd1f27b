"""
Ticker Parser - 处理 ticker/price 数据

负责将字符串价格解析为 Decimal，构造 Ticker。
任意一条价格非法即抛出 ParseError，终止整次运行。
"""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Iterable, List

from ....core.errors import ParseError
from ....models.market_data import Ticker
from ..models import TickerPriceModel

logger = logging.getLogger(__name__)

# 非负十进制数字（允许指数形式；不允许负号，包括 -0；不允许 NaN/Infinity/下划线分隔）
DECIMAL_PATTERN = re.compile(r'^\+?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$')


def parse_price(symbol: str, raw_price: str) -> Decimal:
    """
    解析价格字符串

    Args:
        symbol: 交易对（用于错误信息）
        raw_price: 交易所返回的价格字符串

    Returns:
        Decimal: 有限、非负的价格

    Raises:
        ParseError: 不是合法的非负十进制数（NaN、Infinity 以及任何带负号的值，如 -0）
    """
    if not DECIMAL_PATTERN.match(raw_price.strip()):
        raise ParseError(symbol, raw_price)

    try:
        price = Decimal(raw_price.strip())
    except InvalidOperation as e:
        raise ParseError(symbol, raw_price) from e

    return price


class TickerParser:
    """Ticker 数据解析器"""

    @staticmethod
    def parse(records: Iterable[TickerPriceModel]) -> List[Ticker]:
        """
        批量解析价格记录

        Args:
            records: 校验后的原始价格记录

        Returns:
            List[Ticker]: 与输入顺序一致的 Ticker 列表
        """
        tickers = []
        for record in records:
            try:
                price = parse_price(record.symbol, record.price)
            except ParseError:
                logger.error(f"Ticker 价格无效: {record.symbol}={record.price!r}")
                raise
            tickers.append(Ticker(symbol=record.symbol, price=price))

        return tickers
