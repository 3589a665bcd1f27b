"""
Symbol Parser - 处理 exchangeInfo 数据

从交易所信息中提取状态为 TRADING 的交易对集合。
"""

import logging
from typing import FrozenSet

from ..models import ExchangeInfoModel

logger = logging.getLogger(__name__)


class SymbolParser:
    """可交易交易对解析器"""

    @staticmethod
    def tradable_symbols(exchange_info: ExchangeInfoModel) -> FrozenSet[str]:
        """
        提取可交易交易对

        Args:
            exchange_info: 校验后的 exchangeInfo

        Returns:
            FrozenSet[str]: status == "TRADING" 的交易对名称
        """
        tradable = frozenset(
            item.symbol for item in exchange_info.symbols if item.is_trading
        )

        logger.debug(
            f"可交易交易对: {len(tradable)}/{len(exchange_info.symbols)}"
        )
        return tradable
