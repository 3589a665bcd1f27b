"""
市场数据获取器模块
负责从交易所获取可交易交易对与最新价格
"""

import logging
from typing import AbstractSet, FrozenSet, List

from ..gateways.binance.parsers import SymbolParser, TickerParser
from ..gateways.binance.rest_api import BinanceRestClient
from ..models.market_data import Ticker


class MarketDataFetcher:
    """市场数据获取器 - 负责从交易所获取数据"""

    def __init__(self, rest_client: BinanceRestClient, exclude_zero_prices: bool = False):
        self.rest_client = rest_client
        self.exclude_zero_prices = exclude_zero_prices
        self.logger = logging.getLogger(__name__)
        self.logger.info("MarketDataFetcher 初始化完成")

    async def fetch_tradable_symbols(self) -> FrozenSet[str]:
        """获取状态为 TRADING 的交易对集合"""
        exchange_info = await self.rest_client.get_exchange_info()
        tradable = SymbolParser.tradable_symbols(exchange_info)

        self.logger.info(f"获取到 {len(tradable)} 个可交易交易对")
        return tradable

    async def fetch_tickers(self, tradable: AbstractSet[str]) -> List[Ticker]:
        """
        获取最新价格，按可交易集合过滤，并按价格升序排序

        Args:
            tradable: 可交易交易对集合

        Returns:
            List[Ticker]: 按价格升序（稳定排序）的 Ticker 列表

        Raises:
            ParseError: 任意一条价格非法
        """
        records = await self.rest_client.get_ticker_prices()

        # 先解析后过滤：任意价格非法都会终止运行
        tickers = TickerParser.parse(records)
        tickers = [ticker for ticker in tickers if ticker.symbol in tradable]

        if self.exclude_zero_prices:
            tickers = [ticker for ticker in tickers if ticker.price != 0]

        tickers.sort(key=lambda ticker: ticker.price)

        self.logger.info(f"价格记录 {len(records)} 条，过滤后 {len(tickers)} 条")
        return tickers
