"""
数据管理模块
"""

from .market_data_fetcher import MarketDataFetcher

__all__ = ['MarketDataFetcher']
