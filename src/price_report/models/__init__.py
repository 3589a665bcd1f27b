"""
数据模型模块
"""

from .market_data import Ticker

__all__ = ['Ticker']
