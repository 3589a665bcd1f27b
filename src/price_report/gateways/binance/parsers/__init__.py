"""
Binance 数据解析器
"""

from .symbol_parser import SymbolParser
from .ticker_parser import TickerParser, parse_price

__all__ = ['SymbolParser', 'TickerParser', 'parse_price']
