"""
Price Report - Binance 现货行情报告

一次性批处理：获取所有可交易交易对的最新价格，
输出完整价格列表、最低/最高 5 个交易对以及平均价格。
"""

__version__ = "1.0.0"
