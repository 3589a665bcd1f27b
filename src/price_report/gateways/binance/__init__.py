"""
Binance 现货公共 REST 网关
"""

from .rest_api import BinanceRestClient

__all__ = ['BinanceRestClient']
