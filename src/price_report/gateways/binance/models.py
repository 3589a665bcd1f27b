"""
Binance 数据模型

使用 Pydantic 对交易所返回的 JSON 做边界校验，
字段缺失或类型不符时抛出 ValidationError（由 REST 客户端转换为 DecodeError）。
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from typing import List

# 可交易状态
TRADING_STATUS = "TRADING"


class ExchangeSymbolModel(BaseModel):
    """/exchangeInfo 中的单个交易对"""
    model_config = ConfigDict(extra='allow')  # 允许额外字段（baseAsset、filters 等）
    symbol: str = Field(..., strict=True, description="交易对，例如 BTCUSDT")
    status: str = Field(..., strict=True, description="状态，例如 TRADING / BREAK")

    @property
    def is_trading(self) -> bool:
        return self.status == TRADING_STATUS


class ExchangeInfoModel(BaseModel):
    """/exchangeInfo 响应"""
    model_config = ConfigDict(extra='allow')
    symbols: List[ExchangeSymbolModel]


class TickerPriceModel(BaseModel):
    """
    /ticker/price 中的单条价格记录

    price 保持字符串，由 TickerParser 解析为 Decimal。
    """
    model_config = ConfigDict(extra='allow')
    symbol: str = Field(..., strict=True, description="交易对")
    price: str = Field(..., strict=True, description="价格（字符串）")


TickerPriceList = TypeAdapter(List[TickerPriceModel])
