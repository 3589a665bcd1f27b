"""
Pytest Configuration and Fixtures for Price Report Test Suite
"""
import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, Mock

from price_report.gateways.binance.models import (
    ExchangeInfoModel,
    TickerPriceList,
)
from price_report.models.market_data import Ticker


def make_response(status=200, text="{}", reason="OK", read_error=None):
    """Create a mock aiohttp response usable as `async with session.get(...)`

    `text` may be str (encoded as UTF-8) or raw bytes; `read_error` makes read() raise.
    """
    body = text if isinstance(text, bytes) else text.encode("utf-8")

    response = MagicMock()
    response.status = status
    response.reason = reason
    if read_error is not None:
        response.read = AsyncMock(side_effect=read_error)
    else:
        response.read = AsyncMock(return_value=body)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


def make_session(*responses):
    """Create a mock ClientSession whose get() returns the given responses in order"""
    session = MagicMock()
    session.closed = False
    session.get = Mock(side_effect=list(responses))
    session.close = AsyncMock()
    return session


def make_tickers(*pairs):
    """Build Ticker objects from (symbol, price_str) pairs"""
    return [Ticker(symbol=symbol, price=Decimal(price)) for symbol, price in pairs]


@pytest.fixture
def exchange_info_payload():
    """Raw /exchangeInfo body"""
    return {
        "timezone": "UTC",
        "symbols": [
            {"symbol": "BTCUSDT", "status": "TRADING", "baseAsset": "BTC", "quoteAsset": "USDT"},
            {"symbol": "ETHBTC", "status": "BREAK", "baseAsset": "ETH", "quoteAsset": "BTC"},
            {"symbol": "ETHUSDT", "status": "TRADING", "baseAsset": "ETH", "quoteAsset": "USDT"},
            {"symbol": "DOGEUSDT", "status": "TRADING", "baseAsset": "DOGE", "quoteAsset": "USDT"},
        ],
    }


@pytest.fixture
def ticker_price_payload():
    """Raw /ticker/price body"""
    return [
        {"symbol": "BTCUSDT", "price": "50000.00"},
        {"symbol": "ETHBTC", "price": "0.05"},
        {"symbol": "ETHUSDT", "price": "3000.10"},
        {"symbol": "DOGEUSDT", "price": "0.12345"},
        {"symbol": "LUNAUSDT", "price": "0.00000100"},
    ]


@pytest.fixture
def mock_rest_client(exchange_info_payload, ticker_price_payload):
    """Create a mock BinanceRestClient returning validated models"""
    client = AsyncMock()
    client.get_exchange_info = AsyncMock(
        return_value=ExchangeInfoModel.model_validate(exchange_info_payload)
    )
    client.get_ticker_prices = AsyncMock(
        return_value=TickerPriceList.validate_python(ticker_price_payload)
    )
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


@pytest.fixture
def response_factory():
    """Factory for mock aiohttp responses"""
    return make_response


@pytest.fixture
def session_factory():
    """Factory for mock ClientSession objects"""
    return make_session


@pytest.fixture
def ticker_factory():
    """Factory for Ticker lists"""
    return make_tickers
