"""
Binance 公共 REST 客户端（异步）

基于 aiohttp 的只读行情客户端。

关键特性：
- 单个 ClientSession，延迟创建，所有请求复用
- 完整的异步上下文管理
- 非 200 状态码 -> NetworkError（不重试）
- 响应体不是 JSON 或结构不符 -> DecodeError

公共接口无需签名，因此不处理任何凭证。
"""

import asyncio
import json
import logging
from typing import Any, List, Optional

import aiohttp
from aiohttp import ClientSession, ClientTimeout
from pydantic import ValidationError

from ...core.errors import DecodeError, NetworkError
from .models import ExchangeInfoModel, TickerPriceList, TickerPriceModel

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.binance.com"
EXCHANGE_INFO_PATH = "/api/v3/exchangeInfo"
TICKER_PRICE_PATH = "/api/v3/ticker/price"


class BinanceRestClient:
    """
    Binance 异步 REST 客户端

    Example:
        >>> async with BinanceRestClient() as client:
        ...     info = await client.get_exchange_info()
        ...     prices = await client.get_ticker_prices()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = 30,
        exchange_info_path: str = EXCHANGE_INFO_PATH,
        ticker_price_path: str = TICKER_PRICE_PATH
    ):
        """
        初始化 REST 客户端

        Args:
            base_url (str): API 基础 URL
            timeout (int): 请求总超时（秒）
            exchange_info_path (str): exchangeInfo 端点路径
            ticker_price_path (str): ticker/price 端点路径
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.exchange_info_path = exchange_info_path
        self.ticker_price_path = ticker_price_path

        self.session: Optional[ClientSession] = None
        self._closed = False

        logger.info(f"BinanceRestClient 初始化: base_url={self.base_url}, timeout={timeout}s")

    async def _get_session(self) -> ClientSession:
        """
        获取或创建 ClientSession

        Returns:
            ClientSession: aiohttp ClientSession 实例
        """
        if self.session is None or self.session.closed:
            if self._closed:
                raise RuntimeError("ClientSession 已关闭，无法创建新连接")

            self.session = ClientSession(timeout=ClientTimeout(total=self.timeout))
            logger.debug("创建新的 ClientSession")

        return self.session

    async def get_public(self, endpoint: str) -> Any:
        """
        发送公共 GET 请求并解码 JSON

        Args:
            endpoint (str): 端点路径（如：/api/v3/ticker/price）

        Returns:
            Any: 解码后的 JSON

        Raises:
            NetworkError: 非 200 状态码、网络失败或超时
            DecodeError: 响应体不是合法的 UTF-8 JSON
        """
        if self._closed:
            raise RuntimeError("ClientSession 已关闭")

        session = await self._get_session()
        url = f"{self.base_url}{endpoint}"

        try:
            async with session.get(url) as response:
                # 先检查状态码，错误页的响应体可能不是 UTF-8
                if response.status != 200:
                    try:
                        error_body = await response.read()
                    except (aiohttp.ClientError, asyncio.TimeoutError):
                        error_body = b""
                    snippet = error_body[:200].decode('utf-8', errors='replace')
                    logger.error(f"HTTP 错误 {response.status}: {snippet}")
                    raise NetworkError(response.status, response.reason or "", url)

                body = await response.read()
                logger.debug(f"GET {url} - Status: {response.status}, Length: {len(body)}")

        except aiohttp.ClientError as e:
            logger.error(f"网络请求失败: {e}")
            raise NetworkError(None, str(e) or type(e).__name__, url) from e
        except asyncio.TimeoutError as e:
            logger.error(f"请求超时: {url} ({self.timeout}s)")
            raise NetworkError(None, f"timeout after {self.timeout}s", url) from e

        try:
            return json.loads(body.decode('utf-8'))
        except UnicodeDecodeError as e:
            logger.error(f"响应体不是 UTF-8: {e}")
            raise DecodeError(f"body is not valid UTF-8 ({e})", url) from e
        except json.JSONDecodeError as e:
            logger.error(f"JSON 解析失败: {e}")
            raise DecodeError(f"invalid JSON ({e})", url) from e

    async def get_exchange_info(self) -> ExchangeInfoModel:
        """
        获取交易所信息（/api/v3/exchangeInfo）

        Returns:
            ExchangeInfoModel: 校验后的交易所信息
        """
        url = f"{self.base_url}{self.exchange_info_path}"
        data = await self.get_public(self.exchange_info_path)

        try:
            return ExchangeInfoModel.model_validate(data)
        except ValidationError as e:
            logger.error(f"exchangeInfo 结构校验失败: {e.error_count()} 个错误")
            raise DecodeError(f"exchangeInfo does not match the expected shape: {e}", url) from e

    async def get_ticker_prices(self) -> List[TickerPriceModel]:
        """
        获取全部交易对最新价格（/api/v3/ticker/price）

        Returns:
            List[TickerPriceModel]: 校验后的价格记录（price 仍为字符串）
        """
        url = f"{self.base_url}{self.ticker_price_path}"
        data = await self.get_public(self.ticker_price_path)

        try:
            return TickerPriceList.validate_python(data)
        except ValidationError as e:
            logger.error(f"ticker/price 结构校验失败: {e.error_count()} 个错误")
            raise DecodeError(f"ticker/price does not match the expected shape: {e}", url) from e

    async def close(self):
        """关闭 ClientSession"""
        if self.session and not self.session.closed:
            await self.session.close()
            logger.info("ClientSession 已关闭")
        self._closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
