"""
错误类型定义

所有已知错误都继承自 PriceReportError，
由 ReportRunner 在顶层统一捕获、分类并输出到 stderr。
"""

from typing import Optional


class PriceReportError(Exception):
    """价格报告已知错误基类"""


class ConfigError(PriceReportError):
    """配置无效"""


class NetworkError(PriceReportError):
    """
    网络错误

    交易所返回非成功状态码，或传输层失败（此时 status 为 None）。
    不做重试，直接向上抛出。
    """

    def __init__(self, status: Optional[int], reason: str, url: str = ""):
        self.status = status
        self.reason = reason
        self.url = url

        if status is None:
            message = f"Request to {url} failed: {reason}"
        else:
            message = f"Error while requesting {url}: {status} {reason}"
        super().__init__(message)


class DecodeError(PriceReportError):
    """响应体不是 JSON，或不符合预期结构"""

    def __init__(self, message: str, url: str = ""):
        self.url = url
        super().__init__(f"Unexpected response from {url}: {message}" if url else message)


class ParseError(PriceReportError):
    """价格字段不是合法的十进制数"""

    def __init__(self, symbol: str, raw_price):
        self.symbol = symbol
        self.raw_price = raw_price
        super().__init__(f"Invalid price for {symbol}: {raw_price!r}")


class EmptyResultError(PriceReportError):
    """过滤后没有任何 Ticker，平均价格无定义"""

    def __init__(self, message: str = "No tickers left after filtering, average price is undefined"):
        super().__init__(message)
