"""
价格报告格式化器

此模块负责把排好序的 Ticker 列表汇总并格式化为可读文本或 JSON
属于纯逻辑层，不包含网络调用
"""

import json
import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Sequence, Tuple

from ..core.errors import EmptyResultError
from ..models.market_data import Ticker
from ..utils.math import DEFAULT_DECIMAL_PLACES, decimal_mean, to_plain_string

logger = logging.getLogger(__name__)

TOP_N = 5

HEADER = "--- All Tickers from Binance ---"
SEPARATOR = "-------------------------------------"


def format_ticker(ticker: Ticker) -> str:
    """格式化单个 Ticker：Symbol: BTCUSDT, Price: 50000.00"""
    return f"Symbol: {ticker.symbol}, Price: {to_plain_string(ticker.price)}"


def lowest(tickers: Sequence[Ticker], n: int = TOP_N) -> List[Ticker]:
    """价格最低的 n 个（升序序列的前 n 个，不足 n 个时全部返回）"""
    return list(tickers[:n])


def highest(tickers: Sequence[Ticker], n: int = TOP_N) -> List[Ticker]:
    """
    价格最高的 n 个

    取升序序列的末尾 n 个，保持升序（不反转）。
    """
    if n <= 0:
        return []
    return list(tickers[-n:])


def average_price(tickers: Sequence[Ticker], places: int = DEFAULT_DECIMAL_PLACES) -> Decimal:
    """
    平均价格（精确十进制除法）

    Raises:
        EmptyResultError: 没有任何 Ticker
    """
    if not tickers:
        raise EmptyResultError()
    return decimal_mean((ticker.price for ticker in tickers), places=places)


def to_readable(tickers: Sequence[Ticker]) -> List[Dict[str, str]]:
    """转换为 {symbol, price} 字典列表（价格为字符串）"""
    return [ticker.to_dict() for ticker in tickers]


@dataclass(frozen=True)
class PriceReport:
    """价格报告汇总"""
    tickers: Tuple[Ticker, ...]
    lowest: Tuple[Ticker, ...]
    highest: Tuple[Ticker, ...]
    average: Decimal

    @property
    def count(self) -> int:
        return len(self.tickers)

    def to_dict(self) -> Dict:
        return {
            'tickers': to_readable(self.tickers),
            'summary': {
                'count': self.count,
                'average': to_plain_string(self.average),
            },
        }


class ReportFormatter:
    """
    报告格式化器

    使用示例：
        >>> formatter = ReportFormatter(top_n=5)
        >>> for line in formatter.iter_text(tickers):
        ...     print(line)
    """

    def __init__(self, top_n: int = TOP_N, average_decimal_places: int = DEFAULT_DECIMAL_PLACES):
        self.top_n = top_n
        self.average_decimal_places = average_decimal_places

    def build(self, tickers: Sequence[Ticker]) -> PriceReport:
        """
        构建完整报告

        Raises:
            EmptyResultError: 没有任何 Ticker
        """
        return PriceReport(
            tickers=tuple(tickers),
            lowest=tuple(lowest(tickers, self.top_n)),
            highest=tuple(highest(tickers, self.top_n)),
            average=average_price(tickers, self.average_decimal_places),
        )

    def iter_text(self, tickers: Sequence[Ticker]):
        """
        逐段生成文本报告

        平均价格最后计算，空列表时前面的内容已经产出，随后抛出 EmptyResultError。
        """
        yield HEADER
        for ticker in tickers:
            yield format_ticker(ticker)

        yield SEPARATOR
        yield f"Total tickers: {len(tickers)}"

        yield f"--- Top {self.top_n} lowest price ---"
        for ticker in lowest(tickers, self.top_n):
            yield format_ticker(ticker)

        yield f"--- Top {self.top_n} highest price ---"
        for ticker in highest(tickers, self.top_n):
            yield format_ticker(ticker)

        average = average_price(tickers, self.average_decimal_places)
        yield f"--- Average price --- {to_plain_string(average)}"

    def render_text(self, tickers: Sequence[Ticker]) -> str:
        """完整文本报告"""
        return "\n".join(self.iter_text(tickers))

    def render_json(self, tickers: Sequence[Ticker]) -> str:
        """JSON 报告：{"tickers": [...], "summary": {"count", "average"}}"""
        report = self.build(tickers)
        return json.dumps(report.to_dict(), ensure_ascii=False, indent=2)
