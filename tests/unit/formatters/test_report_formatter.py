"""
报告格式化器测试
"""

import json
import pytest
from decimal import Decimal

from price_report.core.errors import EmptyResultError
from price_report.formatters.report_formatter import (
    ReportFormatter,
    average_price,
    format_ticker,
    highest,
    lowest,
    to_readable,
)


class TestSelection:
    """lowest / highest 测试"""

    def test_lowest_and_highest_take_five(self, ticker_factory):
        """测试取前 5 / 后 5（后 5 保持升序）"""
        tickers = ticker_factory(*[(f"S{i}USDT", str(i)) for i in range(1, 9)])

        assert [t.symbol for t in lowest(tickers)] == ["S1USDT", "S2USDT", "S3USDT", "S4USDT", "S5USDT"]
        assert [t.symbol for t in highest(tickers)] == ["S4USDT", "S5USDT", "S6USDT", "S7USDT", "S8USDT"]

    def test_fewer_than_five_returns_all(self, ticker_factory):
        """测试不足 5 个时返回全部，无填充"""
        tickers = ticker_factory(("AUSDT", "1"), ("BUSDT", "2"))

        assert lowest(tickers) == tickers
        assert highest(tickers) == tickers

    def test_empty_selection(self):
        """测试空列表"""
        assert lowest([]) == []
        assert highest([]) == []


class TestAveragePrice:
    """average_price 测试"""

    def test_exact_average(self, ticker_factory):
        """测试 1.1, 2.2, 3.3 平均值精确为 2.2"""
        tickers = ticker_factory(("A", "1.1"), ("B", "2.2"), ("C", "3.3"))

        average = average_price(tickers)

        assert average == Decimal("2.2")
        assert str(average) == "2.2"

    def test_single_ticker_keeps_scale(self, ticker_factory):
        """测试单个 Ticker 平均值保留小数位"""
        tickers = ticker_factory(("BTCUSDT", "50000.00"))

        assert str(average_price(tickers)) == "50000.00"

    def test_non_terminating_is_rounded(self, ticker_factory):
        """测试除不尽时按位数四舍五入"""
        tickers = ticker_factory(("A", "1"), ("B", "1"), ("C", "0"))

        assert str(average_price(tickers)) == "0.66666666666666666667"
        assert str(average_price(tickers, places=4)) == "0.6667"

    def test_empty_raises(self):
        """测试空列表抛出 EmptyResultError"""
        with pytest.raises(EmptyResultError):
            average_price([])


class TestRendering:
    """文本 / JSON 渲染测试"""

    def test_format_ticker_plain_notation(self, ticker_factory):
        """测试价格不使用科学计数法"""
        ticker = ticker_factory(("SHIBUSDT", "0.00000001"))[0]

        assert format_ticker(ticker) == "Symbol: SHIBUSDT, Price: 0.00000001"

    def test_to_readable(self, ticker_factory):
        """测试转换为字符串价格字典"""
        tickers = ticker_factory(("BTCUSDT", "50000.00"))

        assert to_readable(tickers) == [{"symbol": "BTCUSDT", "price": "50000.00"}]

    def test_render_text(self, ticker_factory):
        """测试完整文本报告"""
        tickers = ticker_factory(("DOGEUSDT", "0.1"), ("BTCUSDT", "50000.00"))

        text = ReportFormatter().render_text(tickers)

        assert text.splitlines() == [
            "--- All Tickers from Binance ---",
            "Symbol: DOGEUSDT, Price: 0.1",
            "Symbol: BTCUSDT, Price: 50000.00",
            "-------------------------------------",
            "Total tickers: 2",
            "--- Top 5 lowest price ---",
            "Symbol: DOGEUSDT, Price: 0.1",
            "Symbol: BTCUSDT, Price: 50000.00",
            "--- Top 5 highest price ---",
            "Symbol: DOGEUSDT, Price: 0.1",
            "Symbol: BTCUSDT, Price: 50000.00",
            "--- Average price --- 25000.05",
        ]

    def test_iter_text_fails_only_at_average(self):
        """测试空列表时平均价格之前的内容已经产出"""
        lines = []

        with pytest.raises(EmptyResultError):
            for line in ReportFormatter().iter_text([]):
                lines.append(line)

        assert lines[0] == "--- All Tickers from Binance ---"
        assert "Total tickers: 0" in lines
        assert not any(line.startswith("--- Average price") for line in lines)

    def test_custom_top_n(self, ticker_factory):
        """测试自定义 top_n"""
        tickers = ticker_factory(("A", "1"), ("B", "2"), ("C", "3"))

        report = ReportFormatter(top_n=2).build(tickers)

        assert [t.symbol for t in report.lowest] == ["A", "B"]
        assert [t.symbol for t in report.highest] == ["B", "C"]

    def test_render_json(self, ticker_factory):
        """测试 JSON 报告结构"""
        tickers = ticker_factory(("A", "1.1"), ("B", "2.2"), ("C", "3.3"))

        document = json.loads(ReportFormatter().render_json(tickers))

        assert document == {
            "tickers": [
                {"symbol": "A", "price": "1.1"},
                {"symbol": "B", "price": "2.2"},
                {"symbol": "C", "price": "3.3"},
            ],
            "summary": {"count": 3, "average": "2.2"},
        }

    def test_build_empty_raises(self):
        """测试空列表构建报告抛出 EmptyResultError"""
        with pytest.raises(EmptyResultError):
            ReportFormatter().build([])
