"""
Price Report 主入口 (Main Entry)

负责：
- 加载环境变量与配置
- 配置日志
- 依次执行：获取可交易交易对 -> 获取价格 -> 输出报告
- 顶层错误边界：已知错误 / 未知错误分类输出到 stderr
"""

import asyncio
import logging
import sys
from typing import Optional, TextIO

from dotenv import load_dotenv

from .config.settings import ReportConfig, load_config
from .core.errors import PriceReportError
from .data_manager.market_data_fetcher import MarketDataFetcher
from .formatters.report_formatter import ReportFormatter
from .gateways.binance.rest_api import BinanceRestClient
from .utils.logger import setup_logging

logger = logging.getLogger(__name__)


class ReportRunner:
    """
    报告运行器

    使用示例：
        >>> runner = ReportRunner(ReportConfig())
        >>> exit_code = asyncio.run(runner.run())
    """

    def __init__(
        self,
        config: ReportConfig,
        rest_client: Optional[BinanceRestClient] = None,
        out: Optional[TextIO] = None,
        err: Optional[TextIO] = None
    ):
        self.config = config
        self.rest_client = rest_client or BinanceRestClient(
            base_url=config.base_url,
            timeout=config.timeout_seconds,
            exchange_info_path=config.exchange_info_path,
            ticker_price_path=config.ticker_price_path
        )
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.formatter = ReportFormatter(
            top_n=config.top_n,
            average_decimal_places=config.average_decimal_places
        )

    def _print(self, line: str):
        print(line, file=self.out, flush=True)

    async def execute(self):
        """执行完整流程（不捕获异常）"""
        async with self.rest_client as client:
            fetcher = MarketDataFetcher(client, exclude_zero_prices=self.config.exclude_zero_prices)

            tradable = await fetcher.fetch_tradable_symbols()
            tickers = await fetcher.fetch_tickers(tradable)

        if self.config.output_format == "json":
            self._print(self.formatter.render_json(tickers))
            return

        # 逐行输出，失败前已打印的内容保留
        for line in self.formatter.iter_text(tickers):
            self._print(line)

    async def run(self) -> int:
        """
        执行并处理所有错误

        Returns:
            int: 退出码（0 成功，1 失败）
        """
        try:
            await self.execute()
            return 0
        except PriceReportError as e:
            logger.debug(f"❌ 报告生成失败: {type(e).__name__}", exc_info=True)
            print(f"Error: {e}", file=self.err)
            return 1
        except Exception as e:
            logger.debug(f"❌ 未知错误: {type(e).__name__}", exc_info=True)
            print(f"Unknown error: {e!r}", file=self.err)
            return 1


def main() -> int:
    """命令行入口"""
    load_dotenv()

    try:
        config = load_config()
    except PriceReportError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config.log_level, config.log_file)

    runner = ReportRunner(config)
    return asyncio.run(runner.run())


if __name__ == '__main__':
    sys.exit(main())
