"""
Price Report 主入口 (Main Entry)

从源码目录直接运行：python main.py
安装后也可以使用 price-report 命令或 python -m price_report。
"""

import sys
from pathlib import Path

# 添加 src 路径
PROJECT_ROOT = Path(__file__).parent.absolute()
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from price_report.main import main


if __name__ == '__main__':
    sys.exit(main())
