"""
日志配置模块 (Logging Configuration)

提供统一的日志配置和管理功能。

核心功能：
- 配置根 Logger（所有模块自动继承）
- 控制台输出（输出到 Stderr，Stdout 只留给报告）
- 文件输出（可选，轮转日志）
- 避免重复添加 Handler
"""

import os
import sys
import logging
import logging.handlers
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(level: str = "WARNING", log_file: Optional[str] = None):
    """
    配置根 Logger

    Args:
        level (str): 日志级别（DEBUG/INFO/WARNING/ERROR）
        log_file (Optional[str]): 日志文件路径，None 表示不写文件
    """
    root_logger = logging.getLogger()

    # 清理旧 Handlers（避免重复）
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    log_level = getattr(logging, level.upper(), logging.WARNING)
    root_logger.setLevel(log_level)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            log_dir = os.path.dirname(log_file)
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10485760,  # 10MB
                backupCount=5,
                encoding='utf-8'
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

        except OSError as e:
            # 文件 Handler 失败不影响报告生成
            print(f"警告: 无法创建日志文件: {e}", file=sys.stderr)

    # 降低第三方库的日志级别
    logging.getLogger('aiohttp').setLevel(logging.WARNING)
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    logging.getLogger(__name__).info(f"日志系统初始化完成: level={level}")
