"""
配置加载器

职责：
- 提供带默认值的 Pydantic 配置模型
- 可选从 JSON 文件加载配置
- 支持环境变量覆盖（PRICE_REPORT_<FIELD>）

默认值即为固定常量，不提供任何配置时行为与常量版完全一致。
"""

import json
import os
from pathlib import Path
from typing import Any, Dict, Literal, Optional
import logging

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.errors import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "PRICE_REPORT_"
CONFIG_PATH_ENV = "PRICE_REPORT_CONFIG"


class ReportConfig(BaseModel):
    """价格报告配置"""
    model_config = ConfigDict(extra='forbid')

    base_url: str = "https://api.binance.com"
    exchange_info_path: str = "/api/v3/exchangeInfo"
    ticker_price_path: str = "/api/v3/ticker/price"
    timeout_seconds: int = Field(30, ge=1, le=300)
    top_n: int = Field(5, ge=1)
    average_decimal_places: int = Field(20, ge=0, le=100)
    exclude_zero_prices: bool = False
    output_format: Literal["text", "json"] = "text"
    log_level: str = Field("WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    log_file: Optional[str] = None


class ConfigLoader:
    """
    配置加载器

    使用示例：
        >>> loader = ConfigLoader('config/price_report.json')
        >>> config = loader.load_with_env_override()
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        初始化配置加载器

        Args:
            config_path: JSON 配置文件路径（可选）
        """
        self.config_path = Path(config_path) if config_path else None

        if self.config_path is not None and not self.config_path.exists():
            logger.error(f"配置文件不存在: {self.config_path}")
            raise ConfigError(f"Config file not found: {self.config_path}")

    def load_dict(self) -> Dict[str, Any]:
        """读取配置文件为字典（无文件时返回空字典）"""
        if self.config_path is None:
            return {}

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config_dict = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"❌ JSON 解析失败: {e}")
            raise ConfigError(f"Invalid JSON in {self.config_path}: {e}") from e

        if not isinstance(config_dict, dict):
            raise ConfigError(f"Config file {self.config_path} must contain a JSON object")

        logger.info(f"✅ 配置加载成功: {self.config_path}")
        return config_dict

    def load(self) -> ReportConfig:
        """加载并校验配置"""
        return self._validate(self.load_dict())

    def load_with_env_override(self, env_prefix: str = ENV_PREFIX) -> ReportConfig:
        """
        加载配置并应用环境变量覆盖

        环境变量命名规则：
            PRICE_REPORT_TOP_N=10 -> top_n=10
        """
        config_dict = self.load_dict()

        for key, value in os.environ.items():
            if not key.startswith(env_prefix) or key == CONFIG_PATH_ENV:
                continue

            config_key = key[len(env_prefix):].lower()
            parsed_value = self._parse_env_value(value)
            config_dict[config_key] = parsed_value

            logger.info(f"🔧 环境变量覆盖: {key} = {parsed_value}")

        return self._validate(config_dict)

    def _validate(self, config_dict: Dict[str, Any]) -> ReportConfig:
        try:
            return ReportConfig(**config_dict)
        except ValidationError as e:
            logger.error(f"❌ Pydantic 配置验证失败: {e}")
            raise ConfigError(f"Invalid configuration: {e}") from e

    @staticmethod
    def _parse_env_value(value: str) -> Any:
        """
        解析环境变量值

        Returns:
            解析后的值（int, bool, str）
        """
        try:
            return int(value)
        except ValueError:
            pass

        if value.lower() in ('true', 'yes'):
            return True
        elif value.lower() in ('false', 'no'):
            return False

        return value


def load_config() -> ReportConfig:
    """
    便捷函数：加载配置

    PRICE_REPORT_CONFIG 指定 JSON 文件（可选），其余 PRICE_REPORT_* 环境变量覆盖对应字段。
    """
    loader = ConfigLoader(os.getenv(CONFIG_PATH_ENV))
    return loader.load_with_env_override()
