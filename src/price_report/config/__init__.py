from .settings import ConfigLoader, ReportConfig, load_config

__all__ = ['ConfigLoader', 'ReportConfig', 'load_config']
