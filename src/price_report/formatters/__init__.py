"""
报告格式化模块
"""

from .report_formatter import PriceReport, ReportFormatter

__all__ = ['PriceReport', 'ReportFormatter']
