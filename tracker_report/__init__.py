"""
文件路径：tracker_report/__init__.py

工时报表生成引擎：将按时间排序的工时记录合成为带品牌页眉、斑马纹表格、
描述自动换行、自动分页与合计行的 PDF 文档。
"""

from .components import InvalidInputError, RenderingFailure, TimeEntry
from .processors.layout import ReportLayout
from .report_composer import ReportComposer, ReportResult, ReportTotals, compose_report

__version__ = "0.1.0"

__all__ = [
    "TimeEntry",
    "ReportLayout",
    "ReportComposer",
    "ReportResult",
    "ReportTotals",
    "compose_report",
    "InvalidInputError",
    "RenderingFailure",
]
