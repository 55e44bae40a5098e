"""
文件路径：tracker_report/components/__init__.py

说明：
- 通用组件包入口，聚合导出日志、文件、错误、记录、文本、字体与页游标工具；
- 业务模块与测试统一使用 `from tracker_report.components import ...` 导入。
"""

from __future__ import annotations

from .logging import get_logger, retry_on_exception
from .io import FileHandler
from .errors import ErrorHandler, InvalidInputError, RenderingFailure
from .records import TimeEntry, coerce_duration
from .text import estimate_text_width, split_words, format_duration, format_total
from .fonts import is_font_registered, register_font_file, resolve_report_fonts
from .page import CursorState, PageState, PageCursor


# =============================
# 导出声明
# =============================
__all__ = [
    # 日志与重试
    "get_logger",
    "retry_on_exception",
    # 文件操作
    "FileHandler",
    # 错误处理
    "ErrorHandler",
    "InvalidInputError",
    "RenderingFailure",
    # 工时记录
    "TimeEntry",
    "coerce_duration",
    # 文本工具
    "estimate_text_width",
    "split_words",
    "format_duration",
    "format_total",
    # 字体
    "is_font_registered",
    "register_font_file",
    "resolve_report_fonts",
    # 页游标
    "CursorState",
    "PageState",
    "PageCursor",
]
