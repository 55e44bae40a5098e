"""
文件路径：tracker_report/processors/__init__.py

说明：
- 排版处理包：
  - layout.py（版式参数、文本度量、贪心换行）
  - rows.py（行构建与行高计算）
  - engines/reportlab.py（画布绘制原语）
"""

from .layout import ReportLayout, measure_text_width, wrap_text_lines
from .rows import RenderedRow, build_row

__all__ = [
    "ReportLayout",
    "measure_text_width",
    "wrap_text_lines",
    "RenderedRow",
    "build_row",
]
