"""
文件路径：tracker_report/processors/engines/__init__.py

说明：绘制引擎包，当前仅提供 ReportLab 画布实现：`reportlab.py`。
"""

from typing import List

__all__: List[str] = []
