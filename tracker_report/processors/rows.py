"""
文件路径：tracker_report/processors/rows.py

说明：行构建。由单条工时记录计算四个单元格文本、描述换行结果与行高。

行高 = max(单行行高, 描述行数 * 行高)，描述为空时仍保留一行高度。
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from ..components import RenderingFailure, TimeEntry, coerce_duration, format_duration
from .layout import wrap_text_lines


@dataclass
class RenderedRow:
    """单行的渲染结果（绘制后即丢弃）。"""

    date_text: str
    project_text: str
    duration_text: str
    description_lines: List[str]
    height: float
    minutes: int


def build_row(
    entry: TimeEntry,
    column_widths: Sequence[float],
    font_name: str,
    font_size: float,
    *,
    line_height: float,
    cell_padding: float = 0.0,
) -> RenderedRow:
    """构建单行。

    参数：
        entry: 工时记录。
        column_widths: 四栏宽度（日期、项目、时长、描述）。
        font_name, font_size: 正文字体与字号。
        line_height: 单行行高。
        cell_padding: 单元格左右内边距，描述按 栏宽 - 2 * 内边距 换行。

    异常：
        RenderingFailure: 计算出的行高为负或非有限值。
    """
    minutes = coerce_duration(entry.duration_minutes)
    max_width = column_widths[3] - 2 * cell_padding
    lines = wrap_text_lines(entry.description, max_width, font_name, font_size)
    height = max(line_height, len(lines) * line_height)
    if not math.isfinite(height) or height < 0:
        raise RenderingFailure(f"行高非法：{height}（记录 {entry.date_text} / {entry.project_code}）")
    return RenderedRow(
        date_text=entry.date_text,
        project_text=str(entry.project_code).strip(),
        duration_text=format_duration(minutes),
        description_lines=lines,
        height=height,
        minutes=minutes,
    )


__all__ = ["RenderedRow", "build_row"]
