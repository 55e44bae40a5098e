"""
文件路径：tracker_report/components/text.py

说明：文本宽度估算、分词与时长格式化等纯函数工具。
"""

from __future__ import annotations

from typing import List, Optional

from ..variables import (
    CONST_CHAR_WIDTH_RATIO,
    CONST_DURATION_TEMPLATE,
    CONST_TOTAL_TEMPLATE,
)


def estimate_text_width(
    text: str,
    font_size: float,
    char_width_ratio: float = CONST_CHAR_WIDTH_RATIO,
) -> float:
    """估算文本宽度（简化版，字体未注册时的回退度量）。

    - 非 ASCII 字符按 font_size 计算；ASCII 按 font_size * char_width_ratio。
    """
    if not text:
        return 0.0
    width = 0.0
    for char in text:
        if ord(char) > 127:
            width += font_size
        else:
            width += font_size * char_width_ratio
    return width


def split_words(text: Optional[str]) -> List[str]:
    """按空白切分单词：连续空白合并，首尾空白丢弃。"""
    if not text:
        return []
    return str(text).split()


def format_duration(minutes: int) -> str:
    """分钟数格式化为 "{小时}h {分钟}m"，例如 125 -> "2h 5m"。"""
    hours, rest = divmod(int(minutes), 60)
    return CONST_DURATION_TEMPLATE.format(hours=hours, minutes=rest)


def format_total(minutes: int) -> str:
    """合计行文本，例如 "Total: 1h 30m (90 minutes)"。"""
    return CONST_TOTAL_TEMPLATE.format(duration=format_duration(minutes), minutes=int(minutes))


__all__ = [
    "estimate_text_width",
    "split_words",
    "format_duration",
    "format_total",
]
