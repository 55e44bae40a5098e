"""
文件路径：tracker_report/components/records.py

说明：工时记录（TimeEntry）数据结构与时长容错。

- TimeEntry 由调用方构造，排版过程只读，不做排序与过滤；
- 时长非法（None、负数、布尔、非整数）时按 0 处理并记录告警，保证文档总能生成。
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from .logging import get_logger


logger = get_logger(__name__)


@dataclass(frozen=True)
class TimeEntry:
    """单条工时记录。

    属性：
        entry_date: 记录日期（date 或 ISO 字符串 YYYY-MM-DD）。
        project_code: 项目代码，非空。
        description: 自由文本描述，可为空。
        duration_minutes: 时长（分钟）。
        created_at: 创建时间，仅用于稳定排序，不在报表中显示。
    """

    entry_date: Union[date, str]
    project_code: str
    description: str = ""
    duration_minutes: Optional[int] = 0
    created_at: Optional[datetime] = None

    @property
    def date_text(self) -> str:
        if isinstance(self.entry_date, date):
            return self.entry_date.strftime("%Y-%m-%d")
        return str(self.entry_date).strip()


def coerce_duration(value: object) -> int:
    """将时长规整为非负整数；非法值替换为 0。"""
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning("时长不是整数，已按 0 处理：%r", value)
        return 0
    if value < 0:
        logger.warning("时长为负数，已按 0 处理：%s", value)
        return 0
    return value


__all__ = ["TimeEntry", "coerce_duration"]
