from __future__ import annotations

"""
pytest 全局配置：将项目根目录加入 sys.path，确保 `from tracker_report...` 可被导入；
并提供构造工时记录的公共夹具。
"""

import sys
from datetime import date, datetime, timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
ROOT_STR = str(ROOT)
if ROOT_STR not in sys.path:
    sys.path.insert(0, ROOT_STR)

from tracker_report.components import TimeEntry  # noqa: E402


@pytest.fixture
def make_entries():
    """生成 n 条短记录：日期递增、项目代码唯一、每条 30 分钟。"""

    def _make(n: int, minutes: int = 30, description: str = "short note"):
        base = datetime(2025, 1, 1, 9, 0, 0)
        return [
            TimeEntry(
                entry_date=date(2025, 1, 1) + timedelta(days=i // 3),
                project_code=f"PRJ-{i:03d}",
                description=description,
                duration_minutes=minutes,
                created_at=base + timedelta(minutes=i),
            )
            for i in range(n)
        ]

    return _make
