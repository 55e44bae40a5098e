"""
文件路径：tracker_report/data_handler.py

模块职责：
- 作为排版引擎的外部数据协作者：读取工时记录（JSON/CSV）、校验、按日期范围过滤与排序；
- 加载版式覆盖配置（JSON）。

说明：
- 校验在调用排版前完成，非法记录抛出 InvalidInputError，由 CLI 统一报告；
- 排版引擎本身不过滤、不排序，只按传入顺序绘制。

变量引用说明（来自 tracker_report/variables.py）：
- PATH_LAYOUT_JSON, CONST_ENCODING, ERR_CONFIG_LOAD_FAILED, ERR_DATA_INVALID
"""

from __future__ import annotations

import csv
import io
import json
from datetime import date, datetime
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .components import InvalidInputError, TimeEntry, get_logger
from .processors.layout import ReportLayout
from .variables import (
    PATH_LAYOUT_JSON,
    CONST_ENCODING,
    ERR_CONFIG_LOAD_FAILED,
    ERR_DATA_INVALID,
)


logger = get_logger(__name__)


def _json_loads_strip_bom(content: str):
    """解析 JSON 字符串，自动去除 UTF-8 BOM。"""
    if content.startswith("\ufeff"):
        content = content.lstrip("\ufeff")
    return json.loads(content)


def parse_iso_date(value: object, field_name: str = "entry_date") -> date:
    """解析 ISO 日期（YYYY-MM-DD）；date/datetime 直接取日期部分。"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = "" if value is None else str(value).strip()
    try:
        return date.fromisoformat(text[:10] if len(text) > 10 and text[10] in "T " else text)
    except ValueError as exc:
        raise InvalidInputError(f"{field_name} 不是合法的 ISO 日期：{value!r}", ERR_DATA_INVALID) from exc


def parse_iso_datetime(value: object) -> Optional[datetime]:
    """解析 ISO 时间戳；空值返回 None，末尾 Z 视为 UTC。"""
    if value is None or isinstance(value, datetime):
        return value
    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError as exc:
        raise InvalidInputError(f"created_at 不是合法的 ISO 时间：{value!r}", ERR_DATA_INVALID) from exc


def parse_duration(value: object) -> int:
    """解析时长（分钟）：需为非负整数，允许纯数字字符串。"""
    if isinstance(value, bool):
        raise InvalidInputError(f"duration_minutes 非法：{value!r}", ERR_DATA_INVALID)
    if isinstance(value, int):
        minutes = value
    elif isinstance(value, float) and value.is_integer():
        minutes = int(value)
    elif isinstance(value, str) and value.strip().lstrip("-").isdigit():
        minutes = int(value.strip())
    else:
        raise InvalidInputError(f"duration_minutes 不是整数：{value!r}", ERR_DATA_INVALID)
    if minutes < 0:
        raise InvalidInputError(f"duration_minutes 不能为负数：{minutes}", ERR_DATA_INVALID)
    return minutes


def parse_time_entry(raw: Mapping[str, object]) -> TimeEntry:
    """将一条原始记录（字典）校验并转换为 TimeEntry。

    必需字段：entry_date、project_code、duration_minutes；
    可选字段：description（缺省为空串）、created_at。

    异常：
        InvalidInputError: 字段缺失或格式非法。
    """
    if not isinstance(raw, Mapping):
        raise InvalidInputError(f"记录需为对象：{raw!r}", ERR_DATA_INVALID)
    project = raw.get("project_code")
    project_text = "" if project is None else str(project).strip()
    if not project_text:
        raise InvalidInputError("project_code 不能为空", ERR_DATA_INVALID)
    description = raw.get("description")
    return TimeEntry(
        entry_date=parse_iso_date(raw.get("entry_date")),
        project_code=project_text,
        description="" if description is None else str(description),
        duration_minutes=parse_duration(raw.get("duration_minutes")),
        created_at=parse_iso_datetime(raw.get("created_at")),
    )


def _parse_many(items: Iterable[Mapping[str, object]], source: Path) -> List[TimeEntry]:
    entries: List[TimeEntry] = []
    for i, obj in enumerate(items, start=1):
        try:
            entries.append(parse_time_entry(obj))
        except InvalidInputError as exc:
            raise InvalidInputError(f"{source} 第 {i} 条记录非法：{exc}", ERR_DATA_INVALID) from exc
    return entries


def load_entries_json(path: Path) -> List[TimeEntry]:
    """从 JSON 文件加载工时记录。

    支持两种结构：
    - 数组：[{"entry_date": "2025-01-01", "project_code": "P-1", ...}, {...}]
    - 对象：{"entries": [ ... ]}
    """
    content = path.read_text(encoding=CONST_ENCODING)
    data = _json_loads_strip_bom(content)
    if isinstance(data, dict) and isinstance(data.get("entries"), list):
        items = data["entries"]
    elif isinstance(data, list):
        items = data
    else:
        raise InvalidInputError("记录 JSON 结构需为数组或包含 entries 数组的对象", ERR_CONFIG_LOAD_FAILED)
    return _parse_many(items, path)


def load_entries_csv(path: Path) -> List[TimeEntry]:
    """从 CSV 文件加载工时记录（首行为表头，列名即字段名）。"""
    with path.open("r", encoding=CONST_ENCODING, newline="") as f:  # noqa: P103
        content = f.read()
    if content.startswith("\ufeff"):
        content = content.lstrip("\ufeff")
    reader = csv.DictReader(io.StringIO(content))
    rows: List[Dict[str, object]] = [dict(row) for row in reader if row]
    return _parse_many(rows, path)


def parse_date_range(start: object, end: object) -> Tuple[date, date]:
    """解析并校验日期范围（闭区间，start <= end）。"""
    start_d = parse_iso_date(start, "start_date")
    end_d = parse_iso_date(end, "end_date")
    if start_d > end_d:
        raise InvalidInputError(f"起始日期晚于结束日期：{start_d} > {end_d}", ERR_DATA_INVALID)
    return start_d, end_d


def filter_entries_by_range(entries: Iterable[TimeEntry], start: date, end: date) -> List[TimeEntry]:
    """保留 start <= entry_date <= end 的记录（保持原有顺序）。"""
    return [e for e in entries if start <= parse_iso_date(e.entry_date) <= end]


def _sort_key(entry: TimeEntry) -> Tuple[date, int, float]:
    created = entry.created_at
    return (parse_iso_date(entry.entry_date), 0 if created is not None else 1, created.timestamp() if created else 0.0)


def sort_entries(entries: Iterable[TimeEntry]) -> List[TimeEntry]:
    """按 (entry_date 升序, created_at 升序) 稳定排序；缺少 created_at 的记录排在同日最后。"""
    return sorted(entries, key=_sort_key)


def load_layout_config(config_path: Optional[Path] = None) -> ReportLayout:
    """加载版式覆盖配置 JSON 并构建 ReportLayout。

    参数：
        config_path: 配置路径；默认读取 `config/report_layout.json`，不存在时使用默认版式。

    异常：
        InvalidInputError: 配置无法解析、结构不是对象或字段取值非法（错误码 ERR_CONFIG_LOAD_FAILED）。
    """
    path = config_path or PATH_LAYOUT_JSON
    if not path.exists():
        if config_path is not None:
            logger.warning("找不到版式配置文件，将使用默认版式：%s", path)
        return ReportLayout()
    try:
        data = _json_loads_strip_bom(path.read_text(encoding=CONST_ENCODING))
    except (OSError, ValueError) as exc:
        raise InvalidInputError(f"版式配置加载失败: {exc}", ERR_CONFIG_LOAD_FAILED) from exc
    if not isinstance(data, dict):
        raise InvalidInputError(f"版式配置需为对象结构：{path}", ERR_CONFIG_LOAD_FAILED)
    logger.info("已加载版式配置：%s（%s 项）", path, len(data))
    return ReportLayout.from_overrides(data)


__all__ = [
    "parse_iso_date",
    "parse_iso_datetime",
    "parse_duration",
    "parse_time_entry",
    "load_entries_json",
    "load_entries_csv",
    "parse_date_range",
    "filter_entries_by_range",
    "sort_entries",
    "load_layout_config",
]
