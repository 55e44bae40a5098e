"""
文件路径：main.py

命令行入口：
- 功能：读取工时记录（JSON/CSV），按日期范围过滤并排序，合成 PDF 报表写入 output 目录。
- 依赖：`tracker_report/data_handler.py`、`tracker_report/report_composer.py`、
  `tracker_report/components`、`tracker_report/variables.py`。

快速使用示例：
    # 1) 生成一份示例工时记录
    python main.py --make-example

    # 2) 使用示例记录生成报表（日期范围缺省为记录中的最早/最晚日期）
    python main.py --entries-json examples/time_entries.json

    # 3) 指定日期范围与输出路径
    python main.py --entries-csv data.csv --start 2025-01-01 --end 2025-01-31 --output out/report.pdf

    # 4) 以 JSON 信封输出（base64 + 文件名 + 合计），便于上层服务直接转发
    python main.py --entries-json examples/time_entries.json --json-envelope

运行说明：
- 修改版式：提供 --layout-json（结构为 {"字段名": 值}，字段见 ReportLayout），
  或放置 config/report_layout.json。
- 非法记录（日期、项目代码、时长）会直接报错退出，不生成残缺文档。
"""

from __future__ import annotations

import argparse
import base64
import json
import sys
from datetime import date
from pathlib import Path
from typing import List, Optional, Tuple

from tracker_report.components import FileHandler, InvalidInputError, TimeEntry, get_logger
from tracker_report.data_handler import (
    filter_entries_by_range,
    load_entries_csv,
    load_entries_json,
    load_layout_config,
    parse_date_range,
    sort_entries,
)
from tracker_report.report_composer import ReportComposer, ReportResult
from tracker_report.variables import (
    PATH_EXAMPLE_ENTRIES_JSON,
    PATH_EXAMPLES_DIR,
    CONST_ENCODING,
)


logger = get_logger(__name__)


def _ensure_example_entries() -> Path:
    """若 `examples/time_entries.json` 不存在，则生成一份示例记录。"""
    PATH_EXAMPLES_DIR.mkdir(parents=True, exist_ok=True)
    path = PATH_EXAMPLE_ENTRIES_JSON
    if path.exists():
        return path
    entries = [
        {
            "entry_date": "2025-01-01",
            "project_code": "PROJ-1",
            "description": "short note",
            "duration_minutes": 90,
            "created_at": "2025-01-01T09:00:00Z",
        },
        {
            "entry_date": "2025-01-02",
            "project_code": "PROJ-2",
            "description": (
                "Reviewed the quarterly planning document with the team, collected open questions "
                "about the reporting pipeline and drafted follow-up tasks for the next sprint."
            ),
            "duration_minutes": 125,
            "created_at": "2025-01-02T10:30:00Z",
        },
        {
            "entry_date": "2025-01-02",
            "project_code": "OPS",
            "description": "",
            "duration_minutes": 30,
            "created_at": "2025-01-02T16:00:00Z",
        },
    ]
    path.write_text(json.dumps({"entries": entries}, ensure_ascii=False, indent=2), encoding=CONST_ENCODING)
    logger.info("已生成示例记录：%s", path)
    return path


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="工时报表生成工具（PDF：品牌页眉 + 斑马纹表格 + 自动分页 + 合计）")
    parser.add_argument("--entries-json", dest="entries_json", type=Path, default=None, help="工时记录 JSON（数组或包含 entries 数组）")
    parser.add_argument("--entries-csv", dest="entries_csv", type=Path, default=None, help="工时记录 CSV，首行为字段名表头")
    parser.add_argument("--start", type=str, default=None, help="起始日期 YYYY-MM-DD（默认取记录最早日期）")
    parser.add_argument("--end", type=str, default=None, help="结束日期 YYYY-MM-DD（默认取记录最晚日期）")
    parser.add_argument("--output", type=Path, default=None, help="输出 PDF 路径（可省略，默认 output/time-entries-<start>_to_<end>.pdf）")
    parser.add_argument("--layout-json", dest="layout_json", type=Path, default=None, help="版式覆盖配置 JSON")
    parser.add_argument("--json-envelope", dest="json_envelope", action="store_true", help="向标准输出打印 {base64, filename, mimeType, count, total_minutes}")
    parser.add_argument("--make-example", action="store_true", help="若示例记录不存在则生成一份")
    return parser.parse_args(argv)


def load_entries_from_args(args: argparse.Namespace) -> List[TimeEntry]:
    entries: List[TimeEntry] = []
    if args.entries_json:
        FileHandler.validate_readable_file(args.entries_json)
        entries.extend(load_entries_json(args.entries_json))
    if args.entries_csv:
        FileHandler.validate_readable_file(args.entries_csv)
        entries.extend(load_entries_csv(args.entries_csv))
    return entries


def resolve_date_range(
    entries: List[TimeEntry],
    start: Optional[str],
    end: Optional[str],
) -> Tuple[date, date]:
    """确定日期范围：显式参数优先，否则取记录中的最早/最晚日期，无记录时取今天。"""
    dates = sorted(e.entry_date for e in entries if isinstance(e.entry_date, date))
    today = date.today()
    start_value = start or (dates[0].isoformat() if dates else today.isoformat())
    end_value = end or (dates[-1].isoformat() if dates else start_value)
    return parse_date_range(start_value, end_value)


def build_envelope(result: ReportResult) -> dict:
    """上层服务使用的响应结构（PDF 以 base64 编码）。"""
    return {
        "base64": base64.b64encode(result.pdf_bytes).decode("ascii"),
        "filename": result.filename,
        "mimeType": result.mime_type,
        "count": result.entry_count,
        "total_minutes": result.total_minutes,
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.make_example:
        path = _ensure_example_entries()
        print(f"示例记录已就绪：{path}")
        return 0

    if not args.entries_json and not args.entries_csv:
        raise SystemExit("请提供 --entries-json 或 --entries-csv（或使用 --make-example 生成示例）")

    try:
        raw_entries = load_entries_from_args(args)
        start_d, end_d = resolve_date_range(raw_entries, args.start, args.end)
        composer = ReportComposer(load_layout_config(args.layout_json))
    except InvalidInputError as exc:
        logger.error("输入数据非法：%s", exc)
        raise SystemExit(str(exc)) from exc

    entries = sort_entries(filter_entries_by_range(raw_entries, start_d, end_d))
    logger.info("读取 %s 条记录，范围内 %s 条：%s ~ %s", len(raw_entries), len(entries), start_d, end_d)
    result = composer.compose(entries, (start_d.isoformat(), end_d.isoformat()))

    if args.json_envelope:
        json.dump(build_envelope(result), sys.stdout, ensure_ascii=False)
        sys.stdout.write("\n")
        return 0

    out = args.output or FileHandler.report_output_path(start_d.isoformat(), end_d.isoformat())
    FileHandler.write_bytes(out, result.pdf_bytes)
    print(f"报表已生成：{out}（{result.page_count} 页，{result.entry_count} 条，合计 {result.total_minutes} 分钟）")
    return 0


if __name__ == "__main__":
    sys.exit(main())
