"""
文件路径：tests/test_main_cli.py

用例目的：验证命令行入口的完整流程：读取记录 → 过滤排序 → 排版 → 写出/JSON 信封。
"""

from __future__ import annotations

import base64
import io
import json
from pathlib import Path

import pdfplumber
import pytest

import main as cli


def _write_entries(path: Path) -> Path:
    records = [
        {"entry_date": "2025-01-03", "project_code": "LATE", "duration_minutes": 15, "created_at": "2025-01-03T08:00:00Z"},
        {"entry_date": "2025-01-01", "project_code": "EARLY", "description": "short note", "duration_minutes": 90},
        {"entry_date": "2024-12-31", "project_code": "OUTSIDE", "duration_minutes": 999},
    ]
    path.write_text(json.dumps(records), encoding="utf-8")
    return path


def test_cli_writes_pdf_filtered_and_sorted(tmp_path: Path, capsys):
    entries = _write_entries(tmp_path / "entries.json")
    out = tmp_path / "out" / "report.pdf"
    code = cli.main(["--entries-json", str(entries), "--start", "2025-01-01", "--end", "2025-01-31", "--output", str(out)])
    assert code == 0
    assert out.exists()
    with pdfplumber.open(str(out)) as pdf:
        text = pdf.pages[0].extract_text() or ""
    assert "OUTSIDE" not in text
    assert text.index("EARLY") < text.index("LATE")
    assert "Total: 1h 45m (105 minutes)" in text
    assert "报表已生成" in capsys.readouterr().out


def test_cli_json_envelope(tmp_path: Path, capsys):
    entries = _write_entries(tmp_path / "entries.json")
    code = cli.main(["--entries-json", str(entries), "--start", "2025-01-01", "--end", "2025-01-03", "--json-envelope"])
    assert code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["filename"] == "time-entries-2025-01-01_to_2025-01-03.pdf"
    assert payload["mimeType"] == "application/pdf"
    assert payload["count"] == 2
    assert payload["total_minutes"] == 105
    pdf_bytes = base64.b64decode(payload["base64"])
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        assert len(pdf.pages) == 1


def test_cli_default_range_from_entries(tmp_path: Path):
    entries = _write_entries(tmp_path / "entries.json")
    args = cli.parse_args(["--entries-json", str(entries)])
    loaded = cli.load_entries_from_args(args)
    start, end = cli.resolve_date_range(loaded, None, None)
    assert (start.isoformat(), end.isoformat()) == ("2024-12-31", "2025-01-03")


def test_cli_rejects_invalid_records(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text(json.dumps([{"entry_date": "2025-01-01", "project_code": "", "duration_minutes": 5}]), encoding="utf-8")
    with pytest.raises(SystemExit):
        cli.main(["--entries-json", str(p), "--output", str(tmp_path / "never.pdf")])
    assert not (tmp_path / "never.pdf").exists()


def test_cli_requires_input():
    with pytest.raises(SystemExit):
        cli.main([])


@pytest.mark.parametrize(
    "layout_text, code",
    [
        ("{not json", "4001"),
        ("[1, 2]", "4001"),
        (json.dumps({"column_ratios": [1, 1]}), "4001"),
    ],
)
def test_cli_rejects_bad_layout_config(tmp_path: Path, layout_text: str, code: str):
    entries = _write_entries(tmp_path / "entries.json")
    layout = tmp_path / "layout.json"
    layout.write_text(layout_text, encoding="utf-8")
    out = tmp_path / "never.pdf"
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--entries-json", str(entries), "--layout-json", str(layout), "--output", str(out)])
    assert f"[{code}]" in str(excinfo.value.code)
    assert not out.exists()
