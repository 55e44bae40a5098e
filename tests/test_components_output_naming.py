from __future__ import annotations

from pathlib import Path

import pytest

from tracker_report.components import FileHandler
from tracker_report.variables import ERR_PDF_WRITE_FAILED, PATH_OUTPUT_DIR


def test_report_filename():
    assert FileHandler.report_filename("2025-01-01", "2025-01-31") == "time-entries-2025-01-01_to_2025-01-31.pdf"


def test_report_output_path_default_dir():
    out = FileHandler.report_output_path("2025-01-01", "2025-01-02")
    assert out.parent == PATH_OUTPUT_DIR
    assert out.name == "time-entries-2025-01-01_to_2025-01-02.pdf"


def test_report_output_path_custom_dir(tmp_path: Path):
    out = FileHandler.report_output_path("2025-01-01", "2025-01-02", output_dir=tmp_path / "reports")
    assert out.parent == tmp_path / "reports"
    assert out.parent.exists()


def test_write_bytes_creates_parent(tmp_path: Path):
    target = tmp_path / "a" / "b" / "r.pdf"
    FileHandler.write_bytes(target, b"%PDF-1.4")
    assert target.read_bytes() == b"%PDF-1.4"


def test_write_bytes_retries_then_raises(tmp_path: Path, monkeypatch):
    calls = []

    def _boom(target):
        calls.append(target)
        raise PermissionError("denied")

    monkeypatch.setattr(FileHandler, "ensure_parent_writable", staticmethod(_boom))
    monkeypatch.setattr("time.sleep", lambda s: None)
    with pytest.raises(OSError, match=f"\\[{ERR_PDF_WRITE_FAILED}\\]") as excinfo:
        FileHandler.write_bytes(tmp_path / "r.pdf", b"x")
    assert len(calls) == 3  # 首次 + 2 次重试
    assert isinstance(excinfo.value.__cause__, PermissionError)
    assert not (tmp_path / "r.pdf").exists()


def test_validate_readable_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        FileHandler.validate_readable_file(tmp_path / "missing.json")
