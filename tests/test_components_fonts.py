from __future__ import annotations

from pathlib import Path

from tracker_report.components import is_font_registered, register_font_file, resolve_report_fonts


def test_standard_fonts_are_registered():
    assert is_font_registered("Helvetica")
    assert is_font_registered("Helvetica-Bold")
    assert not is_font_registered("NoSuchFont-Regular")


def test_register_missing_or_non_ttf_returns_none(tmp_path: Path):
    assert register_font_file(tmp_path / "missing.ttf") is None
    txt = tmp_path / "font.txt"
    txt.write_text("not a font", encoding="utf-8")
    assert register_font_file(txt) is None


def test_register_broken_ttf_returns_none(tmp_path: Path):
    broken = tmp_path / "broken.ttf"
    broken.write_bytes(b"\x00\x01 definitely not a truetype file")
    assert register_font_file(broken) is None


def test_resolve_falls_back_to_builtin(tmp_path: Path):
    assert resolve_report_fonts(tmp_path / "missing.ttf", None) == ("Helvetica", "Helvetica-Bold")
    assert resolve_report_fonts(None, None, regular_name="NoSuchFont") == ("Helvetica", "Helvetica-Bold")
