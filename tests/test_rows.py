from __future__ import annotations

from datetime import date

import pytest

from tracker_report.components import RenderingFailure, TimeEntry
from tracker_report.processors.layout import ReportLayout, wrap_text_lines
from tracker_report.processors.rows import build_row

LAYOUT = ReportLayout()
WIDTHS = LAYOUT.column_widths
FONT = "Helvetica"
SIZE = LAYOUT.base_font_size
LH = LAYOUT.line_height


def _entry(**kw) -> TimeEntry:
    data = dict(entry_date=date(2025, 1, 1), project_code="PROJ-1", description="short note", duration_minutes=90)
    data.update(kw)
    return TimeEntry(**data)


class TestBuildRow:
    def test_single_entry_cells(self):
        row = build_row(_entry(), WIDTHS, FONT, SIZE, line_height=LH, cell_padding=LAYOUT.cell_padding)
        assert row.date_text == "2025-01-01"
        assert row.project_text == "PROJ-1"
        assert row.duration_text == "1h 30m"
        assert row.description_lines == ["short note"]
        assert row.height == LH
        assert row.minutes == 90

    def test_empty_description_keeps_one_line_height(self):
        row = build_row(_entry(description=""), WIDTHS, FONT, SIZE, line_height=LH)
        assert row.description_lines == []
        assert row.height == LH

    def test_height_follows_wrapped_line_count(self):
        text = " ".join(["pagination"] * 60)
        row = build_row(_entry(description=text), WIDTHS, FONT, SIZE, line_height=LH, cell_padding=LAYOUT.cell_padding)
        expected = wrap_text_lines(text, WIDTHS[3] - 2 * LAYOUT.cell_padding, FONT, SIZE)
        assert row.description_lines == expected
        assert len(expected) > 1
        assert row.height == len(expected) * LH

    def test_string_date_rendered_as_given(self):
        row = build_row(_entry(entry_date=" 2025-02-03 "), WIDTHS, FONT, SIZE, line_height=LH)
        assert row.date_text == "2025-02-03"

    @pytest.mark.parametrize("bad", [None, -5, "abc", 1.5, True])
    def test_invalid_duration_treated_as_zero(self, bad):
        row = build_row(_entry(duration_minutes=bad), WIDTHS, FONT, SIZE, line_height=LH)
        assert row.duration_text == "0h 0m"
        assert row.minutes == 0

    def test_duration_125(self):
        row = build_row(_entry(duration_minutes=125), WIDTHS, FONT, SIZE, line_height=LH)
        assert row.duration_text == "2h 5m"

    def test_negative_height_raises(self):
        with pytest.raises(RenderingFailure):
            build_row(_entry(description="a b"), (10, 10, 10, 1), FONT, SIZE, line_height=-LH)
