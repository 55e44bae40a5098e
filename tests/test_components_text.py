from __future__ import annotations

import math

import pytest

from tracker_report.components import estimate_text_width, format_duration, format_total, split_words


class TestTextWidthEstimation:
    def test_empty_text_width_is_zero(self):
        assert estimate_text_width("", 12) == 0.0

    def test_mixed_cjk_ascii_width(self):
        # "测试ABC" -> 2*CJK*12 + 3*ASCII*12*0.6 = 24 + 21.6 = 45.6
        w = estimate_text_width("测试ABC", font_size=12, char_width_ratio=0.6)
        assert math.isclose(w, 45.6, rel_tol=1e-6, abs_tol=1e-6)


class TestSplitWords:
    def test_collapses_whitespace(self):
        assert split_words("  a \t b\n\nc  ") == ["a", "b", "c"]

    def test_empty_and_none(self):
        assert split_words("") == []
        assert split_words(None) == []
        assert split_words("   \n\t ") == []


@pytest.mark.parametrize(
    "minutes,expected",
    [
        (125, "2h 5m"),
        (0, "0h 0m"),
        (90, "1h 30m"),
        (60, "1h 0m"),
        (59, "0h 59m"),
        (1440, "24h 0m"),
    ],
)
def test_format_duration(minutes: int, expected: str) -> None:
    assert format_duration(minutes) == expected


def test_format_total():
    assert format_total(90) == "Total: 1h 30m (90 minutes)"
    assert format_total(0) == "Total: 0h 0m (0 minutes)"
