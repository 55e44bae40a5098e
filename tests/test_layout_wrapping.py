"""
文件路径：tests/test_layout_wrapping.py

用例目的：验证文本度量与贪心换行规则。

覆盖场景：
- 空文本返回空列表；连续空白合并
- 每行宽度不超过最大宽度（超宽单词独占一行除外）
- 对已换行结果重新换行结果不变
- 度量单调性与未注册字体回退
"""

from __future__ import annotations

import pytest

from tracker_report.components import estimate_text_width
from tracker_report.processors.layout import measure_text_width, wrap_text_lines

FONT = "Helvetica"
SIZE = 10.0

SAMPLE = (
    "Reviewed the quarterly planning document with the team, collected open questions "
    "about the reporting pipeline and drafted follow-up tasks for the next sprint. "
    "Pairing session on pagination edge cases; supercalifragilisticexpialidocious-identifier review."
)


class TestMeasureTextWidth:
    def test_empty_is_zero(self):
        assert measure_text_width("", FONT, SIZE) == 0.0

    def test_monotonic_under_suffix(self):
        prefix = ""
        last = 0.0
        for ch in "Hello, world! iiii WWWW 123":
            prefix += ch
            w = measure_text_width(prefix, FONT, SIZE)
            assert w >= last
            last = w

    def test_scales_with_size(self):
        assert measure_text_width("abc", FONT, 20) == pytest.approx(2 * measure_text_width("abc", FONT, 10))

    def test_missing_glyph_does_not_raise(self):
        # 标准字体不含中文字形，由 notdef 替代计宽
        assert measure_text_width("汉字", FONT, SIZE) >= 0.0

    def test_unregistered_font_falls_back_to_estimate(self):
        w = measure_text_width("abc", "NoSuchFont-Regular", SIZE)
        assert w == pytest.approx(estimate_text_width("abc", SIZE))


class TestWrapTextLines:
    def test_empty_returns_empty_list(self):
        assert wrap_text_lines("", 100, FONT, SIZE) == []
        assert wrap_text_lines("   ", 100, FONT, SIZE) == []
        assert wrap_text_lines(None, 100, FONT, SIZE) == []

    def test_short_text_single_line_collapses_whitespace(self):
        assert wrap_text_lines("  short \n\t note ", 500, FONT, SIZE) == ["short note"]

    @pytest.mark.parametrize("max_width", [40.0, 80.0, 150.0, 260.0])
    def test_lines_fit_unless_single_overlong_word(self, max_width: float):
        lines = wrap_text_lines(SAMPLE, max_width, FONT, SIZE)
        assert lines
        for line in lines:
            if measure_text_width(line, FONT, SIZE) > max_width:
                assert " " not in line

    @pytest.mark.parametrize("max_width", [40.0, 80.0, 150.0, 260.0])
    def test_greedy_next_word_would_overflow(self, max_width: float):
        lines = wrap_text_lines(SAMPLE, max_width, FONT, SIZE)
        for current, following in zip(lines, lines[1:]):
            first_word = following.split(" ")[0]
            assert measure_text_width(f"{current} {first_word}", FONT, SIZE) > max_width

    def test_words_preserved_in_order(self):
        lines = wrap_text_lines(SAMPLE, 120, FONT, SIZE)
        assert " ".join(lines).split(" ") == SAMPLE.split()

    @pytest.mark.parametrize("max_width", [40.0, 120.0, 300.0])
    def test_rewrap_is_fixed_point(self, max_width: float):
        lines = wrap_text_lines(SAMPLE, max_width, FONT, SIZE)
        assert wrap_text_lines(" ".join(lines), max_width, FONT, SIZE) == lines

    def test_overlong_word_alone_on_line(self):
        word = "x" * 80
        lines = wrap_text_lines(f"ab {word} cd", 50, FONT, SIZE)
        assert lines == ["ab", word, "cd"]

    def test_exact_fit_stays_on_line(self):
        text = "alpha beta"
        exact = measure_text_width(text, FONT, SIZE)
        assert wrap_text_lines(text, exact, FONT, SIZE) == ["alpha beta"]
        assert wrap_text_lines(text, exact - 0.01, FONT, SIZE) == ["alpha", "beta"]

    def test_non_positive_width_one_word_per_line(self):
        assert wrap_text_lines("a b c", 0, FONT, SIZE) == ["a", "b", "c"]

    def test_does_not_mutate_and_is_deterministic(self):
        text = str(SAMPLE)
        first = wrap_text_lines(text, 100, FONT, SIZE)
        second = wrap_text_lines(text, 100, FONT, SIZE)
        assert first == second
        assert text == SAMPLE
