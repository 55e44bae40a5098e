"""
文件路径：tracker_report/processors/layout.py

说明：版式参数（ReportLayout）、文本度量与贪心按词换行。

- 度量使用 ReportLab 字体度量（pdfmetrics.stringWidth），标准字体缺失的字形由
  ReportLab 的 notdef 替代字形计宽，不会抛出异常；
- 换行只在空白处断开，不做连字符与单词内断行；超宽单词独占一行。
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import List, Mapping, Optional, Tuple

from reportlab.pdfbase import pdfmetrics

from ..components import (
    InvalidInputError,
    estimate_text_width,
    get_logger,
    is_font_registered,
    split_words,
)
from ..variables import (
    PATH_FONT_FILE,
    PATH_BOLD_FONT_FILE,
    STYLE_PAGE_SIZE,
    STYLE_MARGIN_LEFT,
    STYLE_MARGIN_RIGHT,
    STYLE_MARGIN_BOTTOM,
    STYLE_BRAND_BAND_HEIGHT,
    STYLE_BRAND_TITLE,
    STYLE_BRAND_BAND_RGB,
    STYLE_BRAND_TEXT_RGB,
    STYLE_FONT_NAME,
    STYLE_FONT_NAME_BOLD,
    STYLE_FONT_SIZE_BASE,
    STYLE_FONT_SIZE_HEADER,
    STYLE_FONT_SIZE_TITLE,
    STYLE_FONT_SIZE_CAPTION,
    STYLE_LINE_HEIGHT,
    STYLE_COLUMN_RATIOS,
    STYLE_COLUMN_TITLES,
    STYLE_CELL_PADDING,
    STYLE_ROW_GAP,
    STYLE_CAPTION_GAP,
    STYLE_HEADER_GAP,
    STYLE_FOOTER_GAP,
    STYLE_TEXT_COLOR_RGB,
    STYLE_MUTED_TEXT_RGB,
    STYLE_HEADER_ROW_RGB,
    STYLE_ZEBRA_EVEN_RGB,
    STYLE_ZEBRA_ODD_RGB,
    STYLE_RULE_RGB,
    STYLE_RULE_WIDTH,
    ERR_CONFIG_LOAD_FAILED,
)


logger = get_logger(__name__)

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class ReportLayout:
    """报表版式参数，默认值取自 variables.py，可通过 from_overrides 覆盖。

    所有长度单位为 pt；颜色为 0-255 的 RGB 三元组。
    """

    page_width: float = STYLE_PAGE_SIZE[0]
    page_height: float = STYLE_PAGE_SIZE[1]
    margin_left: float = STYLE_MARGIN_LEFT
    margin_right: float = STYLE_MARGIN_RIGHT
    margin_bottom: float = STYLE_MARGIN_BOTTOM
    brand_band_height: float = STYLE_BRAND_BAND_HEIGHT
    brand_title: str = STYLE_BRAND_TITLE
    font_name: str = STYLE_FONT_NAME
    bold_font_name: str = STYLE_FONT_NAME_BOLD
    font_file: Optional[str] = (str(PATH_FONT_FILE) if PATH_FONT_FILE else None)
    bold_font_file: Optional[str] = (str(PATH_BOLD_FONT_FILE) if PATH_BOLD_FONT_FILE else None)
    base_font_size: float = STYLE_FONT_SIZE_BASE
    header_font_size: float = STYLE_FONT_SIZE_HEADER
    title_font_size: float = STYLE_FONT_SIZE_TITLE
    caption_font_size: float = STYLE_FONT_SIZE_CAPTION
    line_height: float = STYLE_LINE_HEIGHT
    column_ratios: Tuple[float, float, float, float] = STYLE_COLUMN_RATIOS
    column_titles: Tuple[str, str, str, str] = STYLE_COLUMN_TITLES
    cell_padding: float = STYLE_CELL_PADDING
    row_gap: float = STYLE_ROW_GAP
    caption_gap: float = STYLE_CAPTION_GAP
    header_gap: float = STYLE_HEADER_GAP
    footer_gap: float = STYLE_FOOTER_GAP
    brand_band_rgb: RGB = STYLE_BRAND_BAND_RGB
    brand_text_rgb: RGB = STYLE_BRAND_TEXT_RGB
    text_rgb: RGB = STYLE_TEXT_COLOR_RGB
    muted_text_rgb: RGB = STYLE_MUTED_TEXT_RGB
    header_row_rgb: RGB = STYLE_HEADER_ROW_RGB
    zebra_even_rgb: RGB = STYLE_ZEBRA_EVEN_RGB
    zebra_odd_rgb: RGB = STYLE_ZEBRA_ODD_RGB
    rule_rgb: RGB = STYLE_RULE_RGB
    rule_width: float = STYLE_RULE_WIDTH

    # -----------------------------
    # 几何推导
    # -----------------------------
    @property
    def content_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right

    @property
    def column_widths(self) -> Tuple[float, ...]:
        """四栏宽度（按比例分配内容区宽度）。"""
        total = float(sum(self.column_ratios))
        return tuple(self.content_width * r / total for r in self.column_ratios)

    @property
    def column_xs(self) -> Tuple[float, ...]:
        """四栏左边界 X 坐标。"""
        xs: List[float] = []
        x = self.margin_left
        for w in self.column_widths:
            xs.append(x)
            x += w
        return tuple(xs)

    @property
    def description_text_width(self) -> float:
        """描述栏可用文字宽度（扣除左右内边距）。"""
        return max(0.0, self.column_widths[3] - 2 * self.cell_padding)

    @property
    def caption_baseline(self) -> float:
        return self.page_height - self.brand_band_height - self.caption_gap

    @property
    def header_row_top(self) -> float:
        return self.caption_baseline - self.header_gap

    @property
    def header_row_height(self) -> float:
        return max(self.line_height, self.header_font_size + 2 * self.cell_padding)

    @property
    def top_of_content(self) -> float:
        """表头下方、首行上沿的 Y 坐标（每页相同）。"""
        return self.header_row_top - self.header_row_height - self.row_gap

    @property
    def footer_height(self) -> float:
        """合计区所需高度：分隔线间距 + 一行文字。"""
        return self.footer_gap + self.line_height

    # -----------------------------
    # 覆盖配置
    # -----------------------------
    @classmethod
    def from_overrides(cls, overrides: Optional[Mapping[str, object]] = None) -> "ReportLayout":
        """基于默认值应用覆盖项；未知键记录告警后忽略。

        异常：
            InvalidInputError: 栏宽比例不是 4 个正数，或数值项无法转换。
        """
        base = cls()
        if not overrides:
            return base
        known = {f.name for f in fields(cls)}
        changes: dict = {}
        unknown: List[str] = []
        for key, value in overrides.items():
            if key not in known:
                unknown.append(str(key))
                continue
            changes[key] = _coerce_field(key, value, getattr(base, key))
        if unknown:
            logger.warning("忽略未知的版式配置项：%s", ", ".join(sorted(unknown)))
        layout = replace(base, **changes)
        layout.validate()
        return layout

    def validate(self) -> None:
        ratios = self.column_ratios
        if len(ratios) != 4 or any(float(r) <= 0 for r in ratios):
            raise InvalidInputError(f"column_ratios 需为 4 个正数：{ratios!r}", ERR_CONFIG_LOAD_FAILED)
        if len(self.column_titles) != 4:
            raise InvalidInputError(f"column_titles 需为 4 项：{self.column_titles!r}", ERR_CONFIG_LOAD_FAILED)
        if self.content_width <= 0:
            raise InvalidInputError("左右页边距之和超过页宽", ERR_CONFIG_LOAD_FAILED)
        if self.line_height <= 0:
            raise InvalidInputError(f"line_height 必须为正数：{self.line_height}", ERR_CONFIG_LOAD_FAILED)


def _coerce_field(key: str, value: object, default: object) -> object:
    """按默认值的类型转换覆盖项（JSON 数组 -> 元组，数字 -> float）。"""
    try:
        if isinstance(default, tuple):
            if not isinstance(value, (list, tuple)):
                raise TypeError("需为数组")
            if key.endswith("_rgb"):
                return tuple(int(v) for v in value)
            if key == "column_ratios":
                return tuple(float(v) for v in value)
            return tuple(str(v) for v in value)
        if isinstance(default, float):
            return float(value)  # type: ignore[arg-type]
        if default is None or isinstance(default, str):
            return None if value is None else str(value)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(f"版式配置项 {key} 非法：{value!r}（{exc}）", ERR_CONFIG_LOAD_FAILED) from exc
    return value


# =============================
# 文本度量与换行
# =============================
def measure_text_width(text: str, font_name: str, font_size: float) -> float:
    """返回文本在给定字体与字号下的渲染宽度（pt）。

    - 纯函数，无缓存；追加任意非空后缀不会使宽度变小；
    - 字体未注册时回退为按字符估算（estimate_text_width）。
    """
    if not text:
        return 0.0
    if not is_font_registered(font_name):
        logger.debug("字体未注册，使用估算宽度：%s", font_name)
        return estimate_text_width(text, font_size)
    return float(pdfmetrics.stringWidth(text, font_name, font_size))


def wrap_text_lines(
    text: Optional[str],
    max_width: float,
    font_name: str,
    font_size: float,
) -> List[str]:
    """按最大行宽贪心换行。

    规则：
    - 按空白切分单词（连续空白合并，首尾空白丢弃），空文本返回空列表；
    - 以单个空格连接候选行，宽度 <= max_width 时继续累加；
    - 加入下一个单词会超宽时，结束当前行并以该单词开始新行；
    - 单个单词本身超宽时独占一行，不做字符级拆分。
    """
    words = split_words(text)
    lines: List[str] = []
    current = ""
    for word in words:
        if not current:
            current = word
            continue
        candidate = f"{current} {word}"
        if measure_text_width(candidate, font_name, font_size) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    if current:
        lines.append(current)
    return lines


__all__ = ["ReportLayout", "measure_text_width", "wrap_text_lines"]
