"""
文件路径：tracker_report/processors/engines/reportlab.py

说明：ReportLab 画布绘制原语：品牌页眉、表头、斑马纹行、合计区。

坐标约定：ReportLab 左下为原点；传入的 top 为区域上沿，区域向下延伸 height。
本模块只负责绘制，不做换页判定（由页游标与排版器负责）。
"""

from __future__ import annotations

from typing import Sequence, Tuple

from reportlab.pdfgen import canvas

from ..layout import ReportLayout
from ..rows import RenderedRow


def _fill(c: canvas.Canvas, rgb: Tuple[int, int, int]) -> None:
    c.setFillColorRGB(*(v / 255.0 for v in rgb))


def _stroke(c: canvas.Canvas, rgb: Tuple[int, int, int]) -> None:
    c.setStrokeColorRGB(*(v / 255.0 for v in rgb))


def baseline_in_slot(slot_top: float, line_height: float, font_size: float) -> float:
    """行槽内文字基线：使字形在槽内大致垂直居中。"""
    return slot_top - line_height / 2.0 - font_size * 0.35


def draw_page_header(
    c: canvas.Canvas,
    layout: ReportLayout,
    caption: str,
    *,
    font_name: str,
    bold_font_name: str,
) -> None:
    """绘制每页的品牌带、日期范围说明与表头。"""
    w, h = layout.page_width, layout.page_height

    # 品牌带
    band_bottom = h - layout.brand_band_height
    _fill(c, layout.brand_band_rgb)
    c.rect(0, band_bottom, w, layout.brand_band_height, stroke=0, fill=1)
    _fill(c, layout.brand_text_rgb)
    c.setFont(bold_font_name, layout.title_font_size)
    c.drawString(
        layout.margin_left,
        band_bottom + (layout.brand_band_height - layout.title_font_size) / 2.0 + layout.title_font_size * 0.15,
        layout.brand_title,
    )

    # 日期范围说明
    _fill(c, layout.muted_text_rgb)
    c.setFont(font_name, layout.caption_font_size)
    c.drawString(layout.margin_left, layout.caption_baseline, caption)

    draw_column_headers(c, layout, bold_font_name=bold_font_name)


def draw_column_headers(c: canvas.Canvas, layout: ReportLayout, *, bold_font_name: str) -> None:
    top = layout.header_row_top
    height = layout.header_row_height
    _fill(c, layout.header_row_rgb)
    c.rect(layout.margin_left, top - height, layout.content_width, height, stroke=0, fill=1)
    _fill(c, layout.text_rgb)
    c.setFont(bold_font_name, layout.header_font_size)
    y = baseline_in_slot(top, height, layout.header_font_size)
    for x, title in zip(layout.column_xs, layout.column_titles):
        c.drawString(x + layout.cell_padding, y, title)


def draw_row(
    c: canvas.Canvas,
    layout: ReportLayout,
    row: RenderedRow,
    top: float,
    stripe_index: int,
    *,
    font_name: str,
) -> None:
    """绘制一行：先铺斑马纹底色，再绘制四栏文字（描述多行纵向堆叠）。"""
    band_rgb = layout.zebra_even_rgb if stripe_index % 2 == 0 else layout.zebra_odd_rgb
    _fill(c, band_rgb)
    c.rect(layout.margin_left, top - row.height, layout.content_width, row.height, stroke=0, fill=1)

    xs: Sequence[float] = layout.column_xs
    pad = layout.cell_padding
    size = layout.base_font_size
    lh = layout.line_height
    first_baseline = baseline_in_slot(top, lh, size)

    _fill(c, layout.text_rgb)
    c.setFont(font_name, size)
    c.drawString(xs[0] + pad, first_baseline, row.date_text)
    c.drawString(xs[1] + pad, first_baseline, row.project_text)
    c.drawString(xs[2] + pad, first_baseline, row.duration_text)

    _fill(c, layout.muted_text_rgb)
    for i, line in enumerate(row.description_lines):
        c.drawString(xs[3] + pad, first_baseline - i * lh, line)


def draw_footer(
    c: canvas.Canvas,
    layout: ReportLayout,
    top: float,
    total_text: str,
    *,
    bold_font_name: str,
) -> None:
    """绘制合计区：水平分隔线 + 合计文字。"""
    _stroke(c, layout.rule_rgb)
    c.setLineWidth(layout.rule_width)
    c.line(layout.margin_left, top, layout.page_width - layout.margin_right, top)

    _fill(c, layout.text_rgb)
    c.setFont(bold_font_name, layout.base_font_size)
    slot_top = top - layout.footer_gap
    c.drawString(
        layout.margin_left + layout.cell_padding,
        baseline_in_slot(slot_top, layout.line_height, layout.base_font_size),
        total_text,
    )


__all__ = [
    "baseline_in_slot",
    "draw_page_header",
    "draw_column_headers",
    "draw_row",
    "draw_footer",
]
