"""
文件路径：tracker_report/components/fonts.py

说明：字体注册与选择。

- 默认使用 ReportLab 内置 Helvetica / Helvetica-Bold（无需注册）；
- 若配置了 TTF/OTF 字体文件（例如描述中含中文），则注册后使用，注册失败回退内置字体。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ..variables import STYLE_FONT_NAME, STYLE_FONT_NAME_BOLD
from .logging import get_logger


logger = get_logger(__name__)


def is_font_registered(font_name: str) -> bool:
    """字体是否已可用于度量（内置 14 种标准字体视为已注册）。"""
    if font_name in pdfmetrics.standardFonts:
        return True
    return font_name in pdfmetrics.getRegisteredFontNames()


def register_font_file(path: Path, face_name: Optional[str] = None) -> Optional[str]:
    """注册 TTF/OTF 字体文件，成功返回字体名，失败返回 None。"""
    p = Path(path)
    if not p.exists() or p.suffix.lower() not in {".ttf", ".otf"}:
        logger.warning("忽略不存在或非 TTF/OTF 的字体文件：%s", p)
        return None
    name = face_name or p.stem
    if is_font_registered(name):
        return name
    try:
        pdfmetrics.registerFont(TTFont(name, str(p)))
    except Exception as exc:  # noqa: BLE001
        logger.warning("注册字体失败：%s -> %s，原因：%s", name, p, exc)
        return None
    logger.info("已注册字体：%s -> %s", name, p)
    return name


def resolve_report_fonts(
    font_file: Optional[Path] = None,
    bold_font_file: Optional[Path] = None,
    regular_name: str = STYLE_FONT_NAME,
    bold_name: str = STYLE_FONT_NAME_BOLD,
) -> Tuple[str, str]:
    """确定正文与粗体字体名。

    - 配置了正文字体文件且注册成功：正文使用该字体；若未配置粗体文件，粗体也使用该字体；
    - 配置了粗体字体文件且注册成功：粗体使用该字体；
    - 其余情况回退内置字体。

    返回：
        (正文字体名, 粗体字体名)
    """
    regular = regular_name
    bold = bold_name
    if font_file:
        registered = register_font_file(Path(font_file))
        if registered:
            regular = registered
            bold = registered
    if bold_font_file:
        registered_bold = register_font_file(Path(bold_font_file))
        if registered_bold:
            bold = registered_bold
    if not is_font_registered(regular):
        logger.warning("正文字体未注册：%s，回退 %s", regular, STYLE_FONT_NAME)
        regular = STYLE_FONT_NAME
    if not is_font_registered(bold):
        logger.warning("粗体字体未注册：%s，回退 %s", bold, STYLE_FONT_NAME_BOLD)
        bold = STYLE_FONT_NAME_BOLD
    return regular, bold


__all__ = ["is_font_registered", "register_font_file", "resolve_report_fonts"]
