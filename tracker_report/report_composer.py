"""
文件路径：tracker_report/report_composer.py

模块职责：
- 排版器门面：将已授权、已过滤、已排序的工时记录序列合成为多页 PDF 报表。
- 绘制顺序：新页（品牌页眉 + 日期范围说明 + 表头）→ 逐行（构建行 → 换页判定 → 斑马纹底色 →
  四栏文字 → 推进游标 → 累计时长）→ 合计区（同样先做换页判定）→ 序列化为字节。

注意：
- 记录顺序即输出顺序，本模块不排序、不过滤；
- 斑马纹按全局行序号交替，跨页不重置；
- 行不跨页拆分：放不下的行整体移到新页；
- 空记录序列也生成单页文档（页眉、表头与 0 合计）。

变量引用说明（来自 tracker_report/variables.py）：
- CONST_CAPTION_TEMPLATE, CONST_PDF_MIME_TYPE, CONST_PDF_AUTHOR, CONST_PDF_INVARIANT, ERR_REPORT_SEALED

组件调用说明（来自 tracker_report/components）：
- PageCursor（换页判定）、resolve_report_fonts（字体）、FileHandler.report_filename（文件名）
"""

from __future__ import annotations

from dataclasses import dataclass, field
from io import BytesIO
from typing import Iterable, List, Optional, Sequence, Tuple

from reportlab.pdfgen import canvas

from .components import (
    CursorState,
    FileHandler,
    PageCursor,
    RenderingFailure,
    TimeEntry,
    format_total,
    get_logger,
    resolve_report_fonts,
)
from .processors.layout import ReportLayout
from .processors.rows import build_row
from .processors.engines.reportlab import draw_footer, draw_page_header, draw_row
from .variables import (
    CONST_CAPTION_TEMPLATE,
    CONST_PDF_AUTHOR,
    CONST_PDF_INVARIANT,
    CONST_PDF_MIME_TYPE,
    ERR_REPORT_SEALED,
)


logger = get_logger(__name__)


@dataclass
class ReportTotals:
    """时长累加器：合计写入页脚后封存，不再允许修改。"""

    minutes: int = 0
    sealed: bool = False

    def add(self, minutes: int) -> None:
        if self.sealed:
            raise RenderingFailure("合计已封存，不能继续累加", ERR_REPORT_SEALED)
        self.minutes += int(minutes)

    def seal(self) -> int:
        self.sealed = True
        return self.minutes


@dataclass
class ReportResult:
    """排版结果：PDF 字节与累计分钟数，附带下载所需元信息。"""

    pdf_bytes: bytes
    total_minutes: int
    entry_count: int
    page_count: int
    filename: str
    mime_type: str = CONST_PDF_MIME_TYPE
    layout_stats: dict = field(default_factory=dict, repr=False)


class ReportComposer:
    """工时报表排版器。

    用法示例：
        composer = ReportComposer()
        result = composer.compose(entries, ("2025-01-01", "2025-01-31"))
        Path("report.pdf").write_bytes(result.pdf_bytes)
    """

    def __init__(self, layout: Optional[ReportLayout] = None) -> None:
        self.layout = layout or ReportLayout()
        self.layout.validate()
        self.font_name, self.bold_font_name = resolve_report_fonts(
            self.layout.font_file,
            self.layout.bold_font_file,
            regular_name=self.layout.font_name,
            bold_name=self.layout.bold_font_name,
        )
        # 最近一次排版统计：pages/rows/footer_page/total_minutes
        self.last_layout_stats: Optional[dict] = None

    def compose(self, entries: Iterable[TimeEntry], date_range: Tuple[str, str]) -> ReportResult:
        """合成报表并返回结果。

        参数：
            entries: 按 (entry_date, created_at) 升序排列的记录序列。
            date_range: (start_date, end_date)，仅用于页眉说明与文件名。

        异常：
            RenderingFailure: 排版不变量被破坏；此时不返回任何文档。
        """
        layout = self.layout
        start, end = (str(date_range[0]), str(date_range[1]))
        caption = CONST_CAPTION_TEMPLATE.format(start=start, end=end)

        buffer = BytesIO()
        c = canvas.Canvas(
            buffer,
            pagesize=(layout.page_width, layout.page_height),
            invariant=CONST_PDF_INVARIANT,
        )
        c.setTitle(f"{layout.brand_title} ({start} to {end})")
        c.setAuthor(CONST_PDF_AUTHOR)

        cursor = PageCursor(layout.page_width, layout.page_height, layout.margin_bottom)
        totals = ReportTotals()
        row_stats: List[dict] = []

        def new_page() -> None:
            if cursor.page is not None:
                c.showPage()
            draw_page_header(c, layout, caption, font_name=self.font_name, bold_font_name=self.bold_font_name)
            cursor.start_page(layout.top_of_content)

        new_page()
        widths: Sequence[float] = layout.column_widths
        count = 0
        for index, entry in enumerate(entries):
            row = build_row(
                entry,
                widths,
                self.font_name,
                layout.base_font_size,
                line_height=layout.line_height,
                cell_padding=layout.cell_padding,
            )
            if cursor.check(row.height) is CursorState.EXHAUSTED:
                new_page()
            top = cursor.offset
            draw_row(c, layout, row, top, index, font_name=self.font_name)
            cursor.advance(row.height + layout.row_gap)
            totals.add(row.minutes)
            row_stats.append(
                {
                    "index": index,
                    "page": cursor.page_count,
                    "stripe": index % 2,
                    "lines": len(row.description_lines),
                    "height": row.height,
                    "top": top,
                }
            )
            count += 1

        if cursor.check(layout.footer_height) is CursorState.EXHAUSTED:
            logger.info("合计区放不下，分配第 %s 页", cursor.page_count + 1)
            new_page()
        total_minutes = totals.seal()
        draw_footer(c, layout, cursor.offset, format_total(total_minutes), bold_font_name=self.bold_font_name)
        cursor.advance(layout.footer_height)

        c.showPage()
        c.save()
        pdf_bytes = buffer.getvalue()

        stats = {
            "pages": cursor.page_count,
            "rows": row_stats,
            "footer_page": cursor.page_count,
            "total_minutes": total_minutes,
        }
        self.last_layout_stats = stats
        logger.info(
            "报表已生成：%s 条记录，%s 页，合计 %s 分钟，%s 字节",
            count,
            cursor.page_count,
            total_minutes,
            len(pdf_bytes),
        )
        return ReportResult(
            pdf_bytes=pdf_bytes,
            total_minutes=total_minutes,
            entry_count=count,
            page_count=cursor.page_count,
            filename=FileHandler.report_filename(start, end),
            layout_stats=stats,
        )


def compose_report(
    entries: Iterable[TimeEntry],
    date_range: Tuple[str, str],
    layout: Optional[ReportLayout] = None,
) -> ReportResult:
    """便捷函数：使用默认（或给定）版式合成报表。"""
    return ReportComposer(layout).compose(entries, date_range)


__all__ = ["ReportTotals", "ReportResult", "ReportComposer", "compose_report"]
