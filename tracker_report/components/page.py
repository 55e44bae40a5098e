"""
文件路径：tracker_report/components/page.py

说明：页游标（PageCursor）。跟踪当前页的纵向写入位置并负责换页判定。

坐标约定：ReportLab 左下角为原点，offset 表示当前可写区域的上沿（自上而下递减）。

状态机：
- ACTIVE：可继续写入；
- EXHAUSTED：当前行放不下（offset - 行高 < 底边距），只能通过 start_page 分配新页回到 ACTIVE。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import RenderingFailure


class CursorState(str, Enum):
    ACTIVE = "active"
    EXHAUSTED = "exhausted"


@dataclass
class PageState:
    """单页的排版状态；每页一个新实例，不跨页共享。"""

    page_number: int
    offset: float
    page_width: float
    page_height: float
    top_of_content: float
    bottom_margin: float
    advances: int = 0  # 本页已推进次数

    @property
    def is_fresh(self) -> bool:
        """本页尚未写入任何行。"""
        return self.advances == 0

    @property
    def remaining(self) -> float:
        return self.offset - self.bottom_margin


class PageCursor:
    """页游标：fits 判定、状态迁移与位移推进。

    用法示例：
        cursor = PageCursor(page_width=595.28, page_height=841.89, bottom_margin=60)
        cursor.start_page(top_of_content=700)
        if cursor.check(row_height) is CursorState.EXHAUSTED:
            ...  # 绘制新页页眉后
            cursor.start_page(top_of_content=700)
        cursor.advance(row_height + gap)
    """

    def __init__(self, page_width: float, page_height: float, bottom_margin: float) -> None:
        self.page_width = float(page_width)
        self.page_height = float(page_height)
        self.bottom_margin = float(bottom_margin)
        self.page: PageState | None = None
        self.state: CursorState = CursorState.EXHAUSTED
        self._logger = logging.getLogger(__name__)

    @property
    def page_count(self) -> int:
        return self.page.page_number if self.page is not None else 0

    @property
    def offset(self) -> float:
        if self.page is None:
            raise RenderingFailure("页游标尚未分配页面")
        return self.page.offset

    def start_page(self, top_of_content: float) -> PageState:
        """分配新页：返回新的 PageState，游标回到 ACTIVE。"""
        if top_of_content <= self.bottom_margin:
            raise RenderingFailure(
                f"页眉占用过多：内容起点 {top_of_content:.2f} 不高于底边距 {self.bottom_margin:.2f}"
            )
        number = self.page_count + 1
        self.page = PageState(
            page_number=number,
            offset=float(top_of_content),
            page_width=self.page_width,
            page_height=self.page_height,
            top_of_content=float(top_of_content),
            bottom_margin=self.bottom_margin,
        )
        self.state = CursorState.ACTIVE
        return self.page

    def fits(self, height: float) -> bool:
        """当前页剩余空间能否容纳给定高度。"""
        return not (self.offset - height < self.bottom_margin)

    def check(self, height: float) -> CursorState:
        """换页判定；放不下则进入 EXHAUSTED。

        整页都放不下的超高行在新页上直接接受（否则会无限换页）。
        """
        if height < 0:
            raise RenderingFailure(f"高度为负：{height}")
        if self.state is CursorState.EXHAUSTED:
            return self.state
        if not self.fits(height):
            if self.page is not None and self.page.is_fresh:
                self._logger.warning(
                    "行高 %.2f 超出整页可用高度 %.2f，将在第 %s 页溢出绘制",
                    height,
                    self.page.remaining,
                    self.page.page_number,
                )
                return self.state
            self.state = CursorState.EXHAUSTED
        return self.state

    def advance(self, amount: float) -> float:
        """向下推进 amount，返回新的 offset。"""
        if self.state is CursorState.EXHAUSTED or self.page is None:
            raise RenderingFailure("页游标已耗尽，推进前必须分配新页")
        if amount < 0:
            raise RenderingFailure(f"推进量为负：{amount}")
        self.page.offset -= amount
        self.page.advances += 1
        return self.page.offset


__all__ = ["CursorState", "PageState", "PageCursor"]
