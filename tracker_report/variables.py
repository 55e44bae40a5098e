"""
文件路径：tracker_report/variables.py

模块职责：
- 统一管理全局跨模块变量，确保模块化、无冲突、可追溯，可复用。
- 变量命名规范：{分类前缀}_{描述性名称}（全大写+下划线）。
  - PATH_：路径相关
  - STYLE_：样式相关（页面、字体、颜色、栏宽比例）
  - CONST_：通用常量
  - ERR_：错误码

使用说明：
- 业务模块严禁定义新的全局变量，必须从本模块导入所需常量。
- 版式常量仅作为 `ReportLayout` 的默认值，运行时可由配置 JSON 覆盖。
- 目录路径均使用 pathlib.Path 对象表示，使用时如需字符串请显式 str() 转换。
"""

from pathlib import Path
from typing import Optional, Tuple


# =============================
# 路径（PATH_）
# =============================
# 项目根目录：定位到当前文件（variables.py）的上两级目录
PATH_ROOT: Path = Path(__file__).resolve().parents[1]

# 各功能目录
PATH_CONFIG_DIR: Path = PATH_ROOT / "config"
PATH_EXAMPLES_DIR: Path = PATH_ROOT / "examples"
PATH_OUTPUT_DIR: Path = PATH_ROOT / "output"
PATH_LOGS_DIR: Path = PATH_ROOT / "logs"

# 关键文件路径
PATH_LAYOUT_JSON: Path = PATH_CONFIG_DIR / "report_layout.json"  # 版式覆盖配置（可选）
PATH_EXAMPLE_ENTRIES_JSON: Path = PATH_EXAMPLES_DIR / "time_entries.json"  # 示例工时记录
PATH_LOG_FILE: Path = PATH_LOGS_DIR / "app.log"  # 应用运行日志

# 字体文件（可选；为空或不存在时使用 ReportLab 内置 Helvetica）
PATH_FONT_FILE: Optional[Path] = None
PATH_BOLD_FONT_FILE: Optional[Path] = None


# =============================
# 样式（STYLE_）
# =============================
# 页面：A4 纵向（pt）
STYLE_PAGE_SIZE: Tuple[float, float] = (595.28, 841.89)
STYLE_MARGIN_LEFT: float = 50.0
STYLE_MARGIN_RIGHT: float = 50.0
STYLE_MARGIN_BOTTOM: float = 60.0  # 行底低于该值即换页

# 品牌带（每页顶部的固定高度装饰区域）
STYLE_BRAND_BAND_HEIGHT: float = 56.0
STYLE_BRAND_TITLE: str = "Tracker - Time Entries Report"
STYLE_BRAND_BAND_RGB: Tuple[int, int, int] = (10, 61, 98)  # 深蓝主色
STYLE_BRAND_TEXT_RGB: Tuple[int, int, int] = (255, 255, 255)

# 字体
STYLE_FONT_NAME: str = "Helvetica"
STYLE_FONT_NAME_BOLD: str = "Helvetica-Bold"
STYLE_FONT_SIZE_BASE: float = 10.0  # 正文字号
STYLE_FONT_SIZE_HEADER: float = 10.0  # 表头（粗体）字号
STYLE_FONT_SIZE_TITLE: float = 18.0  # 品牌标题字号
STYLE_FONT_SIZE_CAPTION: float = 11.0  # 日期范围说明字号
STYLE_LINE_HEIGHT: float = 13.0  # 单行行高（pt），行高 = 行数 * 该值

# 表格：四栏宽度比例（日期、项目、时长、描述），描述栏占比最大
STYLE_COLUMN_RATIOS: Tuple[float, float, float, float] = (0.16, 0.16, 0.14, 0.54)
STYLE_COLUMN_TITLES: Tuple[str, str, str, str] = ("Date", "Project", "Duration", "Description")
STYLE_CELL_PADDING: float = 4.0  # 单元格左右内边距
STYLE_ROW_GAP: float = 4.0  # 行间固定间距
STYLE_CAPTION_GAP: float = 18.0  # 品牌带底部到说明文字基线的距离
STYLE_HEADER_GAP: float = 14.0  # 说明文字到表头区域的距离
STYLE_FOOTER_GAP: float = 10.0  # 分隔线到合计行的距离

# 颜色
STYLE_TEXT_COLOR_RGB: Tuple[int, int, int] = (0, 0, 0)
STYLE_MUTED_TEXT_RGB: Tuple[int, int, int] = (51, 51, 51)
STYLE_HEADER_ROW_RGB: Tuple[int, int, int] = (224, 224, 224)
STYLE_ZEBRA_EVEN_RGB: Tuple[int, int, int] = (245, 247, 250)  # 偶数行底色
STYLE_ZEBRA_ODD_RGB: Tuple[int, int, int] = (255, 255, 255)  # 奇数行底色
STYLE_RULE_RGB: Tuple[int, int, int] = (204, 204, 204)
STYLE_RULE_WIDTH: float = 1.0


# =============================
# 常量（CONST_）
# =============================
CONST_ENCODING: str = "utf-8"  # 文件读写默认编码
CONST_MAX_RETRY: int = 2  # 通用重试次数，用于写文件等可重试操作
CONST_CHAR_WIDTH_RATIO: float = 0.6  # 字体未注册时的估算字宽比例
CONST_PDF_MIME_TYPE: str = "application/pdf"
CONST_PDF_AUTHOR: str = "Tracker"
CONST_PDF_INVARIANT: bool = True  # ReportLab 不变模式：相同输入生成相同字节
CONST_REPORT_FILENAME_TEMPLATE: str = "time-entries-{start}_to_{end}.pdf"
CONST_CAPTION_TEMPLATE: str = "Date range: {start} to {end}"
CONST_TOTAL_TEMPLATE: str = "Total: {duration} ({minutes} minutes)"
CONST_DURATION_TEMPLATE: str = "{hours}h {minutes}m"

# 日志格式（供 logging.basicConfig 使用）
CONST_LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
CONST_LOG_DATEFMT: str = "%Y-%m-%d %H:%M:%S"


# =============================
# 错误码（ERR_）
# =============================
# 1xxx：文件/路径相关
ERR_FILE_NOT_FOUND: int = 1001  # 输入文件不存在
ERR_PATH_NOT_WRITABLE: int = 1003  # 目标路径不可写

# 2xxx：排版/绘制相关
ERR_RENDERING_FAILED: int = 2001  # 排版不变量被破坏（如行高为负）
ERR_REPORT_SEALED: int = 2002  # 合计已封存后仍被修改

# 3xxx：写入相关
ERR_PDF_WRITE_FAILED: int = 3002  # PDF 写入失败

# 4xxx：配置/数据相关
ERR_CONFIG_LOAD_FAILED: int = 4001  # 配置加载失败
ERR_DATA_INVALID: int = 4002  # 输入数据非法


# =============================
# 导出声明
# =============================
__all__ = [
    # PATH_
    "PATH_ROOT",
    "PATH_CONFIG_DIR",
    "PATH_EXAMPLES_DIR",
    "PATH_OUTPUT_DIR",
    "PATH_LOGS_DIR",
    "PATH_LAYOUT_JSON",
    "PATH_EXAMPLE_ENTRIES_JSON",
    "PATH_LOG_FILE",
    "PATH_FONT_FILE",
    "PATH_BOLD_FONT_FILE",
    # STYLE_
    "STYLE_PAGE_SIZE",
    "STYLE_MARGIN_LEFT",
    "STYLE_MARGIN_RIGHT",
    "STYLE_MARGIN_BOTTOM",
    "STYLE_BRAND_BAND_HEIGHT",
    "STYLE_BRAND_TITLE",
    "STYLE_BRAND_BAND_RGB",
    "STYLE_BRAND_TEXT_RGB",
    "STYLE_FONT_NAME",
    "STYLE_FONT_NAME_BOLD",
    "STYLE_FONT_SIZE_BASE",
    "STYLE_FONT_SIZE_HEADER",
    "STYLE_FONT_SIZE_TITLE",
    "STYLE_FONT_SIZE_CAPTION",
    "STYLE_LINE_HEIGHT",
    "STYLE_COLUMN_RATIOS",
    "STYLE_COLUMN_TITLES",
    "STYLE_CELL_PADDING",
    "STYLE_ROW_GAP",
    "STYLE_CAPTION_GAP",
    "STYLE_HEADER_GAP",
    "STYLE_FOOTER_GAP",
    "STYLE_TEXT_COLOR_RGB",
    "STYLE_MUTED_TEXT_RGB",
    "STYLE_HEADER_ROW_RGB",
    "STYLE_ZEBRA_EVEN_RGB",
    "STYLE_ZEBRA_ODD_RGB",
    "STYLE_RULE_RGB",
    "STYLE_RULE_WIDTH",
    # CONST_
    "CONST_ENCODING",
    "CONST_MAX_RETRY",
    "CONST_CHAR_WIDTH_RATIO",
    "CONST_PDF_MIME_TYPE",
    "CONST_PDF_AUTHOR",
    "CONST_PDF_INVARIANT",
    "CONST_REPORT_FILENAME_TEMPLATE",
    "CONST_CAPTION_TEMPLATE",
    "CONST_TOTAL_TEMPLATE",
    "CONST_DURATION_TEMPLATE",
    "CONST_LOG_FORMAT",
    "CONST_LOG_DATEFMT",
    # ERR_
    "ERR_FILE_NOT_FOUND",
    "ERR_PATH_NOT_WRITABLE",
    "ERR_RENDERING_FAILED",
    "ERR_REPORT_SEALED",
    "ERR_PDF_WRITE_FAILED",
    "ERR_CONFIG_LOAD_FAILED",
    "ERR_DATA_INVALID",
]
