"""
文件路径：tracker_report/components/errors.py

说明：错误分类与统一错误信息格式。

- InvalidInputError：记录格式非法（日期、项目代码、时长），应由数据层在调用排版前拒绝；
- RenderingFailure：排版内部不变量被破坏，属于程序缺陷，必须中止且不返回半成品文档。
"""

from __future__ import annotations

from ..variables import ERR_DATA_INVALID, ERR_RENDERING_FAILED


class ErrorHandler:
    """错误处理相关工具。"""

    @staticmethod
    def format_error(err_code: int, message: str) -> str:
        """生成统一错误信息字符串。"""
        return f"[{err_code}] {message}"


class InvalidInputError(ValueError):
    """输入记录非法。"""

    def __init__(self, message: str, err_code: int = ERR_DATA_INVALID) -> None:
        self.err_code = err_code
        super().__init__(ErrorHandler.format_error(err_code, message))


class RenderingFailure(RuntimeError):
    """排版不变量被破坏（例如行高为负），不可恢复。"""

    def __init__(self, message: str, err_code: int = ERR_RENDERING_FAILED) -> None:
        self.err_code = err_code
        super().__init__(ErrorHandler.format_error(err_code, message))


__all__ = ["ErrorHandler", "InvalidInputError", "RenderingFailure"]
