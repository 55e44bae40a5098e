"""
文件路径：tracker_report/components/io.py

说明：文件与路径相关的通用处理器（输出目录、可写性探测、报表文件写出）。
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from ..variables import (
    PATH_OUTPUT_DIR,
    CONST_REPORT_FILENAME_TEMPLATE,
    ERR_PATH_NOT_WRITABLE,
    ERR_FILE_NOT_FOUND,
    ERR_PDF_WRITE_FAILED,
)
from .logging import get_logger, retry_on_exception


logger = get_logger(__name__)


class FileHandler:
    """文件与路径相关的通用处理器。"""

    @staticmethod
    def validate_readable_file(path: Path) -> None:
        """校验文件可读。

        异常：
            FileNotFoundError: 文件不存在或不可读。
        """
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"[{ERR_FILE_NOT_FOUND}] 文件不存在或不可读: {path}")

    @staticmethod
    def ensure_parent_writable(target: Path) -> None:
        """确保目标文件的父目录可写，不存在则创建。

        异常：
            PermissionError: 目录不可写。
        """
        parent = target.parent
        parent.mkdir(parents=True, exist_ok=True)
        # Windows 上 os.access 可能不可靠，尝试创建临时文件验证
        marker = parent / f".__writable_check_{int(time.time()*1000)}"
        try:
            with open(marker, "w", encoding="utf-8") as f:  # noqa: P103
                f.write("ok")
        except OSError as exc:
            raise PermissionError(f"[{ERR_PATH_NOT_WRITABLE}] 目录不可写: {parent}") from exc
        marker.unlink(missing_ok=True)

    @staticmethod
    def report_filename(start: str, end: str) -> str:
        """报表下载文件名，例如 time-entries-2025-01-01_to_2025-01-31.pdf"""
        return CONST_REPORT_FILENAME_TEMPLATE.format(start=start, end=end)

    @staticmethod
    def report_output_path(start: str, end: str, output_dir: Optional[Path] = None) -> Path:
        """生成位于 output 目录（或自定义目录）下的报表输出路径。"""
        target_dir = output_dir if output_dir is not None else PATH_OUTPUT_DIR
        target_dir.mkdir(parents=True, exist_ok=True)
        return target_dir / FileHandler.report_filename(start, end)

    @staticmethod
    @retry_on_exception()
    def _write_bytes_once(target: Path, data: bytes) -> Path:
        FileHandler.ensure_parent_writable(target)
        with open(target, "wb") as f:  # noqa: P103
            f.write(data)
        return target

    @staticmethod
    def write_bytes(target: Path, data: bytes) -> Path:
        """写出二进制内容（失败时按指数退避重试）。

        异常：
            OSError: 重试耗尽后仍写入失败，错误信息带 ERR_PDF_WRITE_FAILED 错误码。
        """
        try:
            FileHandler._write_bytes_once(target, data)
        except OSError as exc:
            raise OSError(f"[{ERR_PDF_WRITE_FAILED}] 文件写入失败: {target}（{exc}）") from exc
        logger.info("已写出文件：%s（%s 字节）", target, len(data))
        return target


__all__ = ["FileHandler"]
