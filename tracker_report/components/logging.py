"""
文件路径：tracker_report/components/logging.py

说明：日志与重试机制。业务模块请通过 `from ..components import get_logger` 获取 logger。
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Type

from ..variables import (
    PATH_LOGS_DIR,
    PATH_LOG_FILE,
    CONST_LOG_FORMAT,
    CONST_LOG_DATEFMT,
    CONST_MAX_RETRY,
)


_LOGGER_CONFIGURED: bool = False


def get_logger(name: str) -> logging.Logger:
    """获取 logger，首次调用时配置文件与控制台双输出。

    参数：
        name: 日志记录器名称（一般使用 __name__）。

    返回：
        logging.Logger 对象。
    """
    global _LOGGER_CONFIGURED
    if not _LOGGER_CONFIGURED:
        # 确保日志目录存在
        PATH_LOGS_DIR.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(PATH_LOG_FILE, encoding="utf-8")
        console_handler = logging.StreamHandler()
        logging.basicConfig(
            level=logging.INFO,
            format=CONST_LOG_FORMAT,
            datefmt=CONST_LOG_DATEFMT,
            handlers=[file_handler, console_handler],
        )
        _LOGGER_CONFIGURED = True
    return logging.getLogger(name)


def retry_on_exception(
    retries: int = CONST_MAX_RETRY,
    exceptions: Iterable[Type[BaseException]] = (OSError,),
    delay_s: float = 0.2,
    backoff: float = 2.0,
) -> Callable[[Callable[..., object]], Callable[..., object]]:
    """装饰器：异常自动重试，含指数退避。

    仅用于文件写出等 IO 操作；排版过程是纯计算，不做重试。

    参数：
        retries: 重试次数（不含首次）。
        exceptions: 触发重试的异常类型集合。
        delay_s: 初始等待秒数。
        backoff: 每次重试的等待倍数。
    """
    exc_types = tuple(exceptions)

    def decorator(func: Callable[..., object]) -> Callable[..., object]:
        def wrapper(*args, **kwargs):
            wait = delay_s
            attempt = 0
            while True:
                try:
                    return func(*args, **kwargs)
                except exc_types as exc:  # type: ignore[misc]
                    if attempt >= retries:
                        raise
                    logger = get_logger(func.__module__)
                    logger.warning("操作失败，准备重试（第 %s 次）：%s", attempt + 1, exc)
                    time.sleep(wait)
                    wait *= backoff
                    attempt += 1

        wrapper.__name__ = getattr(func, "__name__", "wrapper")
        wrapper.__doc__ = func.__doc__
        return wrapper

    return decorator


__all__ = ["get_logger", "retry_on_exception"]
