"""
xwidget-plus 日志系统

在标准 logging 之上提供:
- 模块级命名日志器
- 回显回调（把消息同步转发给宿主，例如编辑器的消息栏）
- success 级别
- 可选的文件日志

用法:
    from xwidget_plus.utils.logger import get_logger, setup_logging

    setup_logging()
    logger = get_logger(__name__)
    logger.debug("注入脚本 --xwwp-demo")

    echo_logger = get_logger(__name__, echo_callback=my_echo)
    echo_logger.success("命名空间已注入")
"""

import logging
import sys
from typing import Optional, Callable, Literal, Union
from pathlib import Path


LogLevel = Literal["debug", "info", "success", "warning", "error", "critical"]

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
TIME_FORMAT = "%H:%M:%S"

EchoCallback = Callable[[str, str], None]


class XwwpLogger:
    """
    xwidget-plus 日志封装

    每条日志先写入标准 logging，再交给回显回调（如果有）。
    回调失败不会影响日志本身。
    """

    # 介于 INFO=20 和 WARNING=30 之间
    SUCCESS_LEVEL = 25

    def __init__(self, name: str, echo_callback: Optional[EchoCallback] = None):
        """
        Args:
            name: 日志器名称（通常为 __name__）
            echo_callback: 回显回调，签名: (message, level) -> None
        """
        self.logger = logging.getLogger(name)
        self.echo_callback = echo_callback

        if logging.getLevelName(self.SUCCESS_LEVEL) != 'SUCCESS':
            logging.addLevelName(self.SUCCESS_LEVEL, 'SUCCESS')

    def _emit(self, level: int, message: str, level_name: str):
        self.logger.log(level, message)
        if self.echo_callback:
            try:
                self.echo_callback(message, level_name)
            except Exception:
                self.logger.debug("echo callback failed", exc_info=True)

    def debug(self, message: str):
        self._emit(logging.DEBUG, message, "debug")

    def info(self, message: str):
        self._emit(logging.INFO, message, "info")

    def success(self, message: str):
        """成功级别日志（带 ✅ 前缀）"""
        self._emit(self.SUCCESS_LEVEL, f"✅ {message}", "success")

    def warning(self, message: str):
        self._emit(logging.WARNING, message, "warning")

    def error(self, message: str):
        self._emit(logging.ERROR, message, "error")

    def critical(self, message: str):
        self._emit(logging.CRITICAL, message, "critical")

    def set_echo_callback(self, callback: Optional[EchoCallback]):
        """设置或替换回显回调"""
        self.echo_callback = callback


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    format_string: str = DEFAULT_FORMAT
):
    """
    初始化日志系统

    Args:
        level: 日志级别（整数或 "DEBUG" 这样的名称）
        log_file: 日志文件路径（可选）
        format_string: 日志格式
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=level,
        format=format_string,
        datefmt=TIME_FORMAT,
        handlers=handlers,
        force=True
    )

    # DrissionPage 底层的 HTTP / websocket 日志过于啰嗦
    logging.getLogger('urllib3').setLevel(logging.WARNING)
    logging.getLogger('websocket').setLevel(logging.WARNING)


def get_logger(name: str, echo_callback: Optional[EchoCallback] = None) -> XwwpLogger:
    """
    获取 xwidget-plus 日志器

    Args:
        name: 日志器名称（通常为 __name__）
        echo_callback: 回显回调

    Returns:
        XwwpLogger 实例
    """
    return XwwpLogger(name, echo_callback)


_default_logger: Optional[XwwpLogger] = None


def log(message: str, level: LogLevel = "info"):
    """便捷日志函数，使用名为 xwidget_plus 的默认日志器"""
    global _default_logger
    if _default_logger is None:
        _default_logger = get_logger("xwidget_plus")

    log_method = getattr(_default_logger, level, _default_logger.info)
    log_method(message)
