"""
xwidget-plus 配置中心

集中管理生成脚本的命名约定、浏览器连接参数和日志参数。
浏览器与日志参数支持从环境变量读取。

用法:
    from xwidget_plus import config

    prefix = config.script_config.function_prefix
    timeout = config.browser_config.js_timeout
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ScriptConfig:
    """
    生成脚本的命名约定

    这些名字是页面上可见的契约，不允许通过环境变量修改。
    """
    function_prefix: str = "__xwidget_plus_"  # 全局 JS 函数名前缀
    namespace_id_prefix: str = "--xwwp-"      # 命名空间 <script> 元素 id 前缀
    callable_prefix: str = "xwwp"             # Python 可调用对象名前缀


@dataclass
class BrowserConfig:
    """浏览器连接配置"""
    addr: str = "127.0.0.1:9222"       # Chromium 调试地址
    js_timeout: float = 10.0           # 单个脚本执行超时(秒)
    port_probe_timeout: float = 0.5    # 端口探测超时(秒)


@dataclass
class LogConfig:
    """日志配置"""
    level: str = "INFO"
    log_file: Optional[str] = None


def _get_env_float(key: str, default: float) -> float:
    """从环境变量获取浮点数配置"""
    value = os.environ.get(key)
    if value:
        try:
            return float(value)
        except ValueError:
            pass
    return default


def _get_env_str(key: str, default: Optional[str]) -> Optional[str]:
    """从环境变量获取字符串配置，空字符串视为未设置"""
    value = os.environ.get(key)
    return value if value else default


def _load_browser_config() -> BrowserConfig:
    return BrowserConfig(
        addr=_get_env_str('XWWP_BROWSER_ADDR', "127.0.0.1:9222"),
        js_timeout=_get_env_float('XWWP_JS_TIMEOUT', 10.0),
        port_probe_timeout=_get_env_float('XWWP_PORT_PROBE_TIMEOUT', 0.5),
    )


def _load_log_config() -> LogConfig:
    return LogConfig(
        level=_get_env_str('XWWP_LOG_LEVEL', "INFO"),
        log_file=_get_env_str('XWWP_LOG_FILE', None),
    )


# ============================================================
# 全局配置实例
# ============================================================

script_config = ScriptConfig()

browser_config = _load_browser_config()

log_config = _load_log_config()


def reload_config():
    """从环境变量重新读取浏览器与日志配置"""
    global browser_config, log_config

    browser_config = _load_browser_config()
    log_config = _load_log_config()
