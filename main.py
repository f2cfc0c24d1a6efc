"""
xwidget-plus 演示入口

连接已开启远程调试的 Chromium，注入一个 demo 命名空间并调用其中的函数。

    chrome --remote-debugging-port=9222
    python main.py
"""

import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from xwidget_plus import JsNamespace, ScriptRegistry, inject_css_class
from xwidget_plus import config
from xwidget_plus.domain.errors import WidgetConnectionError
from xwidget_plus.infrastructure.browser import BrowserManager
from xwidget_plus.utils.logger import get_logger, setup_logging


def build_demo_namespace(registry: ScriptRegistry) -> JsNamespace:
    """定义演示用的 demo 命名空间"""
    demo = JsNamespace(registry, 'demo')
    demo.define('add', ['x', 'y'], 'return x+y;', doc="在页面中计算 x + y")
    demo.define(
        'set-title', ['new-title'],
        'var old = document.title; document.title = new_title; return old;',
        doc="修改页面标题，返回旧标题",
    )
    return demo


def main():
    """程序入口"""
    setup_logging(level=config.log_config.level, log_file=config.log_config.log_file)
    logger = get_logger("xwidget_plus.main")

    manager = BrowserManager()
    try:
        manager.connect()
    except WidgetConnectionError as e:
        logger.error(str(e))
        return 1

    demo = build_demo_namespace(ScriptRegistry())

    with manager.get_widget() as widget:
        inject_css_class(widget, 'xwwp-demo-style', 'xwwp-highlight',
                         [('outline', '2px solid orange'), ('background', '#fff3c4')])
        demo.inject(widget)
        demo.add(widget, 2, 3, callback=lambda result: logger.info(f"demo.add(2, 3) = {result}"))
        demo.set_title(widget, "xwidget-plus",
                       callback=lambda old: logger.info(f"旧标题: {old}"))
        widget.flush(config.browser_config.js_timeout)

    logger.success("演示完成")
    return 0


if __name__ == "__main__":
    sys.exit(main())
