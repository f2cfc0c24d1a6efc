"""
脚本执行接口

定义 widget 执行 JavaScript 的抽象契约。
"""

from typing import Any, Callable, Optional, Protocol, runtime_checkable


ScriptCallback = Callable[[Any], None]


@runtime_checkable
class ScriptWidget(Protocol):
    """
    可执行脚本的 widget

    职责:
    - 在页面上下文中执行任意 JavaScript 源码
    - 给出回调时，用执行结果或错误值调用回调一次
    - 没有回调时只提交，不关心结果
    """

    def execute_script(self, source: str, callback: Optional[ScriptCallback] = None) -> None:
        ...
