"""
xwidget-plus 异常定义

只有两类错误由本层自己发现:
- 参数无法编码为 JSON（在提交脚本之前同步抛出）
- 浏览器调试端口不可用

脚本在页面中执行失败属于 widget 自己的错误通道，本层不做转换。
"""


class XwidgetPlusError(Exception):
    """xwidget-plus 所有异常的基类"""


class ScriptArgumentError(XwidgetPlusError, TypeError):
    """调用参数无法编码为 JSON"""

    def __init__(self, namespace: str, name: str, index: int, value: object):
        self.namespace = namespace
        self.name = name
        self.index = index
        self.value = value
        super().__init__(
            f"{namespace}.{name}: 第 {index} 个参数无法编码为 JSON: {value!r}"
        )


class WidgetConnectionError(XwidgetPlusError, ConnectionError):
    """无法连接到浏览器调试端口"""
