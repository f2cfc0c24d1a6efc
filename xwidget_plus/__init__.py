"""
xwidget-plus - 嵌入式浏览器 widget 的 JavaScript 注入与调用工具

注册 JavaScript 函数，把它们连同 CSS/JS 资源注入页面 <head>，
再以 JSON 编码的参数调用，可选地通过回调接收结果。

用法:
    from xwidget_plus import JsNamespace, ScriptRegistry

    registry = ScriptRegistry()
    demo = JsNamespace(registry, 'demo')
    demo.define('add', ['x', 'y'], 'return x+y;')

    demo.inject(widget)
    demo.add(widget, 2, 3, callback=print)
"""

from .core import (
    ScriptRegistry,
    default_registry,
    JsNamespace,
    define_function,
    function_call,
    invoke,
    inject_head_element,
    inject_script,
    inject_style,
    inject_css_class,
    inject_namespace,
)
from .domain.entities import DefinedFunction, FunctionDefinition, HeadElementSpec
from .domain.errors import ScriptArgumentError, WidgetConnectionError, XwidgetPlusError
from .domain.interfaces import ScriptWidget
from .utils.js_text import escape_for_injection, make_css_class, to_js_identifier

__version__ = "0.1.0"

__all__ = [
    'ScriptRegistry',
    'default_registry',
    'JsNamespace',
    'define_function',
    'function_call',
    'invoke',
    'inject_head_element',
    'inject_script',
    'inject_style',
    'inject_css_class',
    'inject_namespace',
    'DefinedFunction',
    'FunctionDefinition',
    'HeadElementSpec',
    'ScriptArgumentError',
    'WidgetConnectionError',
    'XwidgetPlusError',
    'ScriptWidget',
    'escape_for_injection',
    'make_css_class',
    'to_js_identifier',
]
