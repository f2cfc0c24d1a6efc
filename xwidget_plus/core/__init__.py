"""
核心模块

- registry: 命名空间 -> 函数名 -> JS 源码
- injector: <head> 元素与命名空间注入
- invoker: 命名空间函数调用
- definer: 由一份定义同时生成 JS 源码与 Python 可调用对象
"""

from .registry import ScriptRegistry, default_registry
from .injector import (
    build_head_element_script,
    inject_head_element,
    inject_script,
    inject_style,
    inject_css_class,
    inject_namespace,
    namespace_element_id,
)
from .invoker import encode_arguments, function_call, invoke
from .definer import JsNamespace, build_function_source, callable_name, define_function

__all__ = [
    'ScriptRegistry',
    'default_registry',
    'build_head_element_script',
    'inject_head_element',
    'inject_script',
    'inject_style',
    'inject_css_class',
    'inject_namespace',
    'namespace_element_id',
    'encode_arguments',
    'function_call',
    'invoke',
    'JsNamespace',
    'build_function_source',
    'callable_name',
    'define_function',
]
