"""
命名空间函数定义

一次定义产出两样东西:
1. JS 函数声明，注册到 ScriptRegistry（定义时执行一次）
2. Python 可调用对象，每次调用时编码参数并通过 invoke 提交

使用示例:
    registry = ScriptRegistry()
    add = define_function(registry, FunctionDefinition(
        'demo', 'add', ('x', 'y'), 'return x+y;'))
    inject_namespace(widget, registry, 'demo')
    add(widget, 2, 3, callback=print)
"""

from typing import Any, Callable, Dict, Iterable, List, Optional

from xwidget_plus import config
from xwidget_plus.domain.entities import DefinedFunction, FunctionDefinition
from xwidget_plus.domain.interfaces import ScriptCallback, ScriptWidget
from xwidget_plus.infrastructure.js import ScriptStore
from xwidget_plus.utils.js_text import to_js_identifier
from xwidget_plus.utils.logger import get_logger

from .injector import inject_namespace
from .invoker import invoke
from .registry import ScriptRegistry

logger = get_logger(__name__)


def build_function_source(definition: FunctionDefinition) -> str:
    """生成 function __xwidget_plus_<ns>_<name>(params) {body}; 声明"""
    return ScriptStore.function_declaration(
        prefix=config.script_config.function_prefix,
        namespace=to_js_identifier(definition.namespace),
        name=to_js_identifier(definition.name),
        params=[to_js_identifier(p) for p in definition.parameter_names],
        body=definition.js_body,
    )


def callable_name(namespace: str, name: str) -> str:
    """xwwp-<namespace>-<name> 的 Python 标识符形式"""
    return to_js_identifier(f"{config.script_config.callable_prefix}-{namespace}-{name}")


def _make_callable(definition: FunctionDefinition) -> Callable[..., str]:
    namespace, name = definition.namespace, definition.name
    params = ", ".join(to_js_identifier(p) for p in definition.parameter_names)

    def call(widget: ScriptWidget, *args: Any, callback: Optional[ScriptCallback] = None) -> str:
        if len(args) != definition.arity:
            raise TypeError(
                f"{definition.qualified_name}() 需要 {definition.arity} 个参数 ({params})，"
                f"实际传入 {len(args)} 个"
            )
        return invoke(widget, namespace, name, *args, callback=callback)

    call.__name__ = callable_name(namespace, name)
    call.__qualname__ = definition.qualified_name
    call.__doc__ = definition.docstring or None
    call.definition = definition
    return call


def define_function(registry: ScriptRegistry, definition: FunctionDefinition) -> DefinedFunction:
    """
    定义一个命名空间函数

    Args:
        registry: 注册 JS 源码的注册表
        definition: 函数定义

    Returns:
        DefinedFunction（生成的源码 + 可调用对象）
    """
    source = build_function_source(definition)
    registry.register_function(definition.namespace, definition.name, source)
    logger.debug(f"定义 {definition.qualified_name}({', '.join(definition.parameter_names)})")
    return DefinedFunction(definition, source, _make_callable(definition))


class JsNamespace:
    """
    一组命名空间函数

    定义后的函数可以按属性访问，my-func 对应 ns.my_func；
    也可以按名称取出: ns["my-func"]。
    与命名空间自身属性同名的函数（name、source、inject 等）拒绝定义。
    """

    def __init__(self, registry: ScriptRegistry, name: str):
        self.registry = registry
        self.name = name
        self._functions: Dict[str, DefinedFunction] = {}

    def define(self, name: str, parameter_names: Iterable[str] = (),
               js_body: str = "", doc: str = "") -> DefinedFunction:
        attr = to_js_identifier(name)
        if hasattr(type(self), attr) or attr in self.__dict__:
            raise ValueError(
                f"函数名 {name!r} 与命名空间属性 {attr!r} 冲突，无法通过属性访问"
            )
        defined = define_function(
            self.registry,
            FunctionDefinition(self.name, name, tuple(parameter_names), js_body, doc),
        )
        self._functions[attr] = defined
        return defined

    def source(self) -> str:
        return self.registry.get_namespace_source(self.name)

    def inject(self, widget: ScriptWidget) -> str:
        """把本命名空间注入 widget 当前页面"""
        return inject_namespace(widget, self.registry, self.name)

    def function_names(self) -> List[str]:
        return [d.definition.name for d in self._functions.values()]

    def __getattr__(self, attr: str) -> DefinedFunction:
        functions = self.__dict__.get('_functions', {})
        if attr in functions:
            return functions[attr]
        raise AttributeError(f"命名空间 {self.__dict__.get('name')!r} 没有定义函数 {attr!r}")

    def __getitem__(self, name: str) -> DefinedFunction:
        try:
            return self._functions[to_js_identifier(name)]
        except KeyError:
            raise KeyError(f"命名空间 {self.name!r} 没有定义函数 {name!r}") from None

    def __contains__(self, name: str) -> bool:
        return to_js_identifier(name) in self._functions

    def __repr__(self) -> str:
        return f"JsNamespace({self.name!r}, functions={self.function_names()!r})"
