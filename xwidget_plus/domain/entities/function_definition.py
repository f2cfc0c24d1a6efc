"""
命名空间函数定义相关数据模型

包含:
- FunctionDefinition: 一个 JS 函数的定义（命名空间、名称、参数、函数体）
- DefinedFunction: 定义的产物，生成的 JS 源码加上 Python 可调用对象
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Tuple


@dataclass(frozen=True)
class FunctionDefinition:
    """
    JS 函数定义

    js_body 可以直接使用转换后的参数名（my-arg -> my_arg）。
    docstring 只作为 Python 可调用对象的文档，不影响生成的代码。
    """
    namespace: str
    name: str
    parameter_names: Tuple[str, ...] = ()
    js_body: str = ""
    docstring: str = ""

    def __post_init__(self):
        # 允许传入 list，统一存为 tuple
        object.__setattr__(self, 'parameter_names', tuple(self.parameter_names))

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}"

    @property
    def arity(self) -> int:
        return len(self.parameter_names)


@dataclass(frozen=True)
class DefinedFunction:
    """define_function 的结果"""
    definition: FunctionDefinition
    source: str                                  # 已注册的 JS 函数声明
    function: Callable[..., Any] = field(compare=False)

    def __call__(self, *args, **kwargs):
        return self.function(*args, **kwargs)
