"""
JavaScript / CSS 文本工具

生成注入页面的代码时使用的纯字符串函数:
- make_css_class: 生成 CSS 类定义
- escape_for_injection: 转义单引号 JS 字符串字面量
- to_js_identifier: 把 lisp 风格标识符 (my-func) 转为 JS 风格 (my_func)
"""

from typing import Any, Iterable, Mapping, Tuple, Union

StyleDeclarations = Union[Mapping[str, Any], Iterable[Tuple[str, Any]]]


def make_css_class(class_name: str, declarations: StyleDeclarations) -> str:
    """
    生成 CSS 类定义文本

    不对属性和值做任何转义，非法 CSS 原样输出。

    Args:
        class_name: 类名（不带前导点）
        declarations: 有序的 (属性, 值) 序列，或按插入顺序遍历的字典

    Returns:
        形如 ".x { color: red; top: 0; }\\n" 的文本
    """
    if isinstance(declarations, Mapping):
        declarations = declarations.items()

    body = "; ".join(f"{prop}: {value}" for prop, value in declarations)
    if not body:
        return f".{class_name} {{ }}\n"
    return f".{class_name} {{ {body}; }}\n"


def escape_for_injection(text: Any) -> str:
    """
    转义要嵌入单引号 JS 字符串字面量的文本

    只处理单引号和换行，不处理反斜杠、</script> 等。
    """
    return str(text).replace("'", "\\'").replace("\n", "\\n")


def to_js_identifier(identifier: Any) -> str:
    """
    把标识符中的 '-' 替换为 '_'

    接受字符串、带 __name__ 的对象（函数等）或任意可 str() 的对象。
    不校验结果是否为合法 JS 标识符。
    """
    if not isinstance(identifier, str):
        identifier = getattr(identifier, '__name__', None) or str(identifier)
    return identifier.replace("-", "_")
