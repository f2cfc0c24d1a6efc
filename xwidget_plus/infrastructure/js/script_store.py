"""
JavaScript 模板存储 - 基础设施层

集中存放 xwidget-plus 生成的全部 JavaScript 模板，
调用方只负责填充（已转义的）参数。

模板:
- HEAD_ELEMENT_INSERT: 按 id 去重的 <head> 元素插入脚本
- FUNCTION_DECLARATION: 注册到命名空间的全局函数声明
- FUNCTION_CALL: 调用已注册函数的表达式
"""

from typing import Final, Sequence


class ScriptStore:
    """
    JavaScript 模板存储

    所有模板都是 str.format 格式串。
    """

    # ============================================================
    # <head> 元素注入（已存在同 id 元素时什么都不做）
    # ============================================================
    HEAD_ELEMENT_INSERT: Final[str] = (
        "__xwidget_id = '{element_id}';\n"
        "if (!document.getElementById(__xwidget_id)) {{\n"
        "    var __xwidget_elm = document.createElement('{tag}');\n"
        "    __xwidget_elm.type = '{mime_type}';\n"
        "    __xwidget_elm.id = __xwidget_id;\n"
        "    __xwidget_elm.innerHTML = '{content}';\n"
        "    document.getElementsByTagName('head')[0].appendChild(__xwidget_elm);\n"
        "}}\n"
        "null;\n"
    )

    # ============================================================
    # 命名空间函数
    # ============================================================
    FUNCTION_DECLARATION: Final[str] = "function {prefix}{namespace}_{name}({params}) {{{body}}};"

    FUNCTION_CALL: Final[str] = "{prefix}{namespace}_{name}({args})"

    @staticmethod
    def head_element_insert(tag: str, element_id: str, mime_type: str, content: str) -> str:
        """生成 <head> 元素插入脚本（参数必须已转义）"""
        return ScriptStore.HEAD_ELEMENT_INSERT.format(
            tag=tag, element_id=element_id, mime_type=mime_type, content=content
        )

    @staticmethod
    def function_declaration(prefix: str, namespace: str, name: str,
                             params: Sequence[str], body: str) -> str:
        """生成全局函数声明（标识符必须已转换为 JS 风格）"""
        return ScriptStore.FUNCTION_DECLARATION.format(
            prefix=prefix, namespace=namespace, name=name,
            params=", ".join(params), body=body
        )

    @staticmethod
    def function_call(prefix: str, namespace: str, name: str, args: Sequence[str]) -> str:
        """生成函数调用表达式（参数必须已编码为 JSON）"""
        return ScriptStore.FUNCTION_CALL.format(
            prefix=prefix, namespace=namespace, name=name, args=", ".join(args)
        )
