"""
<head> 元素注入

生成"按 id 去重、不存在才创建并追加到 <head>"的脚本，交给 widget 执行。
去重逻辑在脚本里完成，同一 id 重复注入在页面上是空操作。
"""

from typing import TYPE_CHECKING

from xwidget_plus import config
from xwidget_plus.domain.entities import HeadElementSpec
from xwidget_plus.domain.interfaces import ScriptWidget
from xwidget_plus.infrastructure.js import ScriptStore
from xwidget_plus.utils.js_text import StyleDeclarations, escape_for_injection, make_css_class
from xwidget_plus.utils.logger import get_logger

if TYPE_CHECKING:
    from .registry import ScriptRegistry

logger = get_logger(__name__)


def build_head_element_script(spec: HeadElementSpec) -> str:
    """
    生成 <head> 元素插入脚本

    四个字段都会经过 escape_for_injection。
    """
    return ScriptStore.head_element_insert(
        tag=escape_for_injection(spec.tag),
        element_id=escape_for_injection(spec.element_id),
        mime_type=escape_for_injection(spec.mime_type),
        content=escape_for_injection(spec.content),
    )


def inject_head_element(widget: ScriptWidget, tag: str, element_id: str,
                        mime_type: str, content: str) -> str:
    """
    把一个 <script> / <style> 元素注入页面 <head>

    不等待结果。

    Args:
        widget: 执行脚本的 widget
        tag: 元素标签
        element_id: 元素 id
        mime_type: type 属性
        content: innerHTML

    Returns:
        提交给 widget 的脚本
    """
    script = build_head_element_script(HeadElementSpec(tag, element_id, mime_type, content))
    logger.debug(f"注入 <{tag} id={element_id}> ({len(content)} 字符)")
    widget.execute_script(script)
    return script


def inject_script(widget: ScriptWidget, element_id: str, script_body: str) -> str:
    """注入 <script type="text/javascript">"""
    spec = HeadElementSpec.script(element_id, script_body)
    return inject_head_element(widget, spec.tag, spec.element_id, spec.mime_type, spec.content)


def inject_style(widget: ScriptWidget, element_id: str, style_body: str) -> str:
    """注入 <style type="text/css">"""
    spec = HeadElementSpec.style(element_id, style_body)
    return inject_head_element(widget, spec.tag, spec.element_id, spec.mime_type, spec.content)


def inject_css_class(widget: ScriptWidget, element_id: str, class_name: str,
                     declarations: StyleDeclarations) -> str:
    """把 make_css_class 生成的类定义作为 <style> 注入"""
    return inject_style(widget, element_id, make_css_class(class_name, declarations))


def namespace_element_id(namespace: str) -> str:
    """命名空间 <script> 元素的 id: --xwwp-<namespace>"""
    return f"{config.script_config.namespace_id_prefix}{namespace}"


def inject_namespace(widget: ScriptWidget, registry: 'ScriptRegistry', namespace: str) -> str:
    """
    把命名空间下注册的全部函数注入页面

    每个 widget 会话在调用该命名空间的函数之前都需要执行一次，
    调用函数时不会自动注入。
    """
    source = registry.get_namespace_source(namespace)
    if not source:
        logger.warning(f"命名空间 {namespace} 没有注册任何函数")
    return inject_script(widget, namespace_element_id(namespace), source)
