"""
命名空间函数调用

把 Python 参数逐个编码为 JSON，拼成
__xwidget_plus_<namespace>_<name>(arg1, arg2) 表达式，交给 widget 执行。
"""

import json
from typing import Any, List, Optional

from xwidget_plus import config
from xwidget_plus.domain.errors import ScriptArgumentError
from xwidget_plus.domain.interfaces import ScriptCallback, ScriptWidget
from xwidget_plus.infrastructure.js import ScriptStore
from xwidget_plus.utils.js_text import to_js_identifier
from xwidget_plus.utils.logger import get_logger

logger = get_logger(__name__)


def encode_arguments(namespace: str, name: str, args: tuple) -> List[str]:
    """
    逐个把参数编码为 JSON

    Raises:
        ScriptArgumentError: 任一参数无法编码
    """
    encoded = []
    for index, value in enumerate(args):
        try:
            encoded.append(json.dumps(value, ensure_ascii=False, allow_nan=False))
        except (TypeError, ValueError) as e:
            raise ScriptArgumentError(namespace, name, index, value) from e
    return encoded


def function_call(namespace: str, name: str, *args: Any) -> str:
    """生成调用表达式，不提交"""
    return ScriptStore.function_call(
        prefix=config.script_config.function_prefix,
        namespace=to_js_identifier(namespace),
        name=to_js_identifier(name),
        args=encode_arguments(namespace, name, args),
    )


def invoke(widget: ScriptWidget, namespace: str, name: str, *args: Any,
           callback: Optional[ScriptCallback] = None) -> str:
    """
    调用已注入页面的命名空间函数

    编码失败时整个调用在提交前中止。

    Args:
        widget: 执行脚本的 widget
        namespace: 命名空间
        name: 函数名
        *args: 可编码为 JSON 的参数
        callback: 可选，接收 JS 返回值

    Returns:
        提交给 widget 的调用表达式
    """
    script = function_call(namespace, name, *args)
    logger.debug(f"调用 {script}")
    if callback is None:
        widget.execute_script(script)
    else:
        widget.execute_script(script, callback)
    return script
