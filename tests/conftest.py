"""
Pytest 配置文件

提供测试所需的 fixtures 和共享配置。
"""

import re
import sys
from pathlib import Path

import pytest

# 确保项目根目录在 Python 路径中
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


# ============================================================
# Recording Widget
# ============================================================

class RecordingWidget:
    """记录提交脚本的 widget，用于测试"""

    def __init__(self):
        self.submissions = []   # [(source, callback)]
        self.results = {}       # source -> 回调收到的值

    def execute_script(self, source, callback=None):
        self.submissions.append((source, callback))
        if callback is not None and source in self.results:
            callback(self.results[source])

    @property
    def scripts(self):
        return [source for source, _ in self.submissions]


@pytest.fixture
def widget():
    """记录脚本的 widget"""
    return RecordingWidget()


@pytest.fixture
def registry():
    """空的 ScriptRegistry"""
    from xwidget_plus.core.registry import ScriptRegistry
    return ScriptRegistry()


# ============================================================
# Model DOM
# ============================================================

def _unescape(text):
    return text.replace("\\n", "\n").replace("\\'", "'")


_QUOTED = r"'((?:[^'\\]|\\.)*)'"


class ModelDom:
    """
    极简 DOM 模型

    只理解 <head> 元素插入脚本：按脚本中的 getElementById 判断是否已存在，
    不存在时追加元素。
    """

    def __init__(self):
        self.head = []   # [{"tag", "id", "type", "innerHTML"}]

    def get_element_by_id(self, element_id):
        for element in self.head:
            if element["id"] == element_id:
                return element
        return None

    def run(self, script):
        element_id = _unescape(re.search(r"__xwidget_id = " + _QUOTED + ";", script).group(1))
        if self.get_element_by_id(element_id) is not None:
            return None
        self.head.append({
            "tag": _unescape(re.search(r"createElement\(" + _QUOTED + r"\)", script).group(1)),
            "id": element_id,
            "type": _unescape(re.search(r"\.type = " + _QUOTED + ";", script).group(1)),
            "innerHTML": _unescape(re.search(r"\.innerHTML = " + _QUOTED + ";", script).group(1)),
        })
        return None


@pytest.fixture
def model_dom():
    """空的 DOM 模型"""
    return ModelDom()


# ============================================================
# Fake DrissionPage Tab
# ============================================================

class FakeTab:
    """模拟 DrissionPage 标签页，run_js 返回预设结果或抛出预设异常"""

    def __init__(self):
        self.js_results = {}
        self.js_errors = {}
        self.calls = []

    def run_js(self, script, *args, as_expr=False, timeout=None):
        self.calls.append((script, as_expr, timeout))
        if script in self.js_errors:
            raise self.js_errors[script]
        return self.js_results.get(script)


@pytest.fixture
def fake_tab():
    """模拟 DrissionPage 标签页"""
    return FakeTab()
