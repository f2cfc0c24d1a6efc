"""
Utils 模块初始化文件
"""

from .js_text import escape_for_injection, make_css_class, to_js_identifier

__all__ = [
    'escape_for_injection',
    'make_css_class',
    'to_js_identifier',
]
