"""
<head> 元素描述

每次注入时临时构造，不会被保存。
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class HeadElementSpec:
    """要注入 <head> 的 <script> / <style> 元素"""
    tag: str            # script / style
    element_id: str     # DOM id，用于去重
    mime_type: str      # text/javascript / text/css
    content: str        # innerHTML

    @classmethod
    def script(cls, element_id: str, content: str) -> 'HeadElementSpec':
        return cls('script', element_id, 'text/javascript', content)

    @classmethod
    def style(cls, element_id: str, content: str) -> 'HeadElementSpec':
        return cls('style', element_id, 'text/css', content)
