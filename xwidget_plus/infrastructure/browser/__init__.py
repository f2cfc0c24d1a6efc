"""
浏览器基础设施模块

- DrissionWidget: DrissionPage 标签页上的 ScriptWidget 实现
- BrowserManager: 连接浏览器并创建 DrissionWidget
"""

from .drission_widget import DrissionWidget
from .browser_manager import BrowserManager

__all__ = ['DrissionWidget', 'BrowserManager']
