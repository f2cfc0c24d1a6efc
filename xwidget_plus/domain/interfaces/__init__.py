# Domain Interfaces

"""
领域接口 - 使用 Protocol (Structural Subtyping) 定义的抽象契约
"""

from .widget import ScriptWidget, ScriptCallback

__all__ = [
    'ScriptWidget',
    'ScriptCallback',
]
