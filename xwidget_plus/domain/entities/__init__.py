# Domain Entities

"""
领域实体 - 注入与函数定义的数据模型
"""

from .head_element import HeadElementSpec
from .function_definition import FunctionDefinition, DefinedFunction

__all__ = [
    'HeadElementSpec',
    'FunctionDefinition',
    'DefinedFunction',
]
