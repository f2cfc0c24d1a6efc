# JavaScript Infrastructure

"""
JavaScript 模板库 - 集中管理所有生成的 JS 代码
"""

from .script_store import ScriptStore

__all__ = ['ScriptStore']
