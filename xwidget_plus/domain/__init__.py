"""
领域层 - 实体、接口与异常
"""
