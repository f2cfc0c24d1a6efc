"""
基础设施层 - JS 模板与浏览器适配
"""
