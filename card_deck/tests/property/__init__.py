"""
Property Tests - 属性测试
"""
