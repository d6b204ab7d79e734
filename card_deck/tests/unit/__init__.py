"""
Unit Tests - 单元测试
"""
